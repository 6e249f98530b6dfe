from .customer_router import router as customer_router
from .invoice_router import router as invoice_router
from .inventory_router import router as inventory_router
from .settings_router import router as settings_router
from .storage_router import router as storage_router
from .export_router import router as export_router
defined_routers = [
    customer_router,
    invoice_router,
    inventory_router,
    settings_router,
    storage_router,
    export_router,
    ]
