from .customer_service import CustomerService
from .inventory_service import InventoryService
from .invoice_service import InvoiceService
from .persistence_service import PersistenceService
from .export_service import ExportService
__all__=[
    "CustomerService",
    "InventoryService",
    "InvoiceService",
    "PersistenceService",
    "ExportService",
    ]
