from dependency_injector import containers, providers
from retail_ledger.v1_0.v1_containers import APIContainer

class ApplicationContainer(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
                "retail_ledger.v1_0.routers.customer_router",
                "retail_ledger.v1_0.routers.invoice_router",
                "retail_ledger.v1_0.routers.inventory_router",
                "retail_ledger.v1_0.routers.settings_router",
                "retail_ledger.v1_0.routers.storage_router",
                "retail_ledger.v1_0.routers.export_router",
            ]
    )

    api_container = providers.Container(
        APIContainer
    )
