from dependency_injector import containers, providers
from retail_ledger.core.settings import settings
from retail_ledger.storage.ledger_store import LedgerStore
from retail_ledger.v1_0.helper.ids import IdGenerator
from retail_ledger.v1_0.repositories import (
    CustomerRepository,
    InvoiceRepository,
    InventoryRepository,
    )
from retail_ledger.v1_0.services import (
    CustomerService,
    InventoryService,
    InvoiceService,
    PersistenceService,
    ExportService,
    )

class APIContainer(containers.DeclarativeContainer):
    store = providers.Singleton(LedgerStore)

    customer_id_generator = providers.Singleton(
        IdGenerator,
        width=settings.CUSTOMER_ID_WIDTH,
        max_attempts=settings.ID_MAX_ATTEMPTS,
        seed=settings.ID_SEED,
    )
    invoice_id_generator = providers.Singleton(
        IdGenerator,
        width=settings.INVOICE_ID_WIDTH,
        prefix=settings.INVOICE_ID_PREFIX,
        max_attempts=settings.ID_MAX_ATTEMPTS,
        seed=settings.ID_SEED,
    )

    customer_repository = providers.Singleton(
        CustomerRepository,
        store=store,
        id_generator=customer_id_generator,
    )
    invoice_repository = providers.Singleton(
        InvoiceRepository,
        store=store,
        id_generator=invoice_id_generator,
    )
    inventory_repository = providers.Singleton(
        InventoryRepository,
        store=store,
    )

    customer_service = providers.Singleton(
        CustomerService,
        customer_repository = customer_repository,
        invoice_repository = invoice_repository
    )
    inventory_service = providers.Singleton(
        InventoryService,
        inventory_repository = inventory_repository
    )
    invoice_service = providers.Singleton(
        InvoiceService,
        invoice_repository = invoice_repository,
        customer_repository = customer_repository,
        inventory_repository = inventory_repository,
        store = store
    )
    persistence_service = providers.Singleton(
        PersistenceService,
        customer_repository = customer_repository,
        invoice_repository = invoice_repository,
        inventory_repository = inventory_repository,
        customers_path = settings.CUSTOMERS_PATH,
        invoices_path = settings.INVOICES_PATH,
        inventory_path = settings.INVENTORY_PATH,
        atomic = settings.ATOMIC_WRITES,
        strict = settings.STRICT_DECODE
    )
    export_service = providers.Singleton(
        ExportService,
        customer_service = customer_service,
        invoice_service = invoice_service,
        inventory_service = inventory_service
    )
