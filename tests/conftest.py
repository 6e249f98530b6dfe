from decimal import Decimal

import pytest

from retail_ledger.storage.ledger_store import LedgerStore
from retail_ledger.v1_0.helper.ids import IdGenerator
from retail_ledger.v1_0.models import InventoryItem
from retail_ledger.v1_0.repositories import (
    CustomerRepository,
    InventoryRepository,
    InvoiceRepository,
)
from retail_ledger.v1_0.services import (
    CustomerService,
    InventoryService,
    InvoiceService,
    PersistenceService,
)


@pytest.fixture
def store():
    return LedgerStore(tax_rate=Decimal("0.065"))


@pytest.fixture
def customer_repository(store):
    return CustomerRepository(store, IdGenerator(5, seed=11))


@pytest.fixture
def invoice_repository(store):
    return InvoiceRepository(store, IdGenerator(8, prefix="INV-", seed=12))


@pytest.fixture
def inventory_repository(store):
    return InventoryRepository(store)


@pytest.fixture
def catalog(inventory_repository):
    """Widget at 10.00 (20 on hand), Gizmo at 20.00 (5 on hand)."""
    inventory_repository.add_many([
        InventoryItem("Widget", Decimal("6"), Decimal("10"), 20),
        InventoryItem("Gizmo", Decimal("12.5"), Decimal("20"), 5),
    ])
    return inventory_repository


@pytest.fixture
def customer_service(customer_repository, invoice_repository):
    return CustomerService(customer_repository, invoice_repository)


@pytest.fixture
def inventory_service(inventory_repository):
    return InventoryService(inventory_repository)


@pytest.fixture
def invoice_service(invoice_repository, customer_repository, inventory_repository, store):
    return InvoiceService(
        invoice_repository,
        customer_repository,
        inventory_repository,
        store,
        point_value=Decimal("0.10"),
        accrual_divisor=Decimal("10"),
    )


@pytest.fixture
def data_paths(tmp_path):
    return {
        "customers_path": tmp_path / "customers.csv",
        "invoices_path": tmp_path / "invoices.csv",
        "inventory_path": tmp_path / "inventory.csv",
    }


@pytest.fixture
def persistence(customer_repository, invoice_repository, inventory_repository, data_paths):
    return PersistenceService(
        customer_repository,
        invoice_repository,
        inventory_repository,
        atomic=True,
        strict=False,
        **data_paths,
    )
