from decimal import Decimal

from retail_ledger.v1_0.models import InventoryItem
from retail_ledger.v1_0.schemas import CustomerCreate, InvoiceItemInput

CUSTOMER_HEADER = "CustomerID,Phone,Name,Email,LoyaltyPoints"
INVOICE_HEADER = "InvoiceNumber,CustomerID,Date,Subtotal,Tax,Total"


def test_missing_files_load_empty(persistence):
    report = persistence.load_all()
    assert (report.customers, report.invoices, report.inventory) == (0, 0, 0)
    assert report.errors == {}


def test_single_line_without_header_is_data(persistence, data_paths, customer_repository):
    data_paths["customers_path"].write_text("00001,555-0100,Jane,j@x.com,3\n")
    assert persistence.load_customers() == 1
    assert customer_repository.get_customer_by_id("00001").points == 3


def test_header_only_file_is_empty(persistence, data_paths):
    data_paths["customers_path"].write_text(CUSTOMER_HEADER + "\n")
    assert persistence.load_customers() == 0


def test_first_line_skipped_when_more_follow(persistence, data_paths, customer_repository):
    data_paths["customers_path"].write_text("whatever\n00001,555-0100,Jane,,3\n00002,555-0200,Bob,,0\n")
    assert persistence.load_customers() == 2
    assert [c.name for c in customer_repository.list_customers()] == ["Jane", "Bob"]


def test_legacy_customers_and_phone_references(persistence, data_paths, customer_repository, invoice_repository):
    data_paths["customers_path"].write_text(
        "Phone,Name,Email,LoyaltyPoints\n555-0100,Jane,j@x.com,3\n00004,555-0200,Bob,,0\n"
    )
    data_paths["invoices_path"].write_text(
        INVOICE_HEADER + "\n"
        "INV-00000001,555-0100,10-24-2025,100,6.5,106.5\n"
        "INV-00000002,00004,10-25-2025,10,0.65,10.65\n"
        "INV-00000003,gone,10-26-2025,10,0.65,10.65\n"
    )
    report = persistence.load_all()
    assert (report.customers, report.invoices) == (2, 3)

    jane = customer_repository.get_by_phone("555-0100")
    assert jane.id != "00004"
    assert len(jane.id) == 5

    refs = [inv.customer_id for inv in invoice_repository.list_invoices()]
    assert refs == [jane.id, "00004", "gone"]


def test_malformed_lines_are_dropped(persistence, data_paths):
    data_paths["invoices_path"].write_text(
        INVOICE_HEADER + "\nINV-00000001,00001,10-24-2025,100,6.5,106.5\nbroken,line\n"
    )
    report = persistence.load_all()
    assert report.invoices == 1
    assert report.dropped_lines == 1


def test_strict_decode_drops_bad_numbers(customer_repository, invoice_repository, inventory_repository, data_paths):
    from retail_ledger.v1_0.services import PersistenceService

    data_paths["inventory_path"].write_text("Item,CostPrice,SalePrice,Quantity\nWidget,6,ten,5\nGizmo,1,2,3\n")
    strict = PersistenceService(
        customer_repository, invoice_repository, inventory_repository, strict=True, **data_paths
    )
    report = strict.load_all()
    assert report.inventory == 1
    assert report.dropped_lines == 1


def test_save_then_load_round_trip(
    persistence, store, data_paths, customer_service, invoice_service, inventory_repository, customer_repository
):
    inventory_repository.add(InventoryItem("Widget, blue", Decimal("6"), Decimal("10"), 20))
    jane = customer_service.create(CustomerCreate(phone="555-0100", name="Jane", email="j@x.com"))
    receipt = invoice_service.finalize(
        customer_repository.get_customer_by_id(jane.id),
        [InvoiceItemInput(item_index=0, quantity=10)],
        "10-24-2025",
    )

    report = persistence.save_all()
    assert report.ok
    assert sorted(report.written) == ["customers", "inventory", "invoices"]
    lines = data_paths["customers_path"].read_text().splitlines()
    assert lines[0] == CUSTOMER_HEADER
    assert lines[1] == f"{jane.id},555-0100,Jane,j@x.com,10"

    store.clear()
    loaded = persistence.load_all()
    assert (loaded.customers, loaded.invoices, loaded.inventory) == (1, 1, 1)

    assert inventory_repository.get_by_index(0).name == "Widget; blue"
    c = customer_repository.get_customer_by_id(jane.id)
    assert c.points == 10
    [view] = invoice_service.list_views()
    assert view.invoice_id == receipt.invoice.invoice_id
    assert view.customer_name == "Jane"
    assert view.total == Decimal("106.5")


def test_atomic_save_leaves_no_temp_files(persistence, tmp_path):
    persistence.save_all()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["customers.csv", "inventory.csv", "invoices.csv"]


def test_unwritable_path_is_reported(customer_repository, invoice_repository, inventory_repository, tmp_path):
    from retail_ledger.v1_0.services import PersistenceService

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    svc = PersistenceService(
        customer_repository,
        invoice_repository,
        inventory_repository,
        customers_path=blocker / "customers.csv",
        invoices_path=tmp_path / "invoices.csv",
        inventory_path=tmp_path / "inventory.csv",
    )
    report = svc.save_all()
    assert not report.ok
    assert "customers" in report.errors
    assert sorted(report.written) == ["inventory", "invoices"]


def test_duplicate_stored_id_is_reassigned(persistence, data_paths, customer_repository):
    data_paths["customers_path"].write_text(
        CUSTOMER_HEADER + "\n00007,555-0100,Jane,,3\n00007,555-0200,Bob,,1\n"
    )
    assert persistence.load_customers() == 2
    jane, bob = customer_repository.list_customers()
    assert jane.id == "00007"
    assert bob.id != "00007"
    assert bob.points == 1


def test_legacy_ids_avoid_orphaned_invoice_references(
    customer_repository, invoice_repository, inventory_repository, data_paths
):
    from retail_ledger.v1_0.helper.ids import IdGenerator
    from retail_ledger.v1_0.services import PersistenceService

    class _ZeroRng:
        def randrange(self, n):
            return 0

    customer_repository.id_generator = IdGenerator(5, rng=_ZeroRng(), clock=lambda: 0)
    data_paths["customers_path"].write_text("Phone,Name,Email,LoyaltyPoints\n555-0100,Jane,,3\n")
    data_paths["invoices_path"].write_text(
        INVOICE_HEADER + "\nINV-00000001,00000,10-24-2025,10,0.65,10.65\n"
    )
    svc = PersistenceService(customer_repository, invoice_repository, inventory_repository, **data_paths)
    svc.load_all()

    jane = customer_repository.get_by_phone("555-0100")
    assert jane.id != "00000"
    [inv] = invoice_repository.list_invoices()
    assert inv.customer_id == "00000"
