from decimal import Decimal

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.main import create_app
from retail_ledger.v1_0.services import PersistenceService


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "inventory.csv").write_text("Item,CostPrice,SalePrice,Quantity\nWidget,6,10,20\n")
    return tmp_path


@pytest.fixture
def client(data_dir):
    container = ApplicationContainer()
    api = container.api_container
    api.persistence_service.override(
        providers.Singleton(
            PersistenceService,
            customer_repository=api.customer_repository,
            invoice_repository=api.invoice_repository,
            inventory_repository=api.inventory_repository,
            customers_path=data_dir / "customers.csv",
            invoices_path=data_dir / "invoices.csv",
            inventory_path=data_dir / "inventory.csv",
        )
    )
    with TestClient(create_app(container)) as c:
        yield c
    container.unwire()


def _create_customer(client, phone="555-0100", name="Jane"):
    r = client.post("/api/customers", json={"phone": phone, "name": name, "email": "j@x.com"})
    assert r.status_code == 201, r.text
    return r.json()


def test_ready(client):
    r = client.get("/api/ready")
    assert r.status_code == 200
    assert r.json()["message"] == "ready"


def test_inventory_loaded_at_startup(client):
    r = client.get("/api/inventory")
    assert r.status_code == 200
    assert [it["name"] for it in r.json()] == ["Widget"]
    assert client.get("/api/inventory/5").status_code == 404


def test_customer_crud(client):
    jane = _create_customer(client)
    assert len(jane["id"]) == 5

    dup = client.post("/api/customers", json={"phone": "555-0100", "name": "Other"})
    assert dup.status_code == 409

    r = client.patch(f"/api/customers/{jane['id']}", json={"email": "new@x.com"})
    assert r.json()["email"] == "new@x.com"

    r = client.post(f"/api/customers/{jane['id']}/points", json={"mode": "subtract", "amount": 5})
    assert r.json()["current"] == 0

    assert client.get("/api/customers/by-phone/555-0100").json()["id"] == jane["id"]
    assert client.get("/api/customers/by-id/nobody").status_code == 404

    assert client.delete(f"/api/customers/{jane['id']}").status_code == 204
    assert client.get("/api/customers").json() == []


def test_quote_and_finalize(client):
    jane = _create_customer(client)

    q = client.post("/api/invoices/quote", json={"items": [{"item_index": 0, "quantity": 10}]})
    assert q.status_code == 200
    assert Decimal(str(q.json()["total"])) == Decimal("106.5")

    r = client.post(
        "/api/invoices",
        json={
            "customer_id": jane["id"],
            "date": "10-24-2025",
            "items": [{"item_index": 0, "quantity": 10}],
            "deduct_stock": True,
        },
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["points_earned"] == 10
    assert body["stock_deducted"] is True
    assert client.get("/api/inventory/0").json()["qty_on_hand"] == 10

    too_many = client.post(
        "/api/invoices",
        json={"customer_id": jane["id"], "date": "10-24-2025", "items": [{"item_index": 0, "quantity": 11}]},
    )
    assert too_many.status_code == 400

    client.delete(f"/api/customers/{jane['id']}")
    [view] = client.get("/api/invoices").json()
    assert view["customer_name"] == "(unknown)"
    assert view["customer_phone"] == "(unlinked)"


def test_bad_date_is_rejected(client):
    r = client.post(
        "/api/invoices",
        json={"customer_name": "Walk In", "date": "2025-10-24", "items": [{"item_index": 0, "quantity": 1}]},
    )
    assert r.status_code == 422


def test_tax_rate(client):
    r = client.put("/api/settings/tax-rate", json={"percent": "7.5"})
    assert r.status_code == 200
    assert Decimal(str(client.get("/api/settings/tax-rate").json()["tax_rate"])) == Decimal("0.075")
    assert client.put("/api/settings/tax-rate", json={"percent": "150"}).status_code == 422


def test_save_writes_files(client, data_dir):
    _create_customer(client)
    r = client.post("/api/storage/save")
    assert r.status_code == 200
    assert r.json()["errors"] == {}
    assert (data_dir / "customers.csv").read_text().splitlines()[0] == "CustomerID,Phone,Name,Email,LoyaltyPoints"


def test_export(client):
    _create_customer(client)
    r = client.get("/api/export/customers", params={"fmt": "csv"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert r.text.splitlines()[0] == "id,phone,name,email,points"

    xlsx = client.get("/api/export/inventory", params={"fmt": "xlsx"})
    assert xlsx.status_code == 200
    assert xlsx.content[:2] == b"PK"

    assert client.get("/api/export/suppliers").status_code == 400
