import re

import pytest
from pydantic import ValidationError as PydanticValidationError

from retail_ledger.core.errors import CustomerNotFoundError, DuplicatePhoneError
from retail_ledger.v1_0.schemas import CustomerCreate, CustomerUpdate, PointsAdjust


def _create(service, phone="555-0100", name="Jane Doe", email="jane@example.com"):
    return service.create(CustomerCreate(phone=phone, name=name, email=email))


def test_create_assigns_id_and_zero_points(customer_service):
    c = _create(customer_service)
    assert re.fullmatch(r"\d{5}", c.id)
    assert c.points == 0
    assert customer_service.list_all() == [c]


def test_create_sanitizes_commas():
    payload = CustomerCreate(phone=" 555-0100 ", name="Doe, Jane", email="")
    assert payload.name == "Doe; Jane"
    assert payload.phone == "555-0100"


def test_duplicate_phone_is_case_insensitive(customer_service):
    _create(customer_service, phone="ab-100")
    with pytest.raises(DuplicatePhoneError):
        _create(customer_service, phone="AB-100", name="Other")
    assert len(customer_service.list_all()) == 1


def test_lookups(customer_service):
    c = _create(customer_service)
    assert customer_service.get(c.id) == c
    assert customer_service.find_by_phone("555-0100") == c
    assert customer_service.find_by_name("jane doe") == c
    assert customer_service.find_by_phone("000") is None
    with pytest.raises(CustomerNotFoundError):
        customer_service.get("00000" if c.id != "00000" else "00001")


def test_points_never_go_negative(customer_service):
    c = _create(customer_service)
    change = customer_service.adjust_points(c.id, 25)
    assert (change.previous, change.current, change.applied) == (0, 25, 25)
    change = customer_service.adjust_points(c.id, -1_000_000_000)
    assert change.current == 0


def test_change_points_modes(customer_service):
    c = _create(customer_service)
    customer_service.change_points(c.id, PointsAdjust(mode="add", amount=40))
    assert customer_service.change_points(c.id, PointsAdjust(mode="subtract", amount=15)).current == 25
    assert customer_service.change_points(c.id, PointsAdjust(mode="set", amount=7)).current == 7


def test_edit_checks_phone_against_other_customers(customer_service):
    jane = _create(customer_service)
    bob = _create(customer_service, phone="555-0200", name="Bob")

    with pytest.raises(DuplicatePhoneError):
        customer_service.edit(bob.id, CustomerUpdate(phone="555-0100"))

    same = customer_service.edit(jane.id, CustomerUpdate(phone="555-0100", email="new@example.com"))
    assert same.email == "new@example.com"

    renamed = customer_service.edit(bob.id, CustomerUpdate(name="Robert", points=9))
    assert (renamed.name, renamed.phone, renamed.points) == ("Robert", "555-0200", 9)


def test_remove(customer_service):
    c = _create(customer_service)
    customer_service.remove(c.id)
    assert customer_service.list_all() == []
    with pytest.raises(CustomerNotFoundError):
        customer_service.remove(c.id)


@pytest.mark.parametrize("field", ["name", "phone"])
def test_blank_name_or_phone_is_rejected(field):
    data = {"phone": "555-0100", "name": "Jane", field: "   "}
    with pytest.raises(PydanticValidationError):
        CustomerCreate(**data)
    with pytest.raises(PydanticValidationError):
        CustomerUpdate(**{field: " "})
