from .base import RecordSchema, FieldSpec

_PHONE = FieldSpec("phone", "Phone", "str")
_NAME = FieldSpec("name", "Name", "str")
_EMAIL = FieldSpec("email", "Email", "str")
_POINTS = FieldSpec("points", "LoyaltyPoints", "int")

CUSTOMER_RECORD = RecordSchema(
    entity="customers",
    fields=[FieldSpec("id", "CustomerID", "str"), _PHONE, _NAME, _EMAIL, _POINTS],
    # older files carried no id column
    legacy_fields=[_PHONE, _NAME, _EMAIL, _POINTS],
)
