from .base import RecordSchema, FieldSpec
from .customer import CUSTOMER_RECORD
from .invoice import INVOICE_RECORD
from .inventory import INVENTORY_RECORD

__all__ = [
    "RecordSchema",
    "FieldSpec",
    "CUSTOMER_RECORD",
    "INVOICE_RECORD",
    "INVENTORY_RECORD",
]
