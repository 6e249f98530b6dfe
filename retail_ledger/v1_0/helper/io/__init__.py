from .schemas import (
    RecordSchema,
    FieldSpec,
    CUSTOMER_RECORD,
    INVOICE_RECORD,
    INVENTORY_RECORD,
)

from .adapters.customers import CustomerAdapter
from .adapters.invoices import InvoiceAdapter
from .adapters.inventory import InventoryAdapter

from .validators import validate_fields, validate_date_mdy
from .normalizers import (
    normalize_value,
    sanitize_text,
    clean,
    format_decimal,
    to_decimal,
    to_int,
)

from .readers import read_data_lines, split_record
from .writers import write_data_lines, write_csv, write_xlsx
from .export_utils import rows_from_dtos, CUSTOMER_FIELDS, INVOICE_FIELDS, INVENTORY_FIELDS, FileFmt
__all__ = [
    "RecordSchema",
    "FieldSpec",
    "CUSTOMER_RECORD",
    "INVOICE_RECORD",
    "INVENTORY_RECORD",
    "CustomerAdapter",
    "InvoiceAdapter",
    "InventoryAdapter",
    "validate_fields",
    "validate_date_mdy",
    "normalize_value",
    "sanitize_text",
    "clean",
    "format_decimal",
    "to_decimal",
    "to_int",
    "read_data_lines",
    "split_record",
    "write_data_lines",
    "write_csv",
    "write_xlsx",
    "rows_from_dtos",
    "CUSTOMER_FIELDS",
    "INVOICE_FIELDS",
    "INVENTORY_FIELDS",
    "FileFmt"
]
