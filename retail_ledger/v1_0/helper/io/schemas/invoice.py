from .base import RecordSchema, FieldSpec

INVOICE_RECORD = RecordSchema(
    entity="invoices",
    fields=[
        FieldSpec("invoice_id", "InvoiceNumber", "str"),
        FieldSpec("customer_ref", "CustomerID", "str"),
        FieldSpec("date", "Date", "str"),
        FieldSpec("sub_total", "Subtotal", "decimal"),
        FieldSpec("tax", "Tax", "decimal"),
        FieldSpec("total", "Total", "decimal"),
    ],
)
