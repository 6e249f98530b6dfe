from .base import RecordSchema, FieldSpec

INVENTORY_RECORD = RecordSchema(
    entity="inventory",
    fields=[
        FieldSpec("name", "Item", "str"),
        FieldSpec("unit_price", "CostPrice", "decimal"),
        FieldSpec("sale_price", "SalePrice", "decimal"),
        FieldSpec("qty_on_hand", "Quantity", "int"),
    ],
)
