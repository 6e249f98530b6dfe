from .customer import Customer, CustomerId
from .invoice import Invoice, InvoiceId
from .inventory_item import InventoryItem

__all__ = [
    "Customer", "CustomerId",
    "Invoice", "InvoiceId",
    "InventoryItem",
]
