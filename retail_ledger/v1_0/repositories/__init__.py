from .base_repository import BaseRepository
from .customer_repository import CustomerRepository
from .invoice_repository import InvoiceRepository
from .inventory_repository import InventoryRepository

__all__ = [
    "BaseRepository",
    "CustomerRepository",
    "InvoiceRepository",
    "InventoryRepository",
]
