from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from retail_ledger.core.settings import settings
from retail_ledger.v1_0.models import Customer, Invoice, InventoryItem


@dataclass
class LedgerStore:
    """
    Session state for one ledger: the three collections plus the tax rate.

    Owned by the application container and injected into repositories, so
    every test (or process) works against its own instance.
    """
    customers: List[Customer] = field(default_factory=list)
    invoices: List[Invoice] = field(default_factory=list)
    inventory: List[InventoryItem] = field(default_factory=list)
    tax_rate: Decimal = settings.DEFAULT_TAX_RATE

    def clear(self) -> None:
        self.customers.clear()
        self.invoices.clear()
        self.inventory.clear()
