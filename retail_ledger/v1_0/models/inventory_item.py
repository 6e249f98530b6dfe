from dataclasses import dataclass
from decimal import Decimal

@dataclass(slots=True)
class InventoryItem:
    name: str
    unit_price: Decimal  # purchase cost
    sale_price: Decimal
    qty_on_hand: int = 0
