from dataclasses import dataclass
from decimal import Decimal

@dataclass(slots=True)
class InventoryItemDTO:
    index: int
    name: str
    unit_price: Decimal
    sale_price: Decimal
    qty_on_hand: int
