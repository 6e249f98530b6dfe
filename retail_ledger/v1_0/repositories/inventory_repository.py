from typing import Optional

from retail_ledger.storage.ledger_store import LedgerStore
from retail_ledger.v1_0.models import InventoryItem
from .base_repository import BaseRepository

class InventoryRepository(BaseRepository[InventoryItem]):
    def __init__(self, store: LedgerStore):
        super().__init__(store, "inventory")

    def get_by_index(self, item_index: int) -> Optional[InventoryItem]:
        if 0 <= item_index < len(self.items):
            return self.items[item_index]
        return None

    def decrease_quantity(self, item_index: int, amount: int) -> Optional[InventoryItem]:
        """
        Subtract ``amount`` from on-hand stock. Not floored: stock checks
        belong to quoting, so a caller that skipped them can go negative.
        """
        entity = self.get_by_index(item_index)
        if not entity:
            return None
        entity.qty_on_hand -= amount
        return entity
