from typing import List

from retail_ledger.core.errors import InventoryItemNotFoundError
from retail_ledger.v1_0.entities import InventoryItemDTO
from retail_ledger.v1_0.models import InventoryItem
from retail_ledger.v1_0.repositories import InventoryRepository

class InventoryService:
    """Read-only view of the catalog for picking invoice lines."""

    def __init__(self, inventory_repository: InventoryRepository) -> None:
        self.inventory_repository = inventory_repository

    @staticmethod
    def to_dto(index: int, it: InventoryItem) -> InventoryItemDTO:
        return InventoryItemDTO(
            index=index,
            name=it.name,
            unit_price=it.unit_price,
            sale_price=it.sale_price,
            qty_on_hand=it.qty_on_hand,
        )

    def list_all(self) -> List[InventoryItemDTO]:
        return [self.to_dto(i, it) for i, it in enumerate(self.inventory_repository.list_all())]

    def get(self, item_index: int) -> InventoryItemDTO:
        it = self.inventory_repository.get_by_index(item_index)
        if not it:
            raise InventoryItemNotFoundError(item_index)
        return self.to_dto(item_index, it)
