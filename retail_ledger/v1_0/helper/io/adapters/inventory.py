from typing import Optional

from retail_ledger.v1_0.helper.io.schemas import INVENTORY_RECORD
from retail_ledger.v1_0.models import InventoryItem
from ..normalizers import format_decimal, sanitize_text
from .base import RecordAdapter


class InventoryAdapter(RecordAdapter):
    schema = INVENTORY_RECORD

    def encode(self, it: InventoryItem) -> str:
        return ",".join([
            sanitize_text(it.name),
            format_decimal(it.unit_price),
            format_decimal(it.sale_price),
            str(it.qty_on_hand),
        ])

    def decode(self, line: str, *, row: int = 0) -> Optional[InventoryItem]:
        rec = self.parse(line, row)
        if rec is None:
            return None
        return InventoryItem(
            name=rec["name"],
            unit_price=rec["unit_price"],
            sale_price=rec["sale_price"],
            qty_on_hand=rec["qty_on_hand"],
        )
