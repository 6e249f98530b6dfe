from typing import Callable, Optional

from retail_ledger.v1_0.helper.io.schemas import CUSTOMER_RECORD
from retail_ledger.v1_0.models import Customer, CustomerId
from ..normalizers import sanitize_text
from .base import RecordAdapter


class CustomerAdapter(RecordAdapter):
    schema = CUSTOMER_RECORD

    def encode(self, c: Customer) -> str:
        return ",".join([
            sanitize_text(c.id),
            sanitize_text(c.phone),
            sanitize_text(c.name),
            sanitize_text(c.email),
            str(max(0, int(c.points))),
        ])

    def is_legacy(self, line: str) -> bool:
        values = self.fields_of(line)
        return values is not None and len(values) == len(self.schema.legacy_fields or [])

    def stored_id(self, line: str) -> Optional[str]:
        """Id column of a current-layout line; None for legacy or malformed lines."""
        values = self.fields_of(line)
        if values is None or self.is_legacy(line):
            return None
        return values[0]

    def decode(
        self,
        line: str,
        *,
        generate_id: Callable[[], CustomerId],
        row: int = 0,
    ) -> Optional[Customer]:
        rec = self.parse(line, row)
        if rec is None:
            return None
        # legacy lines have no id column; one is minted on load
        customer_id = CustomerId(rec["id"]) if "id" in rec else generate_id()
        return Customer(
            id=customer_id,
            phone=rec["phone"],
            name=rec["name"],
            email=rec["email"],
            points=max(0, rec["points"]),
        )
