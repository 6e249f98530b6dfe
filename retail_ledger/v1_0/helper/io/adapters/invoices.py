from typing import Callable, Optional

from retail_ledger.v1_0.helper.io.schemas import INVOICE_RECORD
from retail_ledger.v1_0.models import CustomerId, Invoice, InvoiceId
from ..normalizers import format_decimal, sanitize_text
from .base import RecordAdapter


class InvoiceAdapter(RecordAdapter):
    schema = INVOICE_RECORD

    def encode(self, inv: Invoice) -> str:
        return ",".join([
            sanitize_text(inv.invoice_id),
            sanitize_text(inv.customer_id),
            sanitize_text(inv.date),
            format_decimal(inv.sub_total),
            format_decimal(inv.tax),
            format_decimal(inv.total),
        ])

    def decode(
        self,
        line: str,
        *,
        resolve_customer: Callable[[str], Optional[CustomerId]],
        row: int = 0,
    ) -> Optional[Invoice]:
        """
        ``resolve_customer`` maps the reference column (an id, or a phone in
        older files) to a live customer id. Unresolved tokens are kept as-is.
        """
        rec = self.parse(line, row)
        if rec is None:
            return None
        token = rec["customer_ref"].strip()
        customer_id = resolve_customer(token) or CustomerId(token)
        return Invoice(
            invoice_id=InvoiceId(rec["invoice_id"]),
            customer_id=customer_id,
            date=rec["date"],
            sub_total=rec["sub_total"],
            tax=rec["tax"],
            total=rec["total"],
        )
