from dataclasses import dataclass
from decimal import Decimal
from typing import NewType

from .customer import CustomerId

InvoiceId = NewType("InvoiceId", str)

@dataclass(frozen=True, slots=True)
class Invoice:
    """A finalized invoice. Immutable once appended to the ledger."""
    invoice_id: InvoiceId
    customer_id: CustomerId
    date: str  # MM-DD-YYYY
    sub_total: Decimal
    tax: Decimal
    total: Decimal
