from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

@dataclass(slots=True)
class InvoiceLineDTO:
    """One catalog line on an open invoice."""
    item_index: int
    name: str
    unit_price: Decimal
    quantity: int
    total: Decimal


@dataclass(slots=True)
class QuoteDTO:
    sub_total: Decimal
    tax: Decimal
    total: Decimal
    tax_rate: Decimal
    lines: List[InvoiceLineDTO] = field(default_factory=list)


@dataclass(slots=True)
class LoyaltyRedemptionDTO:
    discount: Decimal
    points_used: int
    new_total: Decimal


@dataclass(slots=True)
class InvoiceDTO:
    invoice_id: str
    customer_id: str
    date: str
    sub_total: Decimal
    tax: Decimal
    total: Decimal


@dataclass(slots=True)
class InvoiceViewDTO:
    """Invoice row joined to its customer; dangling references render as unknown."""
    invoice_id: str
    customer_id: str
    customer_name: str
    customer_phone: str
    date: str
    sub_total: Decimal
    tax: Decimal
    total: Decimal
    linked: bool


@dataclass(slots=True)
class InvoiceReceiptDTO:
    invoice: InvoiceDTO
    customer_name: str
    items_count: int
    points_used: int
    discount: Decimal
    points_earned: int
    points_balance: int
    stock_deducted: bool
