"""
Invoice arithmetic.

All amounts are ``Decimal``; nothing here rounds. Display rounding to two
places belongs to whoever renders the numbers.
"""
import math
from decimal import Decimal
from typing import Iterable, Tuple

from retail_ledger.core.settings import settings

ZERO = Decimal("0")


def quote(lines: Iterable[Tuple[Decimal, int]], tax_rate: Decimal) -> Tuple[Decimal, Decimal, Decimal]:
    """Return ``(sub_total, tax, total)`` for ``(unit_price, quantity)`` lines."""
    sub_total = sum((Decimal(price) * qty for price, qty in lines), ZERO)
    tax = sub_total * Decimal(tax_rate)
    return sub_total, tax, sub_total + tax


def max_redeemable_points(
    points: int,
    total: Decimal,
    point_value: Decimal = settings.POINT_VALUE,
) -> int:
    """Points that can be spent without the discount exceeding the total."""
    if points <= 0 or total <= 0:
        return 0
    max_discount = min(points * point_value, total)
    return int(max_discount // point_value)


def redeem(
    points: int,
    total: Decimal,
    requested: int,
    point_value: Decimal = settings.POINT_VALUE,
) -> Tuple[Decimal, int, Decimal]:
    """
    Clamp a redemption request and price it.

    Returns ``(discount, points_used, new_total)``. The caller is responsible
    for deducting ``points_used`` from the customer.
    """
    cap = max_redeemable_points(points, total, point_value)
    used = max(0, min(requested, points, cap))
    discount = used * point_value
    return discount, used, total - discount


def accrued_points(total: Decimal, divisor: Decimal = settings.ACCRUAL_DIVISOR) -> int:
    """One point per ``divisor`` currency units of the final total, floored."""
    if total <= 0:
        return 0
    return math.floor(total / divisor)
