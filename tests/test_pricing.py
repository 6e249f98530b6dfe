from decimal import Decimal

from retail_ledger.v1_0.helper import pricing


def test_quote_applies_tax_to_subtotal():
    sub_total, tax, total = pricing.quote([(Decimal("100"), 1)], Decimal("0.065"))
    assert sub_total == Decimal("100")
    assert tax == Decimal("6.5")
    assert total == Decimal("106.5")


def test_quote_of_no_lines_is_zero():
    assert pricing.quote([], Decimal("0.065")) == (0, 0, 0)


def test_max_redeemable_is_capped_by_points_and_total():
    assert pricing.max_redeemable_points(50, Decimal("20")) == 50
    assert pricing.max_redeemable_points(50, Decimal("3")) == 30
    assert pricing.max_redeemable_points(0, Decimal("20")) == 0
    assert pricing.max_redeemable_points(50, Decimal("0")) == 0


def test_redeem_clamps_request():
    discount, used, new_total = pricing.redeem(50, Decimal("20"), 30)
    assert (discount, used, new_total) == (Decimal("3.00"), 30, Decimal("17.00"))

    discount, used, new_total = pricing.redeem(5, Decimal("100"), 30)
    assert used == 5
    assert new_total == Decimal("99.50")

    discount, used, new_total = pricing.redeem(500, Decimal("1"), 500)
    assert used == 10
    assert new_total == Decimal("0")


def test_accrued_points_are_floored():
    assert pricing.accrued_points(Decimal("106.50")) == 10
    assert pricing.accrued_points(Decimal("9.99")) == 0
    assert pricing.accrued_points(Decimal("-5")) == 0
