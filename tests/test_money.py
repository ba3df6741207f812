from decimal import Decimal

import pytest

from cart_pricing.core.money import format_money, to_money


@pytest.mark.parametrize("amount, expected", [
    (2.54, Decimal("2.54")),
    ("7.00", Decimal("7.00")),
    (100, Decimal("100")),
    (Decimal("22.50"), Decimal("22.50")),
])
def test_to_money_is_exact(amount, expected):
    assert to_money(amount) == expected


@pytest.mark.parametrize("amount, expected", [
    (Decimal("45.0000"), "45.00"),
    (Decimal("10") / Decimal("3"), "3.33"),
    (Decimal("0.005"), "0.01"),
    (Decimal("0"), "0.00"),
])
def test_format_money_rounds_to_cents(amount, expected):
    assert format_money(amount) == expected


def test_split_price_stays_exact(make_line_item):
    line_item = make_line_item(price="10.00", quantity=3)
    line_item.change_line_price(Decimal("10.00"), message="odd total")

    sibling = line_item.split(take=1)

    assert format_money(sibling.line_price) == "3.33"
    assert sibling.line_price != Decimal("3.33")
    assert sibling.line_price + line_item.line_price == Decimal("10.00")
