from decimal import Decimal

from cart_pricing.dto.campaigns import SpendXGetYConfig
from cart_pricing.promotions.campaigns.spend_x_get_y import SpendXGetYForZCampaign, remaining_total

COUPON_MESSAGE = "Discount codes cannot be combined with free item promotions."


def gift_with_purchase(**overrides):
    values = {
        "product_selector_type": "tag",
        "product_selectors": ["GWP-FREE"],
        "threshold": 200,
        "quantity_to_discount": 1,
        "discount_type": "percent",
        "discount_amount": 100,
        "discount_message": "Free with purchase of $200+",
        "coupon_prevent_message": COUPON_MESSAGE,
        "whitelisted_discount_code_part": ["PAIGE-"],
    }
    values.update(overrides)
    return SpendXGetYConfig(**values)


def test_remaining_total_takes_out_cheapest_units(make_line_item):
    gift = make_line_item(price="30.00", quantity=3)

    assert remaining_total(Decimal("290.00"), [gift], 1) == Decimal("260.00")
    assert remaining_total(Decimal("290.00"), [gift], 3) == Decimal("200.00")


def test_threshold_is_inclusive(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="200.00")
    gift = make_line_item(product_id=2, price="50.00", tags=["GWP-FREE"])
    cart = make_cart(regular, gift)

    applied = SpendXGetYForZCampaign([]).run_entry(cart, gift_with_purchase())

    assert applied is True
    assert gift.line_price == Decimal("0")
    assert gift.messages == ["Free with purchase of $200+"]
    assert regular.line_price_changed is False


def test_gift_does_not_count_towards_threshold(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="199.99")
    gift = make_line_item(product_id=2, price="30.00", tags=["GWP-FREE"])
    cart = make_cart(regular, gift)

    applied = SpendXGetYForZCampaign([]).run_entry(cart, gift_with_purchase())

    assert applied is False
    assert gift.line_price == Decimal("30.00")


def test_below_threshold(make_line_item, make_cart):
    gift = make_line_item(product_id=2, price="30.00", tags=["GWP-FREE"])
    cart = make_cart(gift, discount_code="SAVE10")

    SpendXGetYForZCampaign([gift_with_purchase()]).run(cart)

    assert gift.line_price_changed is False
    assert cart.discount_code.rejected is False


def test_only_one_unit_is_free(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="250.00")
    gift = make_line_item(product_id=2, price="30.00", quantity=2, tags=["GWP-FREE"])
    cart = make_cart(regular, gift)

    SpendXGetYForZCampaign([gift_with_purchase()]).run(cart)

    assert [item.quantity for item in cart.line_items] == [1, 1, 1]
    assert gift.line_price == Decimal("30.00")
    assert cart.line_items[2].line_price == Decimal("0")


def test_non_whitelisted_code_is_rejected(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="300.00")
    gift = make_line_item(product_id=2, price="30.00", tags=["GWP-FREE"])
    cart = make_cart(regular, gift, discount_code="SAVE10")

    SpendXGetYForZCampaign([gift_with_purchase()]).run(cart)

    assert cart.discount_code.rejected is True
    assert cart.discount_code.rejection_message == COUPON_MESSAGE
    assert gift.line_price == Decimal("0")


def test_whitelisted_code_is_kept(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="300.00")
    gift = make_line_item(product_id=2, price="30.00", tags=["GWP-FREE"])
    cart = make_cart(regular, gift, discount_code="paige-friends")

    SpendXGetYForZCampaign([gift_with_purchase()]).run(cart)

    assert cart.discount_code.rejected is False
    assert gift.line_price == Decimal("0")


def test_no_eligible_items(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="300.00")
    cart = make_cart(regular, discount_code="SAVE10")

    applied = SpendXGetYForZCampaign([]).run_entry(cart, gift_with_purchase())

    assert applied is False
    assert cart.discount_code.rejected is False
    assert regular.line_price_changed is False


def test_amount_reward_on_subscriptions(make_line_item, make_cart):
    subscription = make_line_item(product_id=1, price="120.00", quantity=2, selling_plan_id=7)
    cart = make_cart(subscription)

    config = gift_with_purchase(
        product_selector_type="subscription", product_selectors=[], threshold=100,
        discount_type="amount", discount_amount=20,
    )
    SpendXGetYForZCampaign([config]).run(cart)

    assert [item.line_price for item in cart.line_items] == [Decimal("120.00"), Decimal("100.00")]


def test_already_discounted_gift_is_not_eligible(make_line_item, make_cart):
    regular = make_line_item(product_id=1, price="300.00")
    gift = make_line_item(product_id=2, price="30.00", tags=["GWP-FREE"])
    gift.change_line_price(Decimal("20.00"), message="Bundle and Save")
    cart = make_cart(regular, gift, discount_code="SAVE10")

    applied = SpendXGetYForZCampaign([]).run_entry(cart, gift_with_purchase())

    assert applied is False
    assert gift.line_price == Decimal("20.00")
    assert cart.discount_code.rejected is False
