from decimal import Decimal

import pytest

from cart_pricing.core.evaluation_context import evaluation_context
from cart_pricing.core.exceptions import InvalidOperationError
from cart_pricing.promotions import engine as engine_module
from cart_pricing.promotions.campaigns.base import BaseCampaign
from cart_pricing.promotions.engine import CampaignEngine
from cart_pricing.promotions.loader import parse_campaign_descriptors


class HalvingCampaign(BaseCampaign):
    name = "halving"

    def __init__(self):
        self.seen_campaign = None

    def run(self, cart):
        self.seen_campaign = evaluation_context.campaign
        for line_item in cart.line_items:
            line_item.change_line_price(line_item.line_price / 2, message="Half off")


class BrokenCampaign(BaseCampaign):
    name = "broken"

    def run(self, cart):
        cart.line_items[0].change_line_price(Decimal("-1"))


BOGO_THEN_KIT = [
    {
        "campaign_type": "bogo",
        "name": "single_bundle",
        "product_ids": [1],
        "property_key": "Bundle",
        "discount_type": "amount",
        "discount_amount": 1,
        "discount_message": "Bundle and Save",
        "paid_item_count": 1,
    },
    {
        "campaign_type": "bundle",
        "name": "kit",
        "bundle_items": [{"product_id": 1, "quantity_needed": 1}, {"product_id": 2, "quantity_needed": 1}],
        "discount_line_item_property": "Kit",
        "discount_type": "percent",
        "discount_amount": 30,
        "discount_message": "Kit",
    },
]


def test_campaigns_run_in_order_and_see_earlier_changes(make_line_item, make_cart):
    shirt = make_line_item(product_id=1, price="10.00", properties={"Bundle": "Yes", "Kit": "Yes"})
    pants = make_line_item(product_id=2, price="20.00", properties={"Kit": "Yes"})
    cart = make_cart(shirt, pants)

    engine = CampaignEngine.from_descriptors(parse_campaign_descriptors(BOGO_THEN_KIT))
    result = engine.run(cart)

    assert result is cart
    assert shirt.line_price == Decimal("9.00")
    assert shirt.messages == ["Bundle and Save"]
    # the kit is incomplete once the shirt has been discounted
    assert pants.line_price_changed is False


def test_kit_applies_when_it_runs_first(make_line_item, make_cart):
    shirt = make_line_item(product_id=1, price="10.00", properties={"Bundle": "Yes", "Kit": "Yes"})
    pants = make_line_item(product_id=2, price="20.00", properties={"Kit": "Yes"})
    cart = make_cart(shirt, pants)

    CampaignEngine.from_descriptors(parse_campaign_descriptors(list(reversed(BOGO_THEN_KIT)))).run(cart)

    assert pants.line_price == Decimal("14.00")
    assert shirt.messages == ["Kit"]
    assert shirt.line_price == Decimal("7.00")


def test_discounted_item_is_not_discounted_again(make_line_item, make_cart):
    descriptors = parse_campaign_descriptors([
        BOGO_THEN_KIT[0],
        {
            "campaign_type": "spend_x_get_y",
            "name": "gift",
            "product_selector_type": "product_id",
            "product_selectors": [1],
            "threshold": 0,
            "quantity_to_discount": 1,
            "discount_type": "percent",
            "discount_amount": 50,
            "discount_message": "Half off gift",
            "coupon_prevent_message": "No codes",
        },
    ])
    shirt = make_line_item(product_id=1, price="100.00", properties={"Bundle": "Yes"})
    cart = make_cart(shirt)

    CampaignEngine.from_descriptors(descriptors).run(cart)

    assert shirt.messages == ["Bundle and Save"]
    assert shirt.line_price == Decimal("99.00")


def test_campaign_name_is_in_context_while_running(make_line_item, make_cart):
    campaign = HalvingCampaign()
    cart = make_cart(make_line_item(price="10.00"))

    CampaignEngine([campaign]).run(cart)

    assert campaign.seen_campaign == "halving"
    assert evaluation_context.evaluation_id is None
    assert evaluation_context.campaign is None


def test_error_propagates_without_rollback(make_line_item, make_cart, monkeypatch):
    captured = []
    monkeypatch.setattr(engine_module, "capture_exception", lambda e: captured.append(e))
    line_item = make_line_item(price="10.00")
    cart = make_cart(line_item)

    with pytest.raises(InvalidOperationError):
        CampaignEngine([HalvingCampaign(), BrokenCampaign(), HalvingCampaign()]).run(cart)

    assert line_item.line_price == Decimal("5.00")
    assert len(captured) == 1
    assert isinstance(captured[0], InvalidOperationError)
    assert evaluation_context.evaluation_id is None


def test_empty_engine_returns_cart_unchanged(make_line_item, make_cart):
    line_item = make_line_item()
    cart = make_cart(line_item)

    assert CampaignEngine([]).run(cart) is cart
    assert line_item.line_price_changed is False
