import pytest

from cart_pricing.core.constants import PricingErrorCode
from cart_pricing.core.exceptions import InvalidConfigurationError
from cart_pricing.dto.cart import DiscountCode
from cart_pricing.promotions.selectors import DiscountCodeSelector, IdSelector, ProductSelector, PropertySelector


def test_id_selector(make_line_item):
    selector = IdSelector([1, 2])

    assert selector.match(make_line_item(product_id=2))
    assert not selector.match(make_line_item(product_id=3))


@pytest.mark.parametrize("properties, expected", [
    ({"Shirt Bundle": "Yes"}, True),
    ({"Shirt Bundle": "No"}, False),
    ({"Shirt Bundle": "yes"}, False),
    ({}, False),
    ({"Other": "Yes"}, False),
])
def test_property_selector_needs_key_and_value(make_line_item, properties, expected):
    selector = PropertySelector("Shirt Bundle", "Yes")

    assert selector.match(make_line_item(properties=properties)) is expected


def test_tag_include_is_case_insensitive(make_line_item):
    selector = ProductSelector("include", "tag", [" gwp-free "])

    assert selector.match(make_line_item(tags=["GWP-Free", "summer"]))
    assert not selector.match(make_line_item(tags=["summer"]))


def test_tag_exclude(make_line_item):
    selector = ProductSelector("exclude", "tag", ["GWP-FREE"])

    assert selector.match(make_line_item(tags=["summer"]))
    assert not selector.match(make_line_item(tags=["gwp-free"]))


def test_type_and_vendor(make_line_item):
    type_selector = ProductSelector("include", "type", ["Shirts"])
    vendor_selector = ProductSelector("exclude", "vendor", ["Acme"])

    assert type_selector.match(make_line_item(product_type="shirts "))
    assert not type_selector.match(make_line_item(product_type="Pants"))
    assert vendor_selector.match(make_line_item(vendor="Other Co"))
    assert not vendor_selector.match(make_line_item(vendor="ACME"))


def test_product_and_variant_id(make_line_item):
    product_selector = ProductSelector("include", "product_id", [123, "456"])
    variant_selector = ProductSelector("include", "variant_id", [999])

    assert product_selector.match(make_line_item(product_id=123))
    assert product_selector.match(make_line_item(product_id=456))
    assert not product_selector.match(make_line_item(product_id=789))
    assert variant_selector.match(make_line_item(variant_id=999))
    assert not variant_selector.match(make_line_item(variant_id=998))


def test_subscription_and_all(make_line_item):
    subscription = ProductSelector("include", "subscription", [])
    everything = ProductSelector("include", "all", [])

    assert subscription.match(make_line_item(selling_plan_id=42))
    assert not subscription.match(make_line_item())
    assert everything.match(make_line_item())


def test_unknown_selector_type_is_configuration_error():
    with pytest.raises(InvalidConfigurationError) as exc_info:
        ProductSelector("include", "colour", ["red"])

    assert exc_info.value.error_code == PricingErrorCode.INVALID_SELECTOR_TYPE


def test_unknown_match_type_is_configuration_error():
    with pytest.raises(InvalidConfigurationError):
        ProductSelector("maybe", "tag", ["red"])


def test_discount_code_partial_match():
    selector = DiscountCodeSelector("partial", ["PAIGE-"])

    assert selector.match(DiscountCode(code="paige-vip"))
    assert not selector.match(DiscountCode(code="SAVE10"))


def test_discount_code_exact_match():
    selector = DiscountCodeSelector("exact", ["VIP"])

    assert selector.match(DiscountCode(code="vip"))
    assert not selector.match(DiscountCode(code="VIP-2"))


def test_discount_code_empty_whitelist_matches_nothing():
    assert not DiscountCodeSelector("partial", []).match(DiscountCode(code="ANY"))
