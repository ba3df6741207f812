from typing import Iterable, List, Union

# DTOs
from cart_pricing.dto.cart import DiscountCode, LineItem

# Constants
from cart_pricing.core.constants import CodeMatchType, MatchType, PricingErrorCode, SelectorType
from cart_pricing.core.exceptions import InvalidConfigurationError, errmsg

# Logging
from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.selectors")


def _normalize(values: Iterable[str]) -> List[str]:
    return [str(value).lower().strip() for value in values]


class IdSelector:
    """Matches line items whose product id is in a fixed set"""

    def __init__(self, product_ids: Iterable[int]):
        self.product_ids = frozenset(product_ids)

    def match(self, line_item: LineItem) -> bool:
        return line_item.variant.product.id in self.product_ids


class PropertySelector:
    """Matches line items carrying a property key with the configured value"""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value

    def match(self, line_item: LineItem) -> bool:
        properties = line_item.properties
        return self.key in properties and properties[self.key] == self.value


class ProductSelector:
    """Handles attribute-based line item matching with include/exclude logic"""

    def __init__(self, match_type: Union[MatchType, str], selector_type: Union[SelectorType, str], selectors: Iterable[Union[int, str]]):
        try:
            self.match_type = MatchType(match_type)
            self.selector_type = SelectorType(selector_type)
        except ValueError as e:
            logger.error(f"invalid_product_selector | match_type={match_type} selector_type={selector_type}")
            raise InvalidConfigurationError(f"{errmsg.UNKNOWN_SELECTOR_TYPE}: {selector_type}", PricingErrorCode.INVALID_SELECTOR_TYPE) from e

        self.selectors = list(selectors)
        self.normalized_selectors = _normalize(self.selectors)
        self._matchers = {
            SelectorType.TAG: self.tag,
            SelectorType.TYPE: self.type,
            SelectorType.VENDOR: self.vendor,
            SelectorType.PRODUCT_ID: self.product_id,
            SelectorType.VARIANT_ID: self.variant_id,
            SelectorType.SUBSCRIPTION: self.subscription,
            SelectorType.ALL: self.all,
        }

    @property
    def include(self) -> bool:
        return self.match_type == MatchType.INCLUDE

    def match(self, line_item: LineItem) -> bool:
        return self._matchers[self.selector_type](line_item)

    def tag(self, line_item: LineItem) -> bool:
        product_tags = set(_normalize(line_item.variant.product.tags))
        overlap = any(selector in product_tags for selector in self.normalized_selectors)
        return overlap if self.include else not overlap

    def type(self, line_item: LineItem) -> bool:
        product_type = line_item.variant.product.product_type.lower().strip()
        return self.include == (product_type in self.normalized_selectors)

    def vendor(self, line_item: LineItem) -> bool:
        vendor = line_item.variant.product.vendor.lower().strip()
        return self.include == (vendor in self.normalized_selectors)

    def product_id(self, line_item: LineItem) -> bool:
        return self.include == (str(line_item.variant.product.id) in self.normalized_selectors)

    def variant_id(self, line_item: LineItem) -> bool:
        return self.include == (str(line_item.variant.id) in self.normalized_selectors)

    def subscription(self, line_item: LineItem) -> bool:
        return line_item.selling_plan_id is not None

    def all(self, line_item: LineItem) -> bool:
        return True


class DiscountCodeSelector:
    """Finds whether the supplied discount code matches any of the configured codes"""

    def __init__(self, match_type: Union[CodeMatchType, str], discount_codes: Iterable[str]):
        try:
            self.match_type = CodeMatchType(match_type)
        except ValueError as e:
            logger.error(f"invalid_discount_code_selector | match_type={match_type}")
            raise InvalidConfigurationError(f"{errmsg.UNKNOWN_SELECTOR_TYPE}: {match_type}", PricingErrorCode.INVALID_SELECTOR_TYPE) from e
        self.discount_codes = [code.upper().strip() for code in discount_codes]

    def match(self, discount_code: DiscountCode) -> bool:
        code = discount_code.code.upper()
        if self.match_type == CodeMatchType.EXACT:
            return any(code == candidate for candidate in self.discount_codes)
        return any(candidate in code for candidate in self.discount_codes)
