"""
Core constants for the cart pricing engine

Campaign kinds, selector vocabularies, discount types and error codes shared
by the configuration models and the campaign implementations.
"""
from enum import Enum


class CampaignType(str, Enum):
    BOGO = "bogo"
    SPEND_X_GET_Y = "spend_x_get_y"
    TIER_REWARD = "tier_reward"
    BUNDLE = "bundle"


class DiscountType(str, Enum):
    PERCENT = "percent"
    AMOUNT = "amount"


class MatchType(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class SelectorType(str, Enum):
    """Product attributes a ProductSelector can test"""
    TAG = "tag"
    TYPE = "type"
    VENDOR = "vendor"
    PRODUCT_ID = "product_id"
    VARIANT_ID = "variant_id"
    SUBSCRIPTION = "subscription"
    ALL = "all"


class CodeMatchType(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"


class LineItemProperty:
    # Storefront opt-in flags are stored with this value
    OPT_IN_VALUE = "Yes"
    # Per-item tier reward threshold, in dollars
    TIER_THRESHOLD = "_threshold"


TIER_REWARD_TAG = "TIER_REWARD"

# Logger name of the campaign engine
ENGINE_LOGGER = "cart_pricing.promotions.engine"

# Set on the last log record of an evaluation; buffered handlers flush on it
EVALUATION_END_FLAG = "evaluation_end"


class PricingErrorCode:
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    INVALID_SELECTOR_TYPE = "INVALID_SELECTOR_TYPE"
    INVALID_DISCOUNT_TYPE = "INVALID_DISCOUNT_TYPE"
    CATALOG_NOT_READABLE = "CATALOG_NOT_READABLE"
    NEGATIVE_LINE_PRICE = "NEGATIVE_LINE_PRICE"
    INVALID_SPLIT_QUANTITY = "INVALID_SPLIT_QUANTITY"
    LINE_ITEM_NOT_IN_CART = "LINE_ITEM_NOT_IN_CART"
    INVALID_OPERATION = "INVALID_OPERATION"
