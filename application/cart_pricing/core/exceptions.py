"""Pricing errors and error message constants."""

from cart_pricing.core.constants import PricingErrorCode


class errmsg:
    """Error message constants for the pricing engine."""

    NEGATIVE_LINE_PRICE = "Line price cannot be negative"
    SPLIT_OUT_OF_RANGE = "Split quantity must be between 1 and quantity - 1"
    LINE_ITEM_NOT_IN_CART = "Line item is not part of the cart"
    UNKNOWN_SELECTOR_TYPE = "Invalid product selector type"
    UNKNOWN_DISCOUNT_TYPE = "Invalid discount type"
    UNKNOWN_CAMPAIGN_TYPE = "Invalid campaign type"
    INVALID_CAMPAIGN = "Campaign descriptor failed validation"
    CATALOG_NOT_READABLE = "Campaign catalog file could not be read"


class PricingError(Exception):
    """Base class for every error raised by the pricing engine."""

    error_code = PricingErrorCode.INVALID_CONFIGURATION

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class InvalidConfigurationError(PricingError):
    """Campaign configuration is malformed: unknown selector, bad descriptor, unreadable catalog."""

    error_code = PricingErrorCode.INVALID_CONFIGURATION


class InvalidOperationError(PricingError):
    """A cart mutation was requested with arguments that can never be valid."""

    error_code = PricingErrorCode.INVALID_OPERATION
