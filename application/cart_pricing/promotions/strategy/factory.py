from typing import Union

from cart_pricing.core.constants import DiscountType, PricingErrorCode
from cart_pricing.core.exceptions import InvalidConfigurationError, errmsg
from .base import BaseDiscount
from .amount import AmountDiscount
from .percentage import PercentageDiscount


def build_discount(discount_type: Union[DiscountType, str], discount_amount, discount_message: str) -> BaseDiscount:
    if discount_type == DiscountType.PERCENT:
        return PercentageDiscount(discount_amount, discount_message)
    elif discount_type == DiscountType.AMOUNT:
        return AmountDiscount(discount_amount, discount_message)
    raise InvalidConfigurationError(f"{errmsg.UNKNOWN_DISCOUNT_TYPE}: {discount_type}", PricingErrorCode.INVALID_DISCOUNT_TYPE)
