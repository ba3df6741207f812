from decimal import Decimal

from cart_pricing.core.money import format_money, to_money
from cart_pricing.dto.cart import LineItem
from .base import BaseDiscount

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.strategy.percentage")


class PercentageDiscount(BaseDiscount):
    """Takes a percentage off the whole line price"""

    def __init__(self, percent, message: str):
        super().__init__(message)
        self.percent = to_money(percent)
        self.multiplier = Decimal("1") - self.percent / Decimal("100")

    def apply(self, line_item: LineItem) -> None:
        old_line_price = line_item.line_price
        new_line_price = old_line_price * self.multiplier

        line_item.change_line_price(new_line_price, message=self.message)

        logger.info(f"percentage_discount_applied | variant={line_item.variant.id} quantity={line_item.quantity} percent={self.percent} discount={format_money(old_line_price - new_line_price)}")
