from cart_pricing.core.money import MONEY_ZERO, format_money, to_money
from cart_pricing.dto.cart import LineItem
from .base import BaseDiscount

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.strategy.amount")


class AmountDiscount(BaseDiscount):
    """Takes a fixed dollar amount off every unit, never below zero"""

    def __init__(self, amount, message: str):
        super().__init__(message)
        self.amount = to_money(amount)

    def apply(self, line_item: LineItem) -> None:
        old_line_price = line_item.line_price
        new_line_price = max(old_line_price - self.amount * line_item.quantity, MONEY_ZERO)

        line_item.change_line_price(new_line_price, message=self.message)

        logger.info(f"amount_discount_applied | variant={line_item.variant.id} quantity={line_item.quantity} per_unit={format_money(self.amount)} discount={format_money(old_line_price - new_line_price)}")
