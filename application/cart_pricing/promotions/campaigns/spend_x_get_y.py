from decimal import Decimal
from typing import List, Optional

from cart_pricing.core.money import format_money, to_money
from cart_pricing.dto.cart import Cart, LineItem
from cart_pricing.dto.campaigns import SpendXGetYConfig
from cart_pricing.promotions.selectors import DiscountCodeSelector, ProductSelector
from cart_pricing.promotions.partitioners import DiscountLoop, sort_by_unit_price
from cart_pricing.promotions.strategy.factory import build_discount
from .base import BaseCampaign

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.campaigns.spend_x_get_y")


def remaining_total(cart_total: Decimal, eligible_items: List[LineItem], num_to_discount: int) -> Decimal:
    """Cart total once the cheapest `num_to_discount` eligible units are taken out"""
    for line_item in eligible_items:
        if num_to_discount <= 0:
            break

        if line_item.quantity > num_to_discount:
            cart_total -= line_item.variant.price * num_to_discount
            break

        cart_total -= line_item.line_price
        num_to_discount -= line_item.quantity

    return cart_total


class SpendXGetYForZCampaign(BaseCampaign):
    """Spend $X, get product Y for Z discount"""

    def __init__(self, campaigns: List[SpendXGetYConfig], name: Optional[str] = None):
        self.campaigns = campaigns
        self.name = name or "spend_x_get_y"

    def run(self, cart: Cart) -> None:
        for campaign in self.campaigns:
            self.run_entry(cart, campaign)

    def run_entry(self, cart: Cart, campaign: SpendXGetYConfig) -> bool:
        """Returns True when the discount was applied."""
        threshold = to_money(campaign.threshold)

        if cart.subtotal_price < threshold:
            logger.info(f"spend_threshold_not_met | campaign={self.name} subtotal={format_money(cart.subtotal_price)} threshold={format_money(threshold)}")
            return False

        product_selector = ProductSelector(
            campaign.product_selector_match_type,
            campaign.product_selector_type,
            campaign.product_selectors,
        )

        eligible_items = [
            line_item for line_item in cart.line_items
            if not line_item.line_price_changed and product_selector.match(line_item)
        ]
        if not eligible_items:
            logger.info(f"spend_no_eligible_items | campaign={self.name}")
            return False

        eligible_items = sort_by_unit_price(eligible_items)

        # the free item must not count towards its own threshold
        cart_total = remaining_total(cart.subtotal_price, eligible_items, campaign.quantity_to_discount)
        if cart_total < threshold:
            logger.info(f"spend_threshold_not_met_without_reward | campaign={self.name} remaining_total={format_money(cart_total)} threshold={format_money(threshold)}")
            return False

        if cart.discount_code is not None:
            discount_code_selector = DiscountCodeSelector(
                campaign.whitelisted_discount_code_match_type,
                campaign.whitelisted_discount_code_part,
            )
            if not discount_code_selector.match(cart.discount_code):
                cart.discount_code.reject(campaign.coupon_prevent_message)
                logger.info(f"discount_code_rejected | campaign={self.name} code={cart.discount_code.code}")

        discount = build_discount(campaign.discount_type, campaign.discount_amount, campaign.discount_message)
        discounted = DiscountLoop(discount).loop_items(cart, eligible_items, campaign.quantity_to_discount)

        logger.info(f"spend_reward_applied | campaign={self.name} threshold={format_money(threshold)} discounted_units={discounted}")
        return True
