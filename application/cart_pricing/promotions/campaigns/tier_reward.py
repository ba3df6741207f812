from decimal import Decimal, InvalidOperation
from typing import List, Optional

from cart_pricing.core.constants import LineItemProperty, MatchType, SelectorType
from cart_pricing.core.money import format_money, to_money
from cart_pricing.dto.cart import Cart, LineItem
from cart_pricing.dto.campaigns import TierRewardConfig
from cart_pricing.promotions.selectors import ProductSelector
from cart_pricing.promotions.partitioners import sort_by_unit_price
from cart_pricing.promotions.strategy.percentage import PercentageDiscount
from .base import BaseCampaign

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.campaigns.tier_reward")


def read_threshold(line_item: LineItem) -> Optional[Decimal]:
    raw_threshold = line_item.properties.get(LineItemProperty.TIER_THRESHOLD)
    if raw_threshold is None:
        return None
    try:
        threshold = to_money(raw_threshold.strip())
    except InvalidOperation:
        threshold = None
    if threshold is None or not threshold.is_finite():
        logger.warning(f"tier_threshold_not_numeric | variant={line_item.variant.id} threshold={raw_threshold!r}")
        return None
    return threshold


class TierRewardCampaign(BaseCampaign):
    """
    Discounts tier reward items whose own `_threshold` is still met once the
    reward's value is taken out of the cart total.

    Any discount code on the cart is rejected as soon as one reward item is
    present, whether or not a reward was granted.
    """

    def __init__(self, tier: TierRewardConfig, name: Optional[str] = None):
        self.tier = tier
        self.name = name or "tier_reward"
        self.product_selector = ProductSelector(MatchType.INCLUDE, SelectorType.TAG, [tier.reward_tag])
        self.discount = PercentageDiscount(tier.discount_amount, tier.discount_message)

    def eligible_items(self, cart: Cart) -> List[LineItem]:
        return [
            line_item for line_item in cart.line_items
            if not line_item.line_price_changed and self.product_selector.match(line_item)
        ]

    def run(self, cart: Cart) -> None:
        eligible_items = sort_by_unit_price(self.eligible_items(cart))
        num_to_discount = self.tier.quantity_to_discount

        for line_item in eligible_items:
            threshold = read_threshold(line_item)
            if threshold is None:
                continue

            cart_total = cart.subtotal_price - line_item.variant.price * num_to_discount

            if cart_total >= threshold:
                self.discount.apply(line_item)
                logger.info(f"tier_reward_granted | variant={line_item.variant.id} remaining_total={format_money(cart_total)} threshold={format_money(threshold)}")
            else:
                logger.info(f"tier_reward_not_met | variant={line_item.variant.id} remaining_total={format_money(cart_total)} threshold={format_money(threshold)}")

        if cart.discount_code is not None and eligible_items:
            cart.discount_code.reject(self.tier.coupon_prevent_message)
            logger.info(f"discount_code_rejected | campaign={self.name} code={cart.discount_code.code}")
