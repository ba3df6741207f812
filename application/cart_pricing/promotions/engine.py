from typing import List

from cart_pricing.core.money import format_money

# DTOs
from cart_pricing.dto.cart import Cart
from cart_pricing.dto.campaigns import CampaignDescriptor

# Campaigns
from cart_pricing.promotions.campaigns.base import BaseCampaign
from cart_pricing.promotions.campaigns.factory import build_campaigns

# Error reporting
from cart_pricing.config.sentry import add_breadcrumb, capture_exception

# Context
from cart_pricing.core.evaluation_context import clear_evaluation_context, evaluation_context, start_evaluation

# Logging
from cart_pricing.logging.utils import get_app_logger
from cart_pricing.core.constants import ENGINE_LOGGER, EVALUATION_END_FLAG
logger = get_app_logger(ENGINE_LOGGER)


class CampaignEngine:
    """Runs an ordered list of campaigns against one cart."""

    def __init__(self, campaigns: List[BaseCampaign]):
        self.campaigns = campaigns

    @classmethod
    def from_descriptors(cls, descriptors: List[CampaignDescriptor]) -> "CampaignEngine":
        return cls(build_campaigns(descriptors))

    def run(self, cart: Cart) -> Cart:
        """Apply every campaign in order and return the same, mutated, cart.

        Campaigns see the splits and price changes of the ones before them.
        The first error aborts the run; discounts already written stay on
        the cart.
        """
        evaluation_id = start_evaluation(cart.token)
        logger.info(f"evaluation_started | evaluation_id={evaluation_id} line_items={len(cart.line_items)} subtotal={format_money(cart.subtotal_price)} campaigns={len(self.campaigns)}")

        try:
            for campaign in self.campaigns:
                evaluation_context.campaign = campaign.name
                add_breadcrumb(message=f"Running campaign {campaign.name}", category="campaign", data={"line_items": len(cart.line_items)})
                try:
                    campaign.run(cart)
                except Exception as e:
                    logger.error(
                        f"campaign_failed | campaign={campaign.name} exception_type={type(e).__name__} exception_message={e}",
                        exc_info=True,
                    )
                    capture_exception(e)
                    raise

            logger.info(
                f"evaluation_finished | evaluation_id={evaluation_id} line_items={len(cart.line_items)} subtotal={format_money(cart.subtotal_price)}",
                extra={EVALUATION_END_FLAG: True},
            )
        finally:
            clear_evaluation_context()

        return cart
