from typing import List

from cart_pricing.core.constants import CampaignType, PricingErrorCode
from cart_pricing.core.exceptions import InvalidConfigurationError, errmsg
from cart_pricing.dto.campaigns import CampaignDescriptor
from cart_pricing.promotions.selectors import IdSelector, PropertySelector
from cart_pricing.promotions.partitioners import EveryXPartitioner
from cart_pricing.promotions.strategy.factory import build_discount
from .base import BaseCampaign
from .bogo import BogoCampaign
from .bundle import BundleDiscountCampaign
from .spend_x_get_y import SpendXGetYForZCampaign
from .tier_reward import TierRewardCampaign


def build_campaign(descriptor: CampaignDescriptor) -> BaseCampaign:
    campaign_type = descriptor.campaign_type
    if campaign_type == CampaignType.BOGO:
        return BogoCampaign(
            IdSelector(descriptor.product_ids),
            PropertySelector(descriptor.property_key, descriptor.property_value),
            build_discount(descriptor.discount_type, descriptor.discount_amount, descriptor.discount_message),
            EveryXPartitioner(descriptor.paid_item_count),
            name=descriptor.name,
        )
    elif campaign_type == CampaignType.SPEND_X_GET_Y:
        return SpendXGetYForZCampaign([descriptor], name=descriptor.name)
    elif campaign_type == CampaignType.TIER_REWARD:
        return TierRewardCampaign(descriptor, name=descriptor.name)
    elif campaign_type == CampaignType.BUNDLE:
        return BundleDiscountCampaign([descriptor], name=descriptor.name)
    raise InvalidConfigurationError(f"{errmsg.UNKNOWN_CAMPAIGN_TYPE}: {campaign_type}", PricingErrorCode.INVALID_CONFIGURATION)


def build_campaigns(descriptors: List[CampaignDescriptor]) -> List[BaseCampaign]:
    return [build_campaign(descriptor) for descriptor in descriptors]
