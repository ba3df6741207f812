import json
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from cart_pricing.core.constants import PricingErrorCode
from cart_pricing.core.exceptions import InvalidConfigurationError, errmsg
from cart_pricing.dto.campaigns import CampaignDescriptor
from cart_pricing.promotions.catalog import DEFAULT_CAMPAIGNS

# Settings
from cart_pricing.config.settings import PricingConfigs
configs = PricingConfigs()

# Logging
from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.loader")

_descriptor_list_adapter = TypeAdapter(List[CampaignDescriptor])


def parse_campaign_descriptors(data: Any) -> List[CampaignDescriptor]:
    """Validate raw descriptor dicts; any problem is a configuration error raised before a cart is touched."""
    try:
        descriptors = _descriptor_list_adapter.validate_python(data)
    except ValidationError as e:
        logger.error(f"campaign_descriptor_invalid | errors={e.errors()}")
        raise InvalidConfigurationError(f"{errmsg.INVALID_CAMPAIGN}: {e}", PricingErrorCode.INVALID_CONFIGURATION) from e

    logger.info(f"campaign_descriptors_loaded | count={len(descriptors)}")
    return descriptors


def load_campaign_descriptors(path: str) -> List[CampaignDescriptor]:
    """Read a JSON array of campaign descriptors from `path`."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"campaign_catalog_unreadable | path={path} error={e}")
        raise InvalidConfigurationError(f"{errmsg.CATALOG_NOT_READABLE}: {path}", PricingErrorCode.CATALOG_NOT_READABLE) from e

    return parse_campaign_descriptors(data)


def get_configured_descriptors(campaigns_file: Optional[str] = None) -> List[CampaignDescriptor]:
    """Descriptors from CAMPAIGNS_FILE when set, the built-in catalog otherwise."""
    campaigns_file = campaigns_file if campaigns_file is not None else configs.CAMPAIGNS_FILE
    if campaigns_file:
        return load_campaign_descriptors(campaigns_file)
    return parse_campaign_descriptors(DEFAULT_CAMPAIGNS)
