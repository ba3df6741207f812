from typing import List, Optional

from dotenv import load_dotenv

from cart_pricing.logging.utils import initialize_logging, get_app_logger

load_dotenv()

# Initialize Sentry (must be done early, before other imports)
from cart_pricing.config.sentry import init_sentry
init_sentry()

# Initialize structured logging
initialize_logging()
logger = get_app_logger('cart_pricing.main')

from cart_pricing.dto.cart import Cart
from cart_pricing.dto.campaigns import CampaignDescriptor
from cart_pricing.promotions.engine import CampaignEngine
from cart_pricing.promotions.loader import get_configured_descriptors


def run(cart: Cart, descriptors: Optional[List[CampaignDescriptor]] = None) -> Cart:
    """
    Price `cart` with the given campaigns, or the configured catalog when
    none are passed. The cart is mutated in place and returned.
    """
    if descriptors is None:
        descriptors = get_configured_descriptors()

    engine = CampaignEngine.from_descriptors(descriptors)
    return engine.run(cart)
