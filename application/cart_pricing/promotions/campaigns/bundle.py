from dataclasses import dataclass, field
from typing import Dict, List, Optional

from cart_pricing.core.constants import LineItemProperty
from cart_pricing.dto.cart import Cart, LineItem
from cart_pricing.dto.campaigns import BundleConfig
from cart_pricing.promotions.partitioners import DiscountLoop
from cart_pricing.promotions.strategy.factory import build_discount
from .base import BaseCampaign

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.campaigns.bundle")


@dataclass
class BundleSlot:
    """Cart items found for one required bundle product"""
    quantity_needed: int
    cart_items: List[LineItem] = field(default_factory=list)
    total_quantity: int = 0


class BundleSelector:
    """Finds the cart items that belong to one configured bundle"""

    def __init__(self, bundle: BundleConfig):
        self.bundle = bundle

    def is_opted_in(self, line_item: LineItem) -> bool:
        return line_item.properties.get(self.bundle.discount_line_item_property) == LineItemProperty.OPT_IN_VALUE

    def build(self, cart: Cart) -> Dict[int, BundleSlot]:
        slots = {item.product_id: BundleSlot(quantity_needed=item.quantity_needed) for item in self.bundle.bundle_items}

        for line_item in cart.line_items:
            if line_item.line_price_changed:
                continue
            slot = slots.get(line_item.variant.product.id)
            if slot is None or not self.is_opted_in(line_item):
                continue
            slot.cart_items.append(line_item)
            slot.total_quantity += line_item.quantity

        return slots


def count_bundles(slots: Dict[int, BundleSlot]) -> int:
    """Number of complete bundles the slots can form"""
    if not slots:
        return 0
    return min(slot.total_quantity // slot.quantity_needed for slot in slots.values())


class BundleDiscountCampaign(BaseCampaign):
    """Buy products W, X and Y together, get Z discount on each of them"""

    def __init__(self, campaigns: List[BundleConfig], name: Optional[str] = None):
        self.campaigns = campaigns
        self.name = name or "bundle"

    def run(self, cart: Cart) -> None:
        for campaign in self.campaigns:
            self.run_bundle(cart, campaign)

    def run_bundle(self, cart: Cart, campaign: BundleConfig) -> int:
        """Returns the number of bundles discounted."""
        slots = BundleSelector(campaign).build(cart)

        incomplete = [product_id for product_id, slot in slots.items() if slot.total_quantity < slot.quantity_needed]
        if incomplete:
            logger.info(f"bundle_incomplete | property={campaign.discount_line_item_property} missing_products={incomplete}")
            return 0

        num_bundles = count_bundles(slots)

        discount = build_discount(campaign.discount_type, campaign.discount_amount, campaign.discount_message)
        discount_loop = DiscountLoop(discount)

        for slot in slots.values():
            discount_loop.loop_items(cart, slot.cart_items, slot.quantity_needed * num_bundles)

        logger.info(f"bundle_discounted | property={campaign.discount_line_item_property} bundles={num_bundles}")
        return num_bundles
