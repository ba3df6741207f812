from typing import Dict, List, Optional

from cart_pricing.dto.cart import Cart, LineItem
from cart_pricing.promotions.selectors import IdSelector, PropertySelector
from cart_pricing.promotions.partitioners import EveryXPartitioner
from cart_pricing.promotions.strategy.base import BaseDiscount
from .base import BaseCampaign

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.campaigns.bogo")


def group_by_product(line_items: List[LineItem]) -> Dict[int, List[LineItem]]:
    """Product id -> line items of that product, in cart order"""
    groups: Dict[int, List[LineItem]] = {}
    for line_item in line_items:
        groups.setdefault(line_item.variant.product.id, []).append(line_item)
    return groups


class BogoCampaign(BaseCampaign):
    """Identical-product bundle pricing: every X opted-in units of a product are discounted"""

    def __init__(self, id_selector: IdSelector, property_selector: PropertySelector, discount: BaseDiscount, partitioner: EveryXPartitioner, name: Optional[str] = None):
        self.id_selector = id_selector
        self.property_selector = property_selector
        self.discount = discount
        self.partitioner = partitioner
        self.name = name or f"bogo:{property_selector.key}"

    def eligible_items(self, cart: Cart) -> List[LineItem]:
        return [
            line_item for line_item in cart.line_items
            if not line_item.line_price_changed
            and self.id_selector.match(line_item) and self.property_selector.match(line_item)
        ]

    def run(self, cart: Cart) -> None:
        eligible_items = self.eligible_items(cart)
        applicable_items_map = group_by_product(eligible_items)

        logger.info(f"bogo_groups | campaign={self.name} eligible={len(eligible_items)} products={list(applicable_items_map.keys())}")

        for product_id, applicable_items in applicable_items_map.items():
            discount_items = self.partitioner.partition(cart, applicable_items)
            for item in discount_items:
                self.discount.apply(item)
            logger.info(f"bogo_product_discounted | campaign={self.name} product={product_id} discounted_units={sum(item.quantity for item in discount_items)}")
