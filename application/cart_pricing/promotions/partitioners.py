from typing import List

from cart_pricing.dto.cart import Cart, LineItem
from cart_pricing.promotions.strategy.base import BaseDiscount

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.promotions.partitioners")


def sort_by_unit_price(line_items: List[LineItem]) -> List[LineItem]:
    """Cheapest first; stable so equal prices keep cart order"""
    return sorted(line_items, key=lambda line_item: line_item.variant.price)


class EveryXPartitioner:
    """Selects every X units of a group of identical items for discount"""

    def __init__(self, paid_item_count: int):
        self.paid_item_count = paid_item_count

    def partition(self, cart: Cart, applicable_line_items: List[LineItem]) -> List[LineItem]:
        sorted_items = sort_by_unit_price(applicable_line_items)
        total_applicable_quantity = sum(line_item.quantity for line_item in sorted_items)
        # only whole groups of paid_item_count take part
        discounted_items_remaining = total_applicable_quantity - total_applicable_quantity % self.paid_item_count

        logger.info(f"every_x_partition | every={self.paid_item_count} total_quantity={total_applicable_quantity} discountable={discounted_items_remaining}")

        discounted_items = []
        for line_item in sorted_items:
            if discounted_items_remaining == 0:
                break

            discounted_item = line_item
            if line_item.quantity > discounted_items_remaining:
                discounted_item = line_item.split(take=discounted_items_remaining)
                cart.insert_after(line_item, discounted_item)

            discounted_items_remaining -= discounted_item.quantity
            discounted_items.append(discounted_item)

        return discounted_items


class DiscountLoop:
    """Discounts a fixed number of units across line items, splitting the item that straddles the limit"""

    def __init__(self, discount: BaseDiscount):
        self.discount = discount

    def loop_items(self, cart: Cart, line_items: List[LineItem], num_to_discount: int) -> int:
        """Returns the number of units actually discounted."""
        discounted = 0
        for line_item in line_items:
            if num_to_discount <= 0:
                break

            if line_item.quantity > num_to_discount:
                split_line_item = line_item.split(take=num_to_discount)
                self.discount.apply(split_line_item)
                cart.insert_after(line_item, split_line_item)
                discounted += num_to_discount
                break

            self.discount.apply(line_item)
            num_to_discount -= line_item.quantity
            discounted += line_item.quantity

        return discounted
