from abc import ABC, abstractmethod

from cart_pricing.dto.cart import LineItem


class BaseDiscount(ABC):
    def __init__(self, message: str):
        self.message = message

    @abstractmethod
    def apply(self, line_item: LineItem) -> None:
        """Write a new line price on `line_item`. Compounds if called twice on the same item."""
        pass
