from abc import ABC, abstractmethod

from cart_pricing.dto.cart import Cart


class BaseCampaign(ABC):
    name: str = "campaign"

    @abstractmethod
    def run(self, cart: Cart) -> None:
        """Apply the campaign's discounts to `cart` in place."""
        pass
