from typing import Dict, List, Optional
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator

from cart_pricing.core.constants import PricingErrorCode
from cart_pricing.core.exceptions import InvalidOperationError, errmsg
from cart_pricing.core.money import MONEY_ZERO

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.dto.cart")


class Product(BaseModel):
    """Catalog product a variant belongs to"""
    id: int
    title: str = Field("", description="Product title, display only")
    tags: List[str] = Field(default_factory=list, description="Merchant tags, matched case-insensitively")
    product_type: str = Field("", description="Product type")
    vendor: str = Field("", description="Vendor name")


class Variant(BaseModel):
    """Purchasable variant of a product"""
    id: int
    price: Decimal = Field(..., ge=0, description="Unit price")
    product: Product


class PriceChange(BaseModel):
    """One recorded call to change_line_price"""
    previous_line_price: Decimal
    new_line_price: Decimal
    message: str


class LineItem(BaseModel):
    """One cart row: a variant, its quantity and its current price state"""
    variant: Variant
    quantity: int = Field(..., gt=0, description="Number of units on this row")
    line_price: Optional[Decimal] = Field(None, description="Current line price; defaults to unit price * quantity")
    original_line_price: Optional[Decimal] = Field(None, description="Line price before any campaign ran")
    properties: Dict[str, str] = Field(default_factory=dict, description="Line item properties set by the storefront")
    selling_plan_id: Optional[int] = Field(None, description="Recurring purchase marker")
    line_price_changed: bool = False
    price_changes: List[PriceChange] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_line_prices(self):
        if self.line_price is None:
            self.line_price = self.variant.price * self.quantity
        if self.original_line_price is None:
            self.original_line_price = self.line_price
        return self

    @property
    def messages(self) -> List[str]:
        return [change.message for change in self.price_changes]

    def change_line_price(self, new_price: Decimal, message: str = "") -> None:
        if new_price < MONEY_ZERO:
            logger.error(f"negative_line_price | variant={self.variant.id} new_price={new_price}")
            raise InvalidOperationError(f"{errmsg.NEGATIVE_LINE_PRICE}: {new_price}", PricingErrorCode.NEGATIVE_LINE_PRICE)

        self.price_changes.append(PriceChange(previous_line_price=self.line_price, new_line_price=new_price, message=message))
        self.line_price = new_price
        self.line_price_changed = True

    def split(self, take: int) -> "LineItem":
        """
        Move `take` units into a new sibling line item and return it.

        The sibling gets its share of the current and original line prices;
        this item keeps the exact remainder so the two always add up to the
        pre-split amounts. Inserting the sibling into the cart is the
        caller's job.
        """
        if take <= 0 or take >= self.quantity:
            logger.error(f"invalid_split | variant={self.variant.id} quantity={self.quantity} take={take}")
            raise InvalidOperationError(
                f"{errmsg.SPLIT_OUT_OF_RANGE}: take={take} quantity={self.quantity}",
                PricingErrorCode.INVALID_SPLIT_QUANTITY,
            )

        split_line_price = (self.line_price * take) / self.quantity
        split_original_price = (self.original_line_price * take) / self.quantity

        sibling = LineItem(
            variant=self.variant,
            quantity=take,
            line_price=split_line_price,
            original_line_price=split_original_price,
            properties=dict(self.properties),
            selling_plan_id=self.selling_plan_id,
            line_price_changed=self.line_price_changed,
            price_changes=list(self.price_changes),
        )

        self.quantity -= take
        self.line_price -= split_line_price
        self.original_line_price -= split_original_price
        return sibling


class DiscountCode(BaseModel):
    """Discount code entered at checkout"""
    code: str
    rejected: bool = False
    rejection_message: Optional[str] = None

    def reject(self, message: str) -> None:
        self.rejected = True
        self.rejection_message = message


class Cart(BaseModel):
    """Checkout cart; line item order is significant"""
    token: Optional[str] = Field(None, description="Opaque cart token used for log correlation")
    line_items: List[LineItem] = Field(default_factory=list)
    discount_code: Optional[DiscountCode] = None

    @property
    def subtotal_price(self) -> Decimal:
        return sum((line_item.line_price for line_item in self.line_items), MONEY_ZERO)

    def index_of(self, line_item: LineItem) -> int:
        # identity, not equality: split siblings can compare equal field by field
        for position, candidate in enumerate(self.line_items):
            if candidate is line_item:
                return position
        raise InvalidOperationError(errmsg.LINE_ITEM_NOT_IN_CART, PricingErrorCode.LINE_ITEM_NOT_IN_CART)

    def insert(self, position: int, line_item: LineItem) -> None:
        self.line_items.insert(position, line_item)

    def insert_after(self, existing: LineItem, line_item: LineItem) -> None:
        self.insert(self.index_of(existing) + 1, line_item)
