from typing import Annotated, List, Literal, Optional, Union
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator, model_validator

from cart_pricing.core.constants import (
    CodeMatchType, DiscountType, LineItemProperty, MatchType, SelectorType, TIER_REWARD_TAG,
)

from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("cart_pricing.dto.campaigns")


class DiscountSettings(BaseModel):
    """Discount fields shared by every campaign descriptor"""
    discount_type: DiscountType = Field(..., description="percent or amount (dollars off per unit)")
    discount_amount: Decimal = Field(..., ge=0, description="Percent (0-100) or dollars per unit")
    discount_message: str = Field(..., description="Customer-facing reason shown next to the new price")

    @model_validator(mode="after")
    def validate_percent_range(self):
        if self.discount_type == DiscountType.PERCENT and self.discount_amount > 100:
            logger.error(f"Invalid percent discount: {self.discount_amount}")
            raise ValueError("Percent discounts must be between 0 and 100")
        return self


class BogoCampaignConfig(DiscountSettings):
    """Every `paid_item_count` identical opted-in items get the discount"""
    campaign_type: Literal["bogo"] = "bogo"
    name: Optional[str] = None
    product_ids: List[int] = Field(..., min_length=1, description="Products eligible for the campaign")
    property_key: str = Field(..., min_length=1, description="Line item property the storefront sets on opt-in")
    property_value: str = Field(LineItemProperty.OPT_IN_VALUE, description="Value the property must carry")
    paid_item_count: int = Field(..., gt=0, description="Quantity that forms one discounted group")


class SpendXGetYConfig(DiscountSettings):
    """Spend at least `threshold`, get `quantity_to_discount` eligible items discounted"""
    campaign_type: Literal["spend_x_get_y"] = "spend_x_get_y"
    name: Optional[str] = None
    product_selector_match_type: MatchType = MatchType.INCLUDE
    product_selector_type: SelectorType
    product_selectors: List[Union[int, str]] = Field(default_factory=list)
    threshold: Decimal = Field(..., ge=0, description="Cart subtotal required, in dollars")
    quantity_to_discount: int = Field(..., gt=0)
    coupon_prevent_message: str = Field(..., description="Shown when a non-whitelisted discount code is rejected")
    whitelisted_discount_code_match_type: CodeMatchType = CodeMatchType.PARTIAL
    whitelisted_discount_code_part: List[str] = Field(default_factory=list)


class TierRewardConfig(DiscountSettings):
    """Per-item reward gated by the item's own `_threshold` property"""
    campaign_type: Literal["tier_reward"] = "tier_reward"
    name: Optional[str] = None
    reward_tag: str = TIER_REWARD_TAG
    quantity_to_discount: int = Field(1, gt=0)
    discount_type: DiscountType = DiscountType.PERCENT
    discount_amount: Decimal = Field(Decimal("100"), ge=0)
    discount_message: str = "Free tier reward"
    coupon_prevent_message: str = "Discount codes cannot be combined with free item promotions."

    @field_validator("discount_type")
    def validate_percent_only(cls, v):
        if v != DiscountType.PERCENT:
            logger.error(f"Invalid tier reward discount type: {v}")
            raise ValueError("Tier rewards only support percent discounts")
        return v


class BundleItemConfig(BaseModel):
    product_id: int
    quantity_needed: int = Field(..., gt=0)


class BundleConfig(DiscountSettings):
    """Discount applied once every listed product is present in its required quantity"""
    campaign_type: Literal["bundle"] = "bundle"
    name: Optional[str] = None
    bundle_items: List[BundleItemConfig] = Field(..., min_length=1)
    discount_line_item_property: str = Field(..., min_length=1, description="Opt-in property the storefront sets to 'Yes'")

    @field_validator("bundle_items")
    def validate_unique_products(cls, v):
        product_ids = [item.product_id for item in v]
        if len(product_ids) != len(set(product_ids)):
            logger.error(f"Duplicate bundle products: {product_ids}")
            raise ValueError("Each bundle product may only be listed once")
        return v


CampaignDescriptor = Annotated[
    Union[BogoCampaignConfig, SpendXGetYConfig, TierRewardConfig, BundleConfig],
    Field(discriminator="campaign_type"),
]
