import os
import tempfile
from decimal import Decimal

import pytest

# Log files go to a throwaway directory; must be set before cart_pricing is imported
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="cart-pricing-logs-")
os.environ["FIREHOSE_ENABLED"] = "false"
os.environ["SENTRY_ENABLED"] = "false"
os.environ["SLACK_ALERTS_ENABLED"] = "false"
os.environ["CAMPAIGNS_FILE"] = ""

from cart_pricing.dto.cart import Cart, DiscountCode, LineItem, Product, Variant


@pytest.fixture
def make_line_item():
    """Builds a line item from a handful of keyword arguments."""
    def _make(product_id=1, price="10.00", quantity=1, variant_id=None, tags=None, properties=None,
              product_type="", vendor="", selling_plan_id=None):
        product = Product(id=product_id, title=f"Product {product_id}", tags=tags or [], product_type=product_type, vendor=vendor)
        variant = Variant(id=variant_id or product_id * 10, price=Decimal(price), product=product)
        return LineItem(variant=variant, quantity=quantity, properties=properties or {}, selling_plan_id=selling_plan_id)
    return _make


@pytest.fixture
def make_cart():
    def _make(*line_items, discount_code=None, token="cart-token-1"):
        code = DiscountCode(code=discount_code) if discount_code else None
        return Cart(token=token, line_items=list(line_items), discount_code=code)
    return _make
