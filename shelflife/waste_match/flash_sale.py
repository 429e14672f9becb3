"""
Flash Sale - Price a clearance offer for stock about to spoil.

Builds the offer and a shareable WhatsApp link. Nothing is sent from here.
"""

import math
from typing import Optional
from urllib.parse import quote

from .config import FlashSaleSettings
from .models import FlashSaleQuote

SHARE_URL = "https://wa.me/?text={text}"

# Left unescaped in the share text, matching encodeURIComponent
SHARE_SAFE_CHARS = "!~*'()"


def _finite_or_zero(value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def discounted_price(current_price: float, discount_percent: float) -> int:
    """Whole-rupee price after discount, never negative."""
    base = _finite_or_zero(current_price)
    discount = _finite_or_zero(discount_percent)
    raw = math.floor(base * (1 - discount / 100))
    return max(raw, 0)


def build_flash_sale(
    product_name: str,
    current_price: float,
    stock: int,
    discount_percent: Optional[float] = None,
    settings: Optional[FlashSaleSettings] = None,
    currency_symbol: str = "₹",
) -> FlashSaleQuote:
    """
    Quote a flash sale.

    The discount is clamped to the configured range; None uses the
    configured default.
    """
    settings = settings or FlashSaleSettings()
    discount = settings.clamp(discount_percent)

    new_price = discounted_price(current_price, discount)
    units = max(int(_finite_or_zero(stock)), 0)
    recovered = new_price * units

    message = (
        f"Flash sale on {product_name}! New price: {currency_symbol}{new_price}. "
        f"Available stock: {stock}."
    )

    return FlashSaleQuote(
        product_name=product_name,
        current_price=current_price,
        stock=stock,
        discount_percent=discount,
        new_price=new_price,
        recovered_revenue=recovered,
        message=message,
        share_url=SHARE_URL.format(text=quote(message, safe=SHARE_SAFE_CHARS)),
    )
