from __future__ import annotations

from typing import Optional

from ..schemas.descriptors import Price, RangePrice, SalePrice, StandardPrice, StartingAtPrice


def format_amount(dollars: int, cents: int = 0) -> str:
    """Format a dollar amount, showing cents only when there are any."""
    if cents > 0:
        return f"${dollars}.{cents:02d}"
    return f"${dollars}"


def formatted_price(price: Price) -> str:
    if isinstance(price, RangePrice):
        low = format_amount(price.min_dollars, price.min_cents)
        high = format_amount(price.max_dollars, price.max_cents)
        return f"{low} - {high}"
    if isinstance(price, (StandardPrice, SalePrice, StartingAtPrice)):
        return format_amount(price.dollars, price.cents)
    raise TypeError(f"Unsupported price type: {type(price).__name__}")


def original_price(price: Price) -> Optional[str]:
    if isinstance(price, SalePrice):
        return format_amount(price.original_dollars, price.original_cents)
    return None


def price_prefix(price: Price) -> Optional[str]:
    if isinstance(price, StartingAtPrice):
        return "From"
    return None


def is_sale_price(price: Price) -> bool:
    return isinstance(price, SalePrice)


__all__ = [
    "format_amount",
    "formatted_price",
    "is_sale_price",
    "original_price",
    "price_prefix",
]
