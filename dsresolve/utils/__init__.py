from .pricing import format_amount, formatted_price, is_sale_price, original_price, price_prefix

__all__ = [
    "format_amount",
    "formatted_price",
    "is_sale_price",
    "original_price",
    "price_prefix",
]
