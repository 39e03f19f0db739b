from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import MiniProductCardDescriptor
from ...schemas.styles import MiniProductCardResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ...utils.pricing import formatted_price, is_sale_price, original_price, price_prefix
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens
from .badge import resolve_badge

MINI_PRODUCT_CARD_TABLES: dict[str, TokenTable] = {
    "background_color": TokenTable.constant("mini_product_card.background", T.CONTAINER_BACKGROUND_PRIMARY),
    "placeholder_background_color": TokenTable.constant(
        "mini_product_card.placeholder_background", T.CONTAINER_BACKGROUND_SECONDARY
    ),
    "product_name_color": TokenTable.constant("mini_product_card.product_name", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "price_color": TokenTable.constant("mini_product_card.price", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "sale_price_color": TokenTable.constant("mini_product_card.sale_price", T.TEXT_ON_SURFACE_COLOR_DANGER),
    "price_secondary_color": TokenTable.constant(
        "mini_product_card.price_secondary", T.TEXT_ON_SURFACE_COLOR_SECONDARY
    ),
    "star_color": TokenTable.constant("mini_product_card.star", T.ICON_COLOR_BRAND),
    "review_count_color": TokenTable.constant("mini_product_card.review_count", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "sponsored_text_color": TokenTable.constant(
        "mini_product_card.sponsored_text", T.TEXT_ON_SURFACE_COLOR_SECONDARY
    ),
    "sponsored_background_color": TokenTable.constant(
        "mini_product_card.sponsored_background", T.CONTAINER_BACKGROUND_PRIMARY
    ),
}


def resolve_mini_product_card(
    descriptor: MiniProductCardDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> MiniProductCardResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(MINI_PRODUCT_CARD_TABLES, ANY, state, scheme, palette)
    on_sale = is_sale_price(descriptor.price)

    badge = None
    if descriptor.badge is not None:
        badge = resolve_badge(descriptor.badge.as_descriptor(), scheme, palette)

    rating = descriptor.rating
    log_resolution("mini_product_card", state.value, scheme.value)
    return MiniProductCardResolvedStyle(
        scheme=scheme,
        state=state.value,
        display_price_color=tokens["sale_price_color"] if on_sale else tokens["price_color"],
        product_name=descriptor.product_name,
        formatted_price=formatted_price(descriptor.price),
        original_price=original_price(descriptor.price),
        price_prefix=price_prefix(descriptor.price),
        badge_text=descriptor.badge.text if descriptor.badge is not None else None,
        badge=badge,
        rating=rating.rating if rating is not None else None,
        review_count=rating.review_count if rating is not None else None,
        is_sponsored=descriptor.is_sponsored,
        is_sale_price=on_sale,
        **tokens,
    )


__all__ = ["MINI_PRODUCT_CARD_TABLES", "resolve_mini_product_card"]
