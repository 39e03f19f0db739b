from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import ContentCardDescriptor
from ...schemas.styles import ContentCardResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens

CONTENT_CARD_TABLES: dict[str, TokenTable] = {
    "background": TokenTable.constant("content_card.background", T.CONTAINER_BACKGROUND_PRIMARY),
    "title": TokenTable.constant("content_card.title", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "subtitle": TokenTable.constant("content_card.subtitle", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "icon": TokenTable.constant("content_card.icon", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
}


def resolve_content_card(
    descriptor: ContentCardDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> ContentCardResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(CONTENT_CARD_TABLES, ANY, state, scheme, palette)
    log_resolution("content_card", state.value, scheme.value)
    return ContentCardResolvedStyle(
        scheme=scheme,
        state=state.value,
        body_placement=descriptor.body_placement,
        body_first=descriptor.body_placement.is_first,
        is_full_bleed=descriptor.body_placement.is_full_bleed,
        show_title=descriptor.show_title,
        show_body=descriptor.show_body,
        show_bottom_action=descriptor.show_bottom_action,
        **tokens,
    )


__all__ = ["CONTENT_CARD_TABLES", "resolve_content_card"]
