from __future__ import annotations

from functools import singledispatch
from typing import Any, Optional

from ...schemas.descriptors import (
    AccordionDescriptor,
    BadgeDescriptor,
    ButtonDescriptor,
    CalloutDescriptor,
    ContentCardDescriptor,
    FilterPanelDescriptor,
    GalleryDescriptor,
    IconButtonDescriptor,
    MiniProductCardDescriptor,
    PillDescriptor,
    TabDescriptor,
    TextInputFieldDescriptor,
    TileDescriptor,
)
from ...schemas.styles import ResolvedStyle
from ...schemas.tokens import ColorScheme
from ..palette import TokenPalette
from .accordion import resolve_accordion
from .badge import resolve_badge
from .button import resolve_button
from .callout import resolve_callout
from .content_card import resolve_content_card
from .filter_panel import resolve_filter_panel
from .gallery import resolve_gallery
from .icon_button import resolve_icon_button
from .mini_product_card import resolve_mini_product_card
from .pill import resolve_pill
from .tab import resolve_tab
from .text_input_field import resolve_text_input_field
from .tile import resolve_tile


@singledispatch
def resolve(descriptor: Any, scheme: ColorScheme, palette: Optional[TokenPalette] = None) -> ResolvedStyle:
    """Resolve any family descriptor to its resolved style."""
    raise TypeError(f"No resolver registered for {type(descriptor).__name__}")


resolve.register(AccordionDescriptor, resolve_accordion)
resolve.register(BadgeDescriptor, resolve_badge)
resolve.register(ButtonDescriptor, resolve_button)
resolve.register(CalloutDescriptor, resolve_callout)
resolve.register(ContentCardDescriptor, resolve_content_card)
resolve.register(FilterPanelDescriptor, resolve_filter_panel)
resolve.register(GalleryDescriptor, resolve_gallery)
resolve.register(IconButtonDescriptor, resolve_icon_button)
resolve.register(MiniProductCardDescriptor, resolve_mini_product_card)
resolve.register(PillDescriptor, resolve_pill)
resolve.register(TabDescriptor, resolve_tab)
resolve.register(TextInputFieldDescriptor, resolve_text_input_field)
resolve.register(TileDescriptor, resolve_tile)


__all__ = [
    "resolve",
    "resolve_accordion",
    "resolve_badge",
    "resolve_button",
    "resolve_callout",
    "resolve_content_card",
    "resolve_filter_panel",
    "resolve_gallery",
    "resolve_icon_button",
    "resolve_mini_product_card",
    "resolve_pill",
    "resolve_tab",
    "resolve_text_input_field",
    "resolve_tile",
]
