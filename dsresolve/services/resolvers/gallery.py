from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import GalleryDescriptor
from ...schemas.styles import GalleryResolvedStyle, GalleryTabStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens

GALLERY_TABLES: dict[str, TokenTable] = {
    "background": TokenTable.constant("gallery.background", T.CONTAINER_BACKGROUND_PRIMARY),
    "text": TokenTable.constant("gallery.text", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "secondary_text": TokenTable.constant("gallery.secondary_text", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "icon": TokenTable.constant("gallery.icon", T.ICON_COLOR_SECONDARY),
    "selected_tab_color": TokenTable.constant("gallery.selected_tab", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "unselected_tab_color": TokenTable.constant("gallery.unselected_tab", T.TEXT_ON_SURFACE_COLOR_TERTIARY),
    "tab_bar_background": TokenTable.constant("gallery.tab_bar_background", T.CONTAINER_BACKGROUND_SECONDARY),
    "thumbnail_strip_background": TokenTable.constant(
        "gallery.thumbnail_strip_background", T.CONTAINER_BACKGROUND_SECONDARY
    ),
    "selected_thumbnail_border": TokenTable.constant("gallery.selected_thumbnail_border", T.BORDER_COLOR_PRIMARY),
    "placeholder": TokenTable.constant("gallery.placeholder", T.CONTAINER_BACKGROUND_TRANSPARENT05),
    "button": TokenTable.constant("gallery.button", T.CONTAINER_BACKGROUND_BRAND),
}

GALLERY_TAB_TABLE = TokenTable(
    "gallery.tab",
    {
        ANY: {
            StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
            StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
        },
    },
)


def resolve_gallery(
    descriptor: GalleryDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> GalleryResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(GALLERY_TABLES, ANY, state, scheme, palette)

    tabs = []
    for tab in descriptor.tabs:
        is_selected = tab is descriptor.selected_tab
        category = StateCategory.SELECTED if is_selected else StateCategory.DEFAULT
        tabs.append(
            GalleryTabStyle(
                tab=tab,
                label=tab.label,
                is_selected=is_selected,
                color=palette.ref(GALLERY_TAB_TABLE.lookup(ANY, category), scheme),
            )
        )

    log_resolution("gallery", descriptor.selected_tab.value, scheme.value)
    return GalleryResolvedStyle(
        scheme=scheme,
        state=state.value,
        selected_tab=descriptor.selected_tab,
        tabs=tuple(tabs),
        **tokens,
    )


__all__ = ["GALLERY_TABLES", "GALLERY_TAB_TABLE", "resolve_gallery"]
