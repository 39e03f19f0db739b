from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import AccordionDescriptor
from ...schemas.styles import AccordionResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import StateCategory, TokenTable, resolve_tokens

EXPANDED_CHEVRON_ROTATION = 180.0

# Rows keyed by is_borderless. Borderless accordions draw neither fill nor stroke,
# so both resolve to clear rather than the tertiary border of the bordered row.
ACCORDION_TABLES: dict[str, TokenTable] = {
    "background": TokenTable(
        "accordion.background",
        {
            False: {StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_PRIMARY},
            True: {StateCategory.DEFAULT: T.CLEAR},
        },
    ),
    "border": TokenTable(
        "accordion.border",
        {
            False: {StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_TERTIARY},
            True: {StateCategory.DEFAULT: T.CLEAR},
        },
    ),
    "title": TokenTable.constant("accordion.title", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "subtitle": TokenTable.constant("accordion.subtitle", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "icon": TokenTable.constant("accordion.icon", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "divider": TokenTable.constant("accordion.divider", T.TEXT_ON_SURFACE_COLOR_TERTIARY),
}


def resolve_accordion(
    descriptor: AccordionDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> AccordionResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(ACCORDION_TABLES, descriptor.is_borderless, state, scheme, palette)
    log_resolution("accordion", state.value, scheme.value)
    return AccordionResolvedStyle(
        scheme=scheme,
        state=state.value,
        type=descriptor.type,
        show_divider=descriptor.show_divider,
        is_expanded=descriptor.is_expanded,
        chevron_rotation=EXPANDED_CHEVRON_ROTATION if descriptor.is_expanded else 0.0,
        **tokens,
    )


__all__ = ["ACCORDION_TABLES", "EXPANDED_CHEVRON_ROTATION", "resolve_accordion"]
