from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import CalloutDescriptor, CalloutVariant
from ...schemas.styles import CalloutResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens


def _content_table(name: str) -> TokenTable:
    return TokenTable(
        name,
        {
            CalloutVariant.INVERSE: {StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_INVERSE},
            ANY: {StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_PRIMARY},
        },
    )


CALLOUT_TABLES: dict[str, TokenTable] = {
    "background": TokenTable(
        "callout.background",
        {
            CalloutVariant.NEUTRAL: {StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_TRANSPARENT20},
            CalloutVariant.BRAND: {StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_BRAND_ACCENT},
            CalloutVariant.INVERSE: {StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_INVERSE},
        },
    ),
    "title": _content_table("callout.title"),
    "body": _content_table("callout.body"),
    "icon": _content_table("callout.icon"),
    "corner_radius": TokenTable.constant("callout.corner_radius", T.BORDER_RADIUS_XL),
}


def resolve_callout(
    descriptor: CalloutDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> CalloutResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(CALLOUT_TABLES, descriptor.variant, state, scheme, palette)
    log_resolution("callout", state.value, scheme.value)
    return CalloutResolvedStyle(
        scheme=scheme,
        state=state.value,
        variant=descriptor.variant,
        is_floating=descriptor.is_floating,
        **tokens,
    )


__all__ = ["CALLOUT_TABLES", "resolve_callout"]
