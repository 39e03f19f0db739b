from __future__ import annotations

from typing import NamedTuple, Optional

from ...log import log_resolution
from ...schemas.descriptors import PillDescriptor, PillSize, PillStyle
from ...schemas.styles import PillResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import StateCategory, TokenTable, resolve_tokens


class PillMetrics(NamedTuple):
    height: float
    font_size: float
    icon_size: float
    horizontal_padding: float
    vertical_padding: float
    spacing: float


PILL_METRICS: dict[PillSize, PillMetrics] = {
    PillSize.SM: PillMetrics(24.0, 12.0, 12.0, 8.0, 4.0, 4.0),
    PillSize.MD: PillMetrics(28.0, 12.0, 14.0, 10.0, 6.0, 4.0),
    PillSize.LG: PillMetrics(32.0, 14.0, 14.0, 12.0, 8.0, 6.0),
    PillSize.XL: PillMetrics(40.0, 16.0, 16.0, 16.0, 10.0, 8.0),
}

_DISABLED_BACKGROUND = T.CONTAINER_BACKGROUND_TRANSPARENT05

# Background rows are keyed by (style, has_background).
PILL_TABLES: dict[str, TokenTable] = {
    "background": TokenTable(
        "pill.background",
        {
            (PillStyle.OUTLINED, True): {
                StateCategory.DISABLED: _DISABLED_BACKGROUND,
                StateCategory.SELECTED: T.CONTAINER_BACKGROUND_TRANSPARENT10,
                StateCategory.DEFAULT: T.WHITE,
            },
            (PillStyle.OUTLINED, False): {
                StateCategory.DISABLED: _DISABLED_BACKGROUND,
                StateCategory.DEFAULT: T.CLEAR,
            },
            (PillStyle.FILLED, True): {
                StateCategory.DISABLED: _DISABLED_BACKGROUND,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_TRANSPARENT10,
            },
            (PillStyle.FILLED, False): {
                StateCategory.DISABLED: _DISABLED_BACKGROUND,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_TRANSPARENT10,
            },
        },
    ),
    "border": TokenTable(
        "pill.border",
        {
            PillStyle.OUTLINED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
            },
            PillStyle.FILLED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.DEFAULT: T.CLEAR,
            },
        },
    ),
    "foreground": TokenTable(
        "pill.foreground",
        {
            PillStyle.OUTLINED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_SECONDARY,
            },
            PillStyle.FILLED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.WHITE,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
            },
        },
    ),
}


def resolve_pill(
    descriptor: PillDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> PillResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    tokens = resolve_tokens(
        PILL_TABLES,
        descriptor.style,
        descriptor.state.category,
        scheme,
        palette,
        field_keys={"background": (descriptor.style, descriptor.has_background)},
    )
    metrics = PILL_METRICS[descriptor.size]
    log_resolution("pill", descriptor.state.value, scheme.value)
    return PillResolvedStyle(
        scheme=scheme,
        state=descriptor.state.value,
        style=descriptor.style,
        size=descriptor.size,
        has_background=descriptor.has_background,
        corner_radius=metrics.height / 2,
        border_width=1.0 if descriptor.style is PillStyle.OUTLINED else 0.0,
        **metrics._asdict(),
        **tokens,
    )


__all__ = ["PILL_METRICS", "PILL_TABLES", "PillMetrics", "resolve_pill"]
