from __future__ import annotations

from typing import NamedTuple, Optional

from ...log import log_resolution
from ...schemas.descriptors import TabDescriptor, TabSize, TabState, TabStyle
from ...schemas.styles import TabResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens


class TabMetrics(NamedTuple):
    height: float
    font_size: float
    icon_size: float
    horizontal_padding: float
    spacing: float
    indicator_height: float


TAB_METRICS: dict[TabSize, TabMetrics] = {
    TabSize.SMALL: TabMetrics(22.0, 12.0, 12.0, 8.0, 4.0, 2.0),
    TabSize.MEDIUM: TabMetrics(36.0, 14.0, 16.0, 12.0, 6.0, 2.0),
    TabSize.LARGE: TabMetrics(44.0, 16.0, 18.0, 16.0, 8.0, 3.0),
}

# Disabled black5 tabs keep the resting fill at half opacity.
DISABLED_BACKGROUND_OPACITY = 0.5

TAB_TABLES: dict[str, TokenTable] = {
    "background": TokenTable(
        "tab.background",
        {
            TabStyle.GHOST: {StateCategory.DEFAULT: T.CLEAR},
            TabStyle.BLACK5: {
                StateCategory.DISABLED: T.CONTAINER_BACKGROUND_TRANSPARENT05,
                StateCategory.SELECTED: T.CONTAINER_BACKGROUND_TRANSPARENT10,
                StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_TRANSPARENT05,
            },
        },
    ),
    "text": TokenTable(
        "tab.text",
        {
            ANY: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_SECONDARY,
            },
        },
    ),
    "indicator": TokenTable(
        "tab.indicator",
        {
            ANY: {
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.CLEAR,
            },
        },
    ),
    "divider": TokenTable.constant("tab.divider", T.TEXT_ON_SURFACE_COLOR_TERTIARY),
}


def resolve_tab(
    descriptor: TabDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> TabResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    tokens = resolve_tokens(TAB_TABLES, descriptor.style, descriptor.state.category, scheme, palette)
    dimmed = descriptor.style is TabStyle.BLACK5 and descriptor.state is TabState.DISABLED
    log_resolution("tab", descriptor.state.value, scheme.value)
    return TabResolvedStyle(
        scheme=scheme,
        state=descriptor.state.value,
        style=descriptor.style,
        size=descriptor.size,
        background_opacity=DISABLED_BACKGROUND_OPACITY if dimmed else 1.0,
        is_selected=descriptor.state is TabState.SELECTED,
        is_interactive=descriptor.state is not TabState.DISABLED,
        **TAB_METRICS[descriptor.size]._asdict(),
        **tokens,
    )


__all__ = ["DISABLED_BACKGROUND_OPACITY", "TAB_METRICS", "TAB_TABLES", "TabMetrics", "resolve_tab"]
