from __future__ import annotations

from typing import NamedTuple, Optional

from ...log import log_resolution
from ...schemas.descriptors import BadgeColor, BadgeDescriptor, BadgeSize, BadgeVariant
from ...schemas.styles import BadgeResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import StateCategory, TokenTable, resolve_tokens


class BadgeMetrics(NamedTuple):
    min_height: float
    font_size: float
    icon_size: float
    corner_radius: float
    padding: float


BADGE_METRICS: dict[BadgeSize, BadgeMetrics] = {
    BadgeSize.SMALL: BadgeMetrics(16.0, 12.0, 12.0, 6.0, 4.0),
    BadgeSize.BASE: BadgeMetrics(20.0, 14.0, 14.0, 8.0, 4.0),
}

ACCENT_TOKENS: dict[BadgeColor, T] = {
    BadgeColor.INFO: T.BADGE_INFO_ACCENT,
    BadgeColor.SUCCESS: T.BADGE_SUCCESS_ACCENT,
    BadgeColor.WARNING: T.BADGE_WARNING_ACCENT,
    BadgeColor.DANGER: T.BADGE_DANGER_ACCENT,
    BadgeColor.PRIMARY: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
    BadgeColor.MEDIUM: T.TEXT_ON_SURFACE_COLOR_SECONDARY,
    BadgeColor.BRAND: T.BUTTON_BACKGROUND_BRAND_FILLED_DEFAULT,
}

SUBTLE_BACKGROUND_TOKENS: dict[BadgeColor, T] = {
    BadgeColor.INFO: T.FEEDBACK_BACKGROUND_INFORMATIONAL_ACCENT1,
    BadgeColor.SUCCESS: T.FEEDBACK_BACKGROUND_SUCCESS_ACCENT1,
    BadgeColor.WARNING: T.FEEDBACK_BACKGROUND_WARNING_ACCENT1,
    BadgeColor.DANGER: T.FEEDBACK_BACKGROUND_ERROR_ACCENT1,
    BadgeColor.PRIMARY: T.CONTAINER_BACKGROUND_TRANSPARENT10,
    BadgeColor.MEDIUM: T.CONTAINER_BACKGROUND_TRANSPARENT05,
    BadgeColor.BRAND: T.CONTAINER_BACKGROUND_BRAND_ACCENT,
}


def _strong_foreground(color: BadgeColor) -> T:
    # The warning accent is too light for white text.
    if color is BadgeColor.WARNING:
        return T.TEXT_ON_SURFACE_COLOR_PRIMARY
    return T.WHITE


def _badge_tables() -> dict[str, TokenTable]:
    foreground: dict[tuple[BadgeVariant, BadgeColor], dict[StateCategory, T]] = {}
    background: dict[tuple[BadgeVariant, BadgeColor], dict[StateCategory, T]] = {}
    border: dict[tuple[BadgeVariant, BadgeColor], dict[StateCategory, T]] = {}
    for color in BadgeColor:
        accent = ACCENT_TOKENS[color]
        foreground[(BadgeVariant.OUTLINE, color)] = {StateCategory.DEFAULT: accent}
        foreground[(BadgeVariant.FILLED_SUBTLE, color)] = {StateCategory.DEFAULT: accent}
        foreground[(BadgeVariant.FILLED_STRONG, color)] = {StateCategory.DEFAULT: _strong_foreground(color)}
        background[(BadgeVariant.OUTLINE, color)] = {StateCategory.DEFAULT: T.CLEAR}
        background[(BadgeVariant.FILLED_SUBTLE, color)] = {StateCategory.DEFAULT: SUBTLE_BACKGROUND_TOKENS[color]}
        background[(BadgeVariant.FILLED_STRONG, color)] = {StateCategory.DEFAULT: accent}
        border[(BadgeVariant.OUTLINE, color)] = {StateCategory.DEFAULT: accent}
        border[(BadgeVariant.FILLED_SUBTLE, color)] = {StateCategory.DEFAULT: T.CLEAR}
        border[(BadgeVariant.FILLED_STRONG, color)] = {StateCategory.DEFAULT: T.CLEAR}
    return {
        "foreground": TokenTable("badge.foreground", foreground),
        "background": TokenTable("badge.background", background),
        "border": TokenTable("badge.border", border),
    }


# Rows keyed by (variant, color).
BADGE_TABLES: dict[str, TokenTable] = _badge_tables()


def resolve_badge(
    descriptor: BadgeDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> BadgeResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(BADGE_TABLES, (descriptor.variant, descriptor.color), state, scheme, palette)
    log_resolution("badge", state.value, scheme.value)
    return BadgeResolvedStyle(
        scheme=scheme,
        state=state.value,
        variant=descriptor.variant,
        color=descriptor.color,
        size=descriptor.size,
        text=descriptor.text,
        **BADGE_METRICS[descriptor.size]._asdict(),
        **tokens,
    )


__all__ = [
    "ACCENT_TOKENS",
    "BADGE_METRICS",
    "BADGE_TABLES",
    "BadgeMetrics",
    "SUBTLE_BACKGROUND_TOKENS",
    "resolve_badge",
]
