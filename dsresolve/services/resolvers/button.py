from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import ButtonDescriptor, ButtonSize, ButtonState, ButtonVariant
from ...schemas.styles import ButtonResolvedSize, ButtonResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens


IOS_MIN_TAP_TARGET = 44.0
ANDROID_MIN_TAP_TARGET = 48.0

_HEIGHTS = {ButtonSize.SMALL: 28.0, ButtonSize.MEDIUM: 36.0, ButtonSize.LARGE: 44.0}
_ICON_SIZES = {ButtonSize.SMALL: 14.0, ButtonSize.MEDIUM: 14.0, ButtonSize.LARGE: 15.0}
_HORIZONTAL_PADDING = 16.0
_SPINNER_SIZE = 16.0


def _inactive_when_blocked(default: T, inactive: T) -> dict[StateCategory, T]:
    # Loading buttons are not interactive and share the inactive tokens.
    return {
        StateCategory.DEFAULT: default,
        StateCategory.LOADING: inactive,
        StateCategory.DISABLED: inactive,
    }


BUTTON_TABLES: dict[str, TokenTable] = {
    "background": TokenTable(
        "button.background",
        {
            ButtonVariant.ORANGE_FILLED: _inactive_when_blocked(
                T.BUTTON_BACKGROUND_BRAND_FILLED_DEFAULT, T.BUTTON_BACKGROUND_BRAND_FILLED_INACTIVE
            ),
            ButtonVariant.GRADIENT_FILLED: _inactive_when_blocked(
                T.BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_DEFAULT,
                T.BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_INACTIVE,
            ),
            ButtonVariant.OUTLINED: {StateCategory.DEFAULT: T.CLEAR},
            ButtonVariant.WHITE_FILLED: _inactive_when_blocked(
                T.BUTTON_BACKGROUND_WHITE_FILLED_DEFAULT, T.BUTTON_BACKGROUND_WHITE_FILLED_INACTIVE
            ),
            ButtonVariant.BLACK5: _inactive_when_blocked(
                T.BUTTON_BACKGROUND_TRANSPARENT05_DEFAULT, T.BUTTON_BACKGROUND_TRANSPARENT05_INACTIVE
            ),
            ButtonVariant.BLACK10: _inactive_when_blocked(
                T.BUTTON_BACKGROUND_TRANSPARENT10_DEFAULT, T.BUTTON_BACKGROUND_TRANSPARENT10_INACTIVE
            ),
            ButtonVariant.GHOST: _inactive_when_blocked(
                T.BUTTON_BACKGROUND_GHOST_FILLED_DEFAULT, T.BUTTON_BACKGROUND_GHOST_FILLED_INACTIVE
            ),
        },
    ),
    "foreground": TokenTable(
        "button.foreground",
        {
            ButtonVariant.ORANGE_FILLED: _inactive_when_blocked(
                T.BUTTON_TEXT_ORANGE_FILLED_DEFAULT, T.BUTTON_TEXT_ORANGE_FILLED_INACTIVE
            ),
            ButtonVariant.GRADIENT_FILLED: _inactive_when_blocked(
                T.BUTTON_TEXT_GRADIENT_FILLED_DEFAULT, T.BUTTON_TEXT_GRADIENT_FILLED_INACTIVE
            ),
            ButtonVariant.OUTLINED: _inactive_when_blocked(
                T.BUTTON_TEXT_ORANGE_OUTLINE_DEFAULT, T.BUTTON_TEXT_ORANGE_OUTLINE_INACTIVE
            ),
            ButtonVariant.WHITE_FILLED: _inactive_when_blocked(
                T.BUTTON_TEXT_WHITE_FILLED_DEFAULT, T.BUTTON_TEXT_WHITE_FILLED_INACTIVE
            ),
            ButtonVariant.BLACK5: _inactive_when_blocked(
                T.BUTTON_TEXT_TRANSPARENT05_FILLED_DEFAULT, T.BUTTON_TEXT_TRANSPARENT05_FILLED_INACTIVE
            ),
            ButtonVariant.BLACK10: _inactive_when_blocked(
                T.BUTTON_TEXT_TRANSPARENT10_FILLED_DEFAULT, T.BUTTON_TEXT_TRANSPARENT10_FILLED_INACTIVE
            ),
            ButtonVariant.GHOST: _inactive_when_blocked(
                T.BUTTON_TEXT_GHOST_FILLED_DEFAULT, T.BUTTON_TEXT_GHOST_FILLED_INACTIVE
            ),
        },
    ),
    "border": TokenTable(
        "button.border",
        {
            ButtonVariant.OUTLINED: _inactive_when_blocked(
                T.BUTTON_BORDER_ORANGE_OUTLINE_DEFAULT, T.BUTTON_BORDER_ORANGE_OUTLINE_INACTIVE
            ),
            ANY: {StateCategory.DEFAULT: T.CLEAR},
        },
    ),
    "pressed_background": TokenTable(
        "button.pressed_background",
        {
            ButtonVariant.GHOST: {StateCategory.DEFAULT: T.BUTTON_BACKGROUND_GHOST_FILLED_PRESSED},
            ButtonVariant.BLACK5: {StateCategory.DEFAULT: T.BUTTON_BACKGROUND_TRANSPARENT05_PRESSED},
            ButtonVariant.BLACK10: {StateCategory.DEFAULT: T.BUTTON_BACKGROUND_TRANSPARENT10_PRESSED},
            ANY: {StateCategory.DEFAULT: T.CLEAR},
        },
    ),
}


def resolve_button_size(size: ButtonSize) -> ButtonResolvedSize:
    height = _HEIGHTS[size]
    return ButtonResolvedSize(
        size=size,
        height=height,
        horizontal_padding=_HORIZONTAL_PADDING,
        icon_size=_ICON_SIZES[size],
        spinner_size=_SPINNER_SIZE,
        is_full_width=size is ButtonSize.LARGE,
        meets_ios_tap_target=height >= IOS_MIN_TAP_TARGET,
        meets_android_tap_target=height >= ANDROID_MIN_TAP_TARGET,
    )


def resolve_button(
    descriptor: ButtonDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> ButtonResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    category = descriptor.state.category
    tokens = resolve_tokens(BUTTON_TABLES, descriptor.variant, category, scheme, palette)
    is_default = descriptor.state is ButtonState.DEFAULT
    log_resolution("button", descriptor.state.value, scheme.value)
    return ButtonResolvedStyle(
        scheme=scheme,
        state=descriptor.state.value,
        variant=descriptor.variant,
        uses_gradient=descriptor.variant is ButtonVariant.GRADIENT_FILLED and is_default,
        shows_spinner=descriptor.state is ButtonState.LOADING,
        is_interactive=is_default,
        dimensions=resolve_button_size(descriptor.size),
        **tokens,
    )


__all__ = [
    "ANDROID_MIN_TAP_TARGET",
    "BUTTON_TABLES",
    "IOS_MIN_TAP_TARGET",
    "resolve_button",
    "resolve_button_size",
]
