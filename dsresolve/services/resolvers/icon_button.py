from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import ButtonState, ButtonVariant, IconButtonDescriptor, IconButtonSize, IconButtonStyle
from ...schemas.styles import IconButtonResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, TokenTable, resolve_tokens
from .button import BUTTON_TABLES

TOUCH_TARGET_SIZE = 44.0

_BUTTON_SIZES = {IconButtonSize.SMALL: 28.0, IconButtonSize.MEDIUM: 36.0, IconButtonSize.LARGE: 44.0}
_ICON_SIZE = 16.0
_SPINNER_SIZE = 16.0


def _icon_table(table: TokenTable) -> TokenTable:
    # Icon buttons share the button tokens; there is no gradient icon button.
    rows = {}
    for key, row in table.rows.items():
        if key == ANY:
            rows[ANY] = row
        elif key is not ButtonVariant.GRADIENT_FILLED:
            rows[IconButtonStyle(key.value)] = row
    return TokenTable(table.name.replace("button.", "icon_button.", 1), rows)


ICON_BUTTON_TABLES: dict[str, TokenTable] = {
    **{field_name: _icon_table(table) for field_name, table in BUTTON_TABLES.items()},
    "corner_radius": TokenTable.constant("icon_button.corner_radius", T.BORDER_RADIUS_FULL),
}


def resolve_icon_button(
    descriptor: IconButtonDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> IconButtonResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    tokens = resolve_tokens(ICON_BUTTON_TABLES, descriptor.style, descriptor.state.category, scheme, palette)
    log_resolution("icon_button", descriptor.state.value, scheme.value)
    return IconButtonResolvedStyle(
        scheme=scheme,
        state=descriptor.state.value,
        style=descriptor.style,
        size=descriptor.size,
        button_size=_BUTTON_SIZES[descriptor.size],
        touch_target_size=TOUCH_TARGET_SIZE,
        icon_size=_ICON_SIZE,
        spinner_size=_SPINNER_SIZE,
        shows_spinner=descriptor.state is ButtonState.LOADING,
        is_interactive=descriptor.state is ButtonState.DEFAULT,
        **tokens,
    )


__all__ = ["ICON_BUTTON_TABLES", "TOUCH_TARGET_SIZE", "resolve_icon_button"]
