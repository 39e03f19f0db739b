from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import TextFieldStateKind, TextInputFieldDescriptor
from ...schemas.styles import TextInputFieldResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens

REQUIRED_MARKER = "*"
OPTIONAL_MARKER = "(optional)"

TEXT_INPUT_FIELD_TABLES: dict[str, TokenTable] = {
    "border": TokenTable(
        "text_input_field.border",
        {
            ANY: {
                StateCategory.DISABLED: T.INPUT_BORDER_INACTIVE,
                StateCategory.ERROR: T.INPUT_BORDER_ERROR,
                StateCategory.SUCCESS: T.INPUT_BORDER_SUCCESS,
                StateCategory.FOCUSED: T.INPUT_BORDER_FOCUS,
                StateCategory.DEFAULT: T.INPUT_BORDER_DEFAULT,
            },
        },
    ),
    "text": TokenTable(
        "text_input_field.text",
        {
            ANY: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
            },
        },
    ),
    "label": TokenTable(
        "text_input_field.label",
        {
            ANY: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.ERROR: T.TEXT_ON_SURFACE_COLOR_ERROR,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
            },
        },
    ),
    "adornment": TokenTable(
        "text_input_field.adornment",
        {
            ANY: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_SECONDARY,
            },
        },
    ),
    "background": TokenTable.constant("text_input_field.background", T.BACKGROUND_SURFACE_COLOR_SECONDARY),
    "placeholder": TokenTable.constant("text_input_field.placeholder", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "optional_label": TokenTable.constant("text_input_field.optional_label", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "helper_text": TokenTable.constant("text_input_field.helper_text", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "error_text": TokenTable.constant("text_input_field.error_text", T.TEXT_ON_SURFACE_COLOR_ERROR),
    "success_text": TokenTable.constant("text_input_field.success_text", T.TEXT_ON_SURFACE_COLOR_SUCCESS),
}


def required_marker(label: Optional[str], is_required: bool) -> Optional[str]:
    if not label:
        return None
    return REQUIRED_MARKER if is_required else OPTIONAL_MARKER


def resolve_text_input_field(
    descriptor: TextInputFieldDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> TextInputFieldResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = descriptor.state
    tokens = resolve_tokens(TEXT_INPUT_FIELD_TABLES, ANY, state.category, scheme, palette)

    if state.kind is TextFieldStateKind.ERROR and state.message:
        helper_display_text: Optional[str] = state.message
        helper_display_color = tokens["error_text"]
    else:
        helper_display_text = descriptor.helper_text
        helper_display_color = tokens["helper_text"]

    log_resolution("text_input_field", state.kind.value, scheme.value)
    return TextInputFieldResolvedStyle(
        scheme=scheme,
        state=state.label,
        required_marker=required_marker(descriptor.label, descriptor.is_required),
        helper_display_text=helper_display_text,
        helper_display_color=helper_display_color,
        is_editable=state.kind is not TextFieldStateKind.DISABLED,
        **tokens,
    )


__all__ = [
    "OPTIONAL_MARKER",
    "REQUIRED_MARKER",
    "TEXT_INPUT_FIELD_TABLES",
    "required_marker",
    "resolve_text_input_field",
]
