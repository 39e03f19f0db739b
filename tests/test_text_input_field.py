from __future__ import annotations

import pytest

from dsresolve.schemas.descriptors import TextFieldState, TextInputFieldDescriptor
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.resolvers.text_input_field import resolve_text_input_field


def _resolve(palette, state=None, **kwargs):
    descriptor = TextInputFieldDescriptor(state=state or TextFieldState.default(), **kwargs)
    return resolve_text_input_field(descriptor, ColorScheme.LIGHT, palette)


def test_border_per_state(palette) -> None:
    expected = {
        TextFieldState.default(): TokenName.INPUT_BORDER_DEFAULT,
        TextFieldState.focused(): TokenName.INPUT_BORDER_FOCUS,
        TextFieldState.error("Bad"): TokenName.INPUT_BORDER_ERROR,
        TextFieldState.success(): TokenName.INPUT_BORDER_SUCCESS,
        TextFieldState.disabled(): TokenName.INPUT_BORDER_INACTIVE,
    }
    for state, token in expected.items():
        assert _resolve(palette, state).border.name is token


def test_label_colors(palette) -> None:
    assert _resolve(palette, TextFieldState.error()).label.name is TokenName.TEXT_ON_SURFACE_COLOR_ERROR
    assert _resolve(palette, TextFieldState.disabled()).label.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert _resolve(palette, TextFieldState.success()).label.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY


def test_disabled_text_and_adornment(palette) -> None:
    style = _resolve(palette, TextFieldState.disabled())
    assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert style.adornment.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert style.is_editable is False

    focused = _resolve(palette, TextFieldState.focused())
    assert focused.text.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert focused.adornment.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY


def test_constant_fields(palette) -> None:
    style = _resolve(palette)
    assert style.background.name is TokenName.BACKGROUND_SURFACE_COLOR_SECONDARY
    assert style.placeholder.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY
    assert style.success_text.name is TokenName.TEXT_ON_SURFACE_COLOR_SUCCESS


def test_required_marker(palette) -> None:
    assert _resolve(palette, label="Email", is_required=True).required_marker == "*"
    assert _resolve(palette, label="Email").required_marker == "(optional)"
    assert _resolve(palette).required_marker is None


def test_error_message_replaces_helper_text(palette) -> None:
    style = _resolve(palette, TextFieldState.error("Enter a valid email"), helper_text="We never share it")
    assert style.helper_display_text == "Enter a valid email"
    assert style.helper_display_color.name is TokenName.TEXT_ON_SURFACE_COLOR_ERROR
    assert style.state == "error(Enter a valid email)"


def test_error_without_message_keeps_helper_text(palette) -> None:
    style = _resolve(palette, TextFieldState.error(), helper_text="We never share it")
    assert style.helper_display_text == "We never share it"
    assert style.helper_display_color.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY


def test_only_error_carries_message() -> None:
    with pytest.raises(ValueError):
        TextFieldState("focused", "nope")
