from __future__ import annotations

import pydantic
import pytest

from dsresolve.schemas.descriptors import ButtonDescriptor, ButtonSize, ButtonState, ButtonVariant
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.resolvers.button import resolve_button, resolve_button_size


def _names(style) -> dict:
    return {key: value.value for key, value in style.token_names().items()}


def test_orange_filled_default(palette) -> None:
    style = resolve_button(ButtonDescriptor(ButtonVariant.ORANGE_FILLED), ColorScheme.LIGHT, palette)
    assert _names(style) == {
        "background": "buttonBackgroundBrandFilledDefault",
        "foreground": "buttonTextOrangeFilledDefault",
        "border": "clear",
        "pressed_background": "clear",
    }
    assert style.background.value == "#F96302"
    assert style.is_interactive is True
    assert style.shows_spinner is False


def test_orange_filled_disabled(palette) -> None:
    descriptor = ButtonDescriptor.from_flags(ButtonVariant.ORANGE_FILLED, is_disabled=True)
    style = resolve_button(descriptor, ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.BUTTON_BACKGROUND_BRAND_FILLED_INACTIVE
    assert style.foreground.name is TokenName.BUTTON_TEXT_ORANGE_FILLED_INACTIVE
    assert style.is_interactive is False


def test_outlined_default_uses_clear_background_and_outline_border(palette) -> None:
    style = resolve_button(ButtonDescriptor(ButtonVariant.OUTLINED), ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.CLEAR
    assert style.border.name is TokenName.BUTTON_BORDER_ORANGE_OUTLINE_DEFAULT
    assert style.foreground.name is TokenName.BUTTON_TEXT_ORANGE_OUTLINE_DEFAULT


def test_outlined_disabled_border(palette) -> None:
    descriptor = ButtonDescriptor(ButtonVariant.OUTLINED, ButtonState.DISABLED)
    style = resolve_button(descriptor, ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.CLEAR
    assert style.border.name is TokenName.BUTTON_BORDER_ORANGE_OUTLINE_INACTIVE


def test_outlined_same_names_across_schemes(palette) -> None:
    descriptor = ButtonDescriptor(ButtonVariant.OUTLINED)
    light = resolve_button(descriptor, ColorScheme.LIGHT, palette)
    dark = resolve_button(descriptor, ColorScheme.DARK, palette)
    assert light.token_names() == dark.token_names()
    assert light.foreground.value != dark.foreground.value


def test_pressed_background_only_for_translucent_variants(palette) -> None:
    expected = {
        ButtonVariant.GHOST: TokenName.BUTTON_BACKGROUND_GHOST_FILLED_PRESSED,
        ButtonVariant.BLACK5: TokenName.BUTTON_BACKGROUND_TRANSPARENT05_PRESSED,
        ButtonVariant.BLACK10: TokenName.BUTTON_BACKGROUND_TRANSPARENT10_PRESSED,
    }
    for variant in ButtonVariant:
        style = resolve_button(ButtonDescriptor(variant), ColorScheme.LIGHT, palette)
        assert style.pressed_background.name is expected.get(variant, TokenName.CLEAR)


def test_loading_uses_inactive_tokens_and_spinner(palette) -> None:
    descriptor = ButtonDescriptor.from_flags(ButtonVariant.BLACK10, is_loading=True)
    style = resolve_button(descriptor, ColorScheme.LIGHT, palette)
    assert style.state == "loading"
    assert style.background.name is TokenName.BUTTON_BACKGROUND_TRANSPARENT10_INACTIVE
    assert style.foreground.name is TokenName.BUTTON_TEXT_TRANSPARENT10_FILLED_INACTIVE
    assert style.shows_spinner is True


def test_disabled_wins_over_loading(palette) -> None:
    descriptor = ButtonDescriptor.from_flags(ButtonVariant.GHOST, is_disabled=True, is_loading=True)
    assert descriptor.state is ButtonState.DISABLED
    style = resolve_button(descriptor, ColorScheme.LIGHT, palette)
    assert style.shows_spinner is False


def test_gradient_only_when_enabled(palette) -> None:
    enabled = resolve_button(ButtonDescriptor(ButtonVariant.GRADIENT_FILLED), ColorScheme.LIGHT, palette)
    disabled = resolve_button(
        ButtonDescriptor(ButtonVariant.GRADIENT_FILLED, ButtonState.DISABLED), ColorScheme.LIGHT, palette
    )
    other = resolve_button(ButtonDescriptor(ButtonVariant.ORANGE_FILLED), ColorScheme.LIGHT, palette)
    assert enabled.uses_gradient is True
    assert disabled.uses_gradient is False
    assert other.uses_gradient is False


def test_button_sizes() -> None:
    small = resolve_button_size(ButtonSize.SMALL)
    medium = resolve_button_size(ButtonSize.MEDIUM)
    large = resolve_button_size(ButtonSize.LARGE)
    assert (small.height, medium.height, large.height) == (28.0, 36.0, 44.0)
    assert (small.icon_size, medium.icon_size, large.icon_size) == (14.0, 14.0, 15.0)
    assert large.is_full_width is True
    assert medium.is_full_width is False
    assert small.horizontal_padding == 16.0
    assert small.spinner_size == 16.0


def test_tap_targets() -> None:
    large = resolve_button_size(ButtonSize.LARGE)
    medium = resolve_button_size(ButtonSize.MEDIUM)
    assert large.meets_ios_tap_target is True
    assert large.meets_android_tap_target is False
    assert medium.meets_ios_tap_target is False


def test_resolved_style_is_frozen(palette) -> None:
    style = resolve_button(ButtonDescriptor(ButtonVariant.GHOST), ColorScheme.LIGHT, palette)
    with pytest.raises(pydantic.ValidationError):
        style.uses_gradient = True  # type: ignore[misc]
