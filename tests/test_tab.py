from __future__ import annotations

import pytest

from dsresolve.schemas.descriptors import TabDescriptor, TabSize, TabState, TabStyle
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.resolvers.tab import TAB_METRICS, resolve_tab


def test_ghost_default(palette) -> None:
    style = resolve_tab(TabDescriptor(), ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.CLEAR
    assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY
    assert style.indicator.name is TokenName.CLEAR
    assert style.divider.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert style.is_selected is False
    assert style.is_interactive is True


def test_selected_tab_shows_indicator(palette) -> None:
    style = resolve_tab(TabDescriptor.from_flags(TabStyle.GHOST, is_selected=True), ColorScheme.DARK, palette)
    assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert style.indicator.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert style.background.name is TokenName.CLEAR
    assert style.is_selected is True


def test_black5_background_follows_state(palette) -> None:
    default = resolve_tab(TabDescriptor(TabStyle.BLACK5), ColorScheme.LIGHT, palette)
    selected = resolve_tab(TabDescriptor(TabStyle.BLACK5, TabState.SELECTED), ColorScheme.LIGHT, palette)
    disabled = resolve_tab(TabDescriptor(TabStyle.BLACK5, TabState.DISABLED), ColorScheme.LIGHT, palette)
    assert default.background.name is TokenName.CONTAINER_BACKGROUND_TRANSPARENT05
    assert selected.background.name is TokenName.CONTAINER_BACKGROUND_TRANSPARENT10
    assert disabled.background.name is TokenName.CONTAINER_BACKGROUND_TRANSPARENT05
    assert default.background_opacity == 1.0
    assert disabled.background_opacity == 0.5


def test_disabled_selected_tab_is_plain_disabled(palette) -> None:
    descriptor = TabDescriptor.from_flags(TabStyle.BLACK5, is_selected=True, is_disabled=True)
    assert descriptor.state is TabState.DISABLED
    style = resolve_tab(descriptor, ColorScheme.LIGHT, palette)
    assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert style.indicator.name is TokenName.CLEAR
    assert style.is_selected is False
    assert style.is_interactive is False


def test_ghost_disabled_is_not_dimmed(palette) -> None:
    style = resolve_tab(TabDescriptor(TabStyle.GHOST, TabState.DISABLED), ColorScheme.LIGHT, palette)
    assert style.background_opacity == 1.0


@pytest.mark.parametrize(
    "size, height, indicator_height",
    [(TabSize.SMALL, 22.0, 2.0), (TabSize.MEDIUM, 36.0, 2.0), (TabSize.LARGE, 44.0, 3.0)],
)
def test_size_metrics(size, height, indicator_height, palette) -> None:
    style = resolve_tab(TabDescriptor(size=size), ColorScheme.LIGHT, palette)
    assert style.height == height
    assert style.indicator_height == indicator_height
    assert style.font_size == TAB_METRICS[size].font_size
