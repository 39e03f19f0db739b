from __future__ import annotations

from dsresolve.schemas.descriptors import AccordionDescriptor, AccordionType
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.resolvers.accordion import resolve_accordion


def test_bordered_accordion(palette) -> None:
    style = resolve_accordion(AccordionDescriptor(), ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.CONTAINER_BACKGROUND_PRIMARY
    assert style.border.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert style.title.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert style.subtitle.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY
    assert style.icon.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY
    assert style.divider.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert style.state == "default"


def test_borderless_accordion_is_clear(palette) -> None:
    style = resolve_accordion(AccordionDescriptor(is_borderless=True), ColorScheme.DARK, palette)
    assert style.background.name is TokenName.CLEAR
    assert style.border.name is TokenName.CLEAR
    assert style.title.value == "#F2F1F0"


def test_chevron_rotation(palette) -> None:
    collapsed = resolve_accordion(AccordionDescriptor(), ColorScheme.LIGHT, palette)
    expanded = resolve_accordion(AccordionDescriptor(is_expanded=True), ColorScheme.LIGHT, palette)
    assert collapsed.chevron_rotation == 0.0
    assert expanded.chevron_rotation == 180.0


def test_type_and_divider_pass_through(palette) -> None:
    descriptor = AccordionDescriptor(type=AccordionType.PRODUCT_SPECS, show_divider=False)
    style = resolve_accordion(descriptor, ColorScheme.LIGHT, palette)
    assert style.type is AccordionType.PRODUCT_SPECS
    assert style.show_divider is False
