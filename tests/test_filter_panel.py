from __future__ import annotations

import pytest

from dsresolve.schemas.descriptors import CategoryPill, FilterPanelDescriptor, FilterPill, PillSize, PillStyle
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.resolvers.filter_panel import resolve_filter_panel

CATEGORIES = (CategoryPill("drills", "Drills"), CategoryPill("saws", "Saws"))


def _panel(**overrides) -> FilterPanelDescriptor:
    values = {
        "category_title": "Power Tools",
        "category_pills": CATEGORIES,
        "results_count": 42,
        "primary_filters": (FilterPill("sort", "Sort", has_dropdown=True), FilterPill("brand", "Brand", True)),
        "secondary_filters": (FilterPill("cordless", "Cordless"),),
    }
    values.update(overrides)
    return FilterPanelDescriptor(**values)


def test_panel_colors_and_data(palette) -> None:
    style = resolve_filter_panel(_panel(), ColorScheme.LIGHT, palette)
    assert style.category_title_color.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert style.results_text_color.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY
    assert style.background_color.name is TokenName.CONTAINER_BACKGROUND_PRIMARY
    assert style.category_title == "Power Tools"
    assert style.results_text == "42 Results"
    assert style.category_pill_count == 2
    assert style.primary_filter_count == 2
    assert style.secondary_filter_count == 1
    assert style.selected_category_id is None


def test_selected_category_pill(palette) -> None:
    style = resolve_filter_panel(_panel(selected_category_id="saws"), ColorScheme.LIGHT, palette)
    assert [pill.state for pill in style.category_pills] == ["default", "selected"]
    assert style.category_pills[1].background.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert {pill.size for pill in style.category_pills} == {PillSize.XL}
    assert {pill.style for pill in style.category_pills} == {PillStyle.FILLED}


def test_filter_rows_follow_pill_selection(palette) -> None:
    style = resolve_filter_panel(_panel(), ColorScheme.DARK, palette)
    assert [pill.state for pill in style.primary_filter_pills] == ["default", "selected"]
    assert [pill.size for pill in style.primary_filter_pills] == [PillSize.LG, PillSize.LG]
    assert [pill.size for pill in style.secondary_filter_pills] == [PillSize.MD]
    assert style.primary_filter_pills[1].foreground.name is TokenName.WHITE


def test_empty_panel(palette) -> None:
    style = resolve_filter_panel(FilterPanelDescriptor(category_title="Paint"), ColorScheme.LIGHT, palette)
    assert style.category_pills == ()
    assert style.results_text == "0 Results"


def test_unknown_selected_category() -> None:
    with pytest.raises(ValueError, match="not one of the category pills"):
        _panel(selected_category_id="hammers")


def test_duplicate_category_ids() -> None:
    with pytest.raises(ValueError, match="unique"):
        _panel(category_pills=(CategoryPill("drills", "Drills"), CategoryPill("drills", "More drills")))


def test_negative_results_count() -> None:
    with pytest.raises(ValueError):
        _panel(results_count=-1)


def test_lists_are_stored_as_tuples() -> None:
    descriptor = _panel(category_pills=list(CATEGORIES))
    assert descriptor.category_pills == CATEGORIES
    assert hash(descriptor) == hash(_panel())
