"""Product listing filter panel.

The panel's own colors never change with state. Its category, primary and
secondary filter rows are filled pills whose selected state comes from the
panel data, so each row is resolved through the pill tables.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ...log import log_resolution
from ...schemas.descriptors import FilterPanelDescriptor, PillDescriptor, PillSize, PillStyle
from ...schemas.styles import FilterPanelResolvedStyle, PillResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens
from .pill import resolve_pill

CATEGORY_PILL_SIZE = PillSize.XL
PRIMARY_FILTER_SIZE = PillSize.LG
SECONDARY_FILTER_SIZE = PillSize.MD

FILTER_PANEL_TABLES: dict[str, TokenTable] = {
    "category_title_color": TokenTable.constant("filter_panel.category_title", T.TEXT_ON_SURFACE_COLOR_PRIMARY),
    "results_text_color": TokenTable.constant("filter_panel.results_text", T.TEXT_ON_SURFACE_COLOR_SECONDARY),
    "background_color": TokenTable.constant("filter_panel.background", T.CONTAINER_BACKGROUND_PRIMARY),
}


def results_text(count: int) -> str:
    return f"{count} Results"


def _pill_row(
    selections: Iterable[bool],
    size: PillSize,
    scheme: ColorScheme,
    palette: TokenPalette,
) -> tuple[PillResolvedStyle, ...]:
    return tuple(
        resolve_pill(PillDescriptor.from_flags(PillStyle.FILLED, is_selected=selected, size=size), scheme, palette)
        for selected in selections
    )


def resolve_filter_panel(
    descriptor: FilterPanelDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> FilterPanelResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    state = StateCategory.DEFAULT
    tokens = resolve_tokens(FILTER_PANEL_TABLES, ANY, state, scheme, palette)

    selected_id = descriptor.selected_category_id
    category_pills = _pill_row(
        (pill.id == selected_id for pill in descriptor.category_pills), CATEGORY_PILL_SIZE, scheme, palette
    )
    primary = _pill_row(
        (pill.is_selected for pill in descriptor.primary_filters), PRIMARY_FILTER_SIZE, scheme, palette
    )
    secondary = _pill_row(
        (pill.is_selected for pill in descriptor.secondary_filters), SECONDARY_FILTER_SIZE, scheme, palette
    )

    log_resolution("filter_panel", state.value, scheme.value)
    return FilterPanelResolvedStyle(
        scheme=scheme,
        state=state.value,
        category_title=descriptor.category_title,
        results_count=descriptor.results_count,
        results_text=results_text(descriptor.results_count),
        category_pill_count=len(descriptor.category_pills),
        primary_filter_count=len(descriptor.primary_filters),
        secondary_filter_count=len(descriptor.secondary_filters),
        selected_category_id=selected_id,
        category_pills=category_pills,
        primary_filter_pills=primary,
        secondary_filter_pills=secondary,
        **tokens,
    )


__all__ = [
    "CATEGORY_PILL_SIZE",
    "FILTER_PANEL_TABLES",
    "PRIMARY_FILTER_SIZE",
    "SECONDARY_FILTER_SIZE",
    "resolve_filter_panel",
    "results_text",
]
