from __future__ import annotations

import itertools

from dsresolve.schemas.descriptors import TileDescriptor, TileSize, TileState, TileVariant
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.resolvers.tile import resolve_tile


def test_filled_selected_inverts_colors(palette) -> None:
    style = resolve_tile(TileDescriptor(TileVariant.FILLED, TileState.SELECTED), ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_INVERSE
    assert style.border.name is TokenName.CLEAR


def test_filled_default(palette) -> None:
    style = resolve_tile(TileDescriptor(TileVariant.FILLED), ColorScheme.LIGHT, palette)
    assert style.background.name is TokenName.CONTAINER_BACKGROUND_TRANSPARENT10
    assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_SECONDARY


def test_outlined_states(palette) -> None:
    default = resolve_tile(TileDescriptor(TileVariant.OUTLINED), ColorScheme.LIGHT, palette)
    selected = resolve_tile(TileDescriptor(TileVariant.OUTLINED, TileState.SELECTED), ColorScheme.LIGHT, palette)
    assert default.background.name is TokenName.WHITE
    assert default.border.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
    assert selected.background.name is TokenName.CONTAINER_BACKGROUND_TRANSPARENT05
    assert selected.border.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY
    assert selected.text.name is TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY


def test_ghost_is_clear_until_disabled(palette) -> None:
    for state in (TileState.DEFAULT, TileState.SELECTED):
        style = resolve_tile(TileDescriptor(TileVariant.GHOST, state), ColorScheme.LIGHT, palette)
        assert style.background.name is TokenName.CLEAR
        assert style.border.name is TokenName.CLEAR


def test_disabled_is_shared_by_every_variant(palette) -> None:
    styles = [
        resolve_tile(TileDescriptor(variant, TileState.DISABLED), ColorScheme.LIGHT, palette)
        for variant in TileVariant
    ]
    for style in styles:
        assert style.background.name is TokenName.CONTAINER_BACKGROUND_TRANSPARENT05
        assert style.border.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY
        assert style.text.name is TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY


def test_filled_selected_and_disabled_matches_disabled(palette) -> None:
    combined = TileDescriptor.from_flags(TileVariant.FILLED, is_selected=True, is_disabled=True)
    disabled = TileDescriptor.from_flags(TileVariant.FILLED, is_disabled=True)
    assert combined == disabled
    assert resolve_tile(combined, ColorScheme.LIGHT, palette) == resolve_tile(disabled, ColorScheme.LIGHT, palette)


def test_twelve_variant_selection_scheme_combinations(palette) -> None:
    results = {}
    for variant, selected, scheme in itertools.product(TileVariant, (False, True), ColorScheme):
        descriptor = TileDescriptor.from_flags(variant, is_selected=selected)
        results[(variant, selected, scheme)] = resolve_tile(descriptor, scheme, palette)
    assert len(results) == 12

    # Selection changes at least one token for every variant, ghost included (text only).
    styles = list(results.values())
    assert len(set(styles)) == 12
    for variant, scheme in itertools.product(TileVariant, ColorScheme):
        default = results[(variant, False, scheme)]
        selected = results[(variant, True, scheme)]
        assert default.token_names() != selected.token_names()


def test_tile_sizes(palette) -> None:
    regular = resolve_tile(TileDescriptor(TileVariant.OUTLINED), ColorScheme.LIGHT, palette)
    small = resolve_tile(TileDescriptor(TileVariant.OUTLINED, size=TileSize.SMALL), ColorScheme.LIGHT, palette)
    assert regular.height == 44.0
    assert small.height == 28.0
    assert small.image_size == 28.0
    assert small.content_spacing == 8.0
