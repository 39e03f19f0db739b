from __future__ import annotations

from typing import Optional

from ...log import log_resolution
from ...schemas.descriptors import TileDescriptor, TileSize, TileVariant
from ...schemas.styles import TileResolvedStyle
from ...schemas.tokens import ColorScheme
from ...schemas.tokens import TokenName as T
from ..palette import TokenPalette, active_palette
from ..precedence import ANY, StateCategory, TokenTable, resolve_tokens

TILE_HEIGHTS = {TileSize.REGULAR: 44.0, TileSize.SMALL: 28.0}
TILE_IMAGE_SIZE = 28.0
TILE_CONTENT_SPACING = 8.0

TILE_TABLES: dict[str, TokenTable] = {
    "background": TokenTable(
        "tile.background",
        {
            TileVariant.OUTLINED: {
                StateCategory.DISABLED: T.CONTAINER_BACKGROUND_TRANSPARENT05,
                StateCategory.SELECTED: T.CONTAINER_BACKGROUND_TRANSPARENT05,
                StateCategory.DEFAULT: T.WHITE,
            },
            TileVariant.FILLED: {
                StateCategory.DISABLED: T.CONTAINER_BACKGROUND_TRANSPARENT05,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.CONTAINER_BACKGROUND_TRANSPARENT10,
            },
            TileVariant.GHOST: {
                StateCategory.DISABLED: T.CONTAINER_BACKGROUND_TRANSPARENT05,
                StateCategory.DEFAULT: T.CLEAR,
            },
        },
    ),
    "border": TokenTable(
        "tile.border",
        {
            TileVariant.OUTLINED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
            },
            TileVariant.FILLED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.DEFAULT: T.CLEAR,
            },
            TileVariant.GHOST: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.DEFAULT: T.CLEAR,
            },
        },
    ),
    # Filled selected tiles invert: the background takes the primary text color
    # and the label takes the inverse text color.
    "text": TokenTable(
        "tile.text",
        {
            TileVariant.FILLED: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_INVERSE,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_SECONDARY,
            },
            ANY: {
                StateCategory.DISABLED: T.TEXT_ON_SURFACE_COLOR_TERTIARY,
                StateCategory.SELECTED: T.TEXT_ON_SURFACE_COLOR_PRIMARY,
                StateCategory.DEFAULT: T.TEXT_ON_SURFACE_COLOR_SECONDARY,
            },
        },
    ),
}


def resolve_tile(
    descriptor: TileDescriptor,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> TileResolvedStyle:
    palette = palette or active_palette()
    scheme = ColorScheme(scheme)
    tokens = resolve_tokens(TILE_TABLES, descriptor.variant, descriptor.state.category, scheme, palette)
    log_resolution("tile", descriptor.state.value, scheme.value)
    return TileResolvedStyle(
        scheme=scheme,
        state=descriptor.state.value,
        variant=descriptor.variant,
        size=descriptor.size,
        height=TILE_HEIGHTS[descriptor.size],
        image_size=TILE_IMAGE_SIZE,
        content_spacing=TILE_CONTENT_SPACING,
        **tokens,
    )


__all__ = ["TILE_CONTENT_SPACING", "TILE_HEIGHTS", "TILE_IMAGE_SIZE", "TILE_TABLES", "resolve_tile"]
