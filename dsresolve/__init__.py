from .exceptions import PaletteLoadError, StyleResolutionError, TokenTableError, UnknownTokenError
from .schemas.tokens import ColorScheme, TokenName, TokenRef
from .services.palette import TokenPalette, active_palette, default_palette, load_palette
from .services.resolvers import resolve

__version__ = "0.1.0"

__all__ = [
    "ColorScheme",
    "PaletteLoadError",
    "StyleResolutionError",
    "TokenName",
    "TokenPalette",
    "TokenRef",
    "TokenTableError",
    "UnknownTokenError",
    "active_palette",
    "default_palette",
    "load_palette",
    "resolve",
]
