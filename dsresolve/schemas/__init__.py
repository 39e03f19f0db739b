from .tokens import ColorScheme, TokenName, TokenRef, TokenValue
from .palette import PaletteDocument
from .descriptors import (
    AccordionDescriptor,
    AccordionType,
    BadgeColor,
    BadgeDescriptor,
    BadgeSize,
    BadgeVariant,
    BodyPlacement,
    ButtonDescriptor,
    ButtonSize,
    ButtonState,
    ButtonVariant,
    CalloutDescriptor,
    CalloutVariant,
    ContentCardDescriptor,
    GalleryDescriptor,
    GalleryTab,
    MiniProductCardDescriptor,
    PillDescriptor,
    PillSize,
    PillState,
    PillStyle,
    Price,
    ProductBadge,
    ProductRating,
    RangePrice,
    SalePrice,
    StandardPrice,
    StartingAtPrice,
    TextFieldState,
    TextFieldStateKind,
    TextInputFieldDescriptor,
    TileDescriptor,
    TileSize,
    TileState,
    TileVariant,
)
from .styles import (
    AccordionResolvedStyle,
    BadgeResolvedStyle,
    ButtonResolvedSize,
    ButtonResolvedStyle,
    CalloutResolvedStyle,
    ContentCardResolvedStyle,
    GalleryResolvedStyle,
    GalleryTabStyle,
    MiniProductCardResolvedStyle,
    PillResolvedStyle,
    ResolvedStyle,
    TextInputFieldResolvedStyle,
    TileResolvedStyle,
)

__all__ = [
    "AccordionDescriptor",
    "AccordionResolvedStyle",
    "AccordionType",
    "BadgeColor",
    "BadgeDescriptor",
    "BadgeResolvedStyle",
    "BadgeSize",
    "BadgeVariant",
    "BodyPlacement",
    "ButtonDescriptor",
    "ButtonResolvedSize",
    "ButtonResolvedStyle",
    "ButtonSize",
    "ButtonState",
    "ButtonVariant",
    "CalloutDescriptor",
    "CalloutResolvedStyle",
    "CalloutVariant",
    "ColorScheme",
    "ContentCardDescriptor",
    "ContentCardResolvedStyle",
    "GalleryDescriptor",
    "GalleryResolvedStyle",
    "GalleryTab",
    "GalleryTabStyle",
    "MiniProductCardDescriptor",
    "MiniProductCardResolvedStyle",
    "PaletteDocument",
    "PillDescriptor",
    "PillResolvedStyle",
    "PillSize",
    "PillState",
    "PillStyle",
    "Price",
    "ProductBadge",
    "ProductRating",
    "RangePrice",
    "ResolvedStyle",
    "SalePrice",
    "StandardPrice",
    "StartingAtPrice",
    "TextFieldState",
    "TextFieldStateKind",
    "TextInputFieldDescriptor",
    "TextInputFieldResolvedStyle",
    "TileDescriptor",
    "TileResolvedStyle",
    "TileSize",
    "TileState",
    "TileVariant",
    "TokenName",
    "TokenRef",
    "TokenValue",
]
