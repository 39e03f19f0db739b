from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ..services.precedence import CategorizedState, StateCategory, collapse_flags


# Button

class ButtonVariant(str, Enum):
    ORANGE_FILLED = "orangeFilled"
    GRADIENT_FILLED = "gradientFilled"
    OUTLINED = "outlined"
    WHITE_FILLED = "whiteFilled"
    BLACK5 = "black5"
    BLACK10 = "black10"
    GHOST = "ghost"


class ButtonSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ButtonState(CategorizedState, str, Enum):
    DEFAULT = "default"
    LOADING = "loading"
    DISABLED = "disabled"


@dataclass(frozen=True)
class ButtonDescriptor:
    variant: ButtonVariant
    state: ButtonState = ButtonState.DEFAULT
    size: ButtonSize = ButtonSize.MEDIUM

    @classmethod
    def from_flags(
        cls,
        variant: ButtonVariant,
        *,
        is_disabled: bool = False,
        is_loading: bool = False,
        size: ButtonSize = ButtonSize.MEDIUM,
    ) -> "ButtonDescriptor":
        category = collapse_flags(disabled=is_disabled, loading=is_loading)
        return cls(variant=variant, state=ButtonState(category.value), size=size)


# Icon button

class IconButtonStyle(str, Enum):
    ORANGE_FILLED = "orangeFilled"
    OUTLINED = "outlined"
    WHITE_FILLED = "whiteFilled"
    BLACK5 = "black5"
    BLACK10 = "black10"
    GHOST = "ghost"


class IconButtonSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class IconButtonDescriptor:
    style: IconButtonStyle = IconButtonStyle.ORANGE_FILLED
    state: ButtonState = ButtonState.DEFAULT
    size: IconButtonSize = IconButtonSize.MEDIUM

    @classmethod
    def from_flags(
        cls,
        style: IconButtonStyle,
        *,
        is_disabled: bool = False,
        is_loading: bool = False,
        size: IconButtonSize = IconButtonSize.MEDIUM,
    ) -> "IconButtonDescriptor":
        category = collapse_flags(disabled=is_disabled, loading=is_loading)
        return cls(style=style, state=ButtonState(category.value), size=size)


# Pill

class PillStyle(str, Enum):
    OUTLINED = "outlined"
    FILLED = "filled"


class PillSize(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class PillState(CategorizedState, str, Enum):
    DEFAULT = "default"
    SELECTED = "selected"
    DISABLED = "disabled"


@dataclass(frozen=True)
class PillDescriptor:
    style: PillStyle
    state: PillState = PillState.DEFAULT
    size: PillSize = PillSize.LG
    # Co-occurs with any state; only changes the outlined background.
    has_background: bool = True

    @classmethod
    def from_flags(
        cls,
        style: PillStyle,
        *,
        is_selected: bool = False,
        is_disabled: bool = False,
        has_background: bool = True,
        size: PillSize = PillSize.LG,
    ) -> "PillDescriptor":
        category = collapse_flags(disabled=is_disabled, selected=is_selected)
        return cls(style=style, state=PillState(category.value), size=size, has_background=has_background)


# Tile

class TileVariant(str, Enum):
    OUTLINED = "outlined"
    FILLED = "filled"
    GHOST = "ghost"


class TileSize(str, Enum):
    REGULAR = "regular"
    SMALL = "small"


class TileState(CategorizedState, str, Enum):
    DEFAULT = "default"
    SELECTED = "selected"
    DISABLED = "disabled"


@dataclass(frozen=True)
class TileDescriptor:
    variant: TileVariant
    state: TileState = TileState.DEFAULT
    size: TileSize = TileSize.REGULAR

    @classmethod
    def from_flags(
        cls,
        variant: TileVariant,
        *,
        is_selected: bool = False,
        is_disabled: bool = False,
        size: TileSize = TileSize.REGULAR,
    ) -> "TileDescriptor":
        category = collapse_flags(disabled=is_disabled, selected=is_selected)
        return cls(variant=variant, state=TileState(category.value), size=size)


# Tab

class TabStyle(str, Enum):
    GHOST = "ghost"
    BLACK5 = "black5"


class TabSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class TabState(CategorizedState, str, Enum):
    DEFAULT = "default"
    SELECTED = "selected"
    DISABLED = "disabled"


@dataclass(frozen=True)
class TabDescriptor:
    style: TabStyle = TabStyle.GHOST
    state: TabState = TabState.DEFAULT
    size: TabSize = TabSize.MEDIUM

    @classmethod
    def from_flags(
        cls,
        style: TabStyle,
        *,
        is_selected: bool = False,
        is_disabled: bool = False,
        size: TabSize = TabSize.MEDIUM,
    ) -> "TabDescriptor":
        category = collapse_flags(disabled=is_disabled, selected=is_selected)
        return cls(style=style, state=TabState(category.value), size=size)


# Accordion

class AccordionType(str, Enum):
    TEXT = "text"
    QUESTION = "question"
    RATING = "rating"
    PRODUCT_SPECS = "productSpecs"


@dataclass(frozen=True)
class AccordionDescriptor:
    type: AccordionType = AccordionType.TEXT
    is_borderless: bool = False
    show_divider: bool = True
    is_expanded: bool = False


# Callout

class CalloutVariant(str, Enum):
    NEUTRAL = "neutral"
    BRAND = "brand"
    INVERSE = "inverse"


@dataclass(frozen=True)
class CalloutDescriptor:
    variant: CalloutVariant = CalloutVariant.NEUTRAL
    is_floating: bool = False


# Content card

class BodyPlacement(str, Enum):
    FIRST_WITH_PADDING = "firstWithPadding"
    FIRST_FULL_BLEED = "firstFullBleed"
    SECOND_WITH_PADDING = "secondWithPadding"
    SECOND_FULL_BLEED = "secondFullBleed"

    @property
    def is_first(self) -> bool:
        return self in (BodyPlacement.FIRST_WITH_PADDING, BodyPlacement.FIRST_FULL_BLEED)

    @property
    def is_full_bleed(self) -> bool:
        return self in (BodyPlacement.FIRST_FULL_BLEED, BodyPlacement.SECOND_FULL_BLEED)


@dataclass(frozen=True)
class ContentCardDescriptor:
    body_placement: BodyPlacement = BodyPlacement.FIRST_WITH_PADDING
    show_title: bool = True
    show_body: bool = True
    show_bottom_action: bool = False


# Gallery

_GALLERY_TAB_LABELS = {
    "images": "Images",
    "videos": "Videos",
    "view360": "360°",
    "ar": "AR",
    "customerImages": "Reviews",
}


class GalleryTab(str, Enum):
    IMAGES = "images"
    VIDEOS = "videos"
    VIEW360 = "view360"
    AR = "ar"
    CUSTOMER_IMAGES = "customerImages"

    @property
    def label(self) -> str:
        return _GALLERY_TAB_LABELS[self.value]


@dataclass(frozen=True)
class GalleryDescriptor:
    tabs: tuple[GalleryTab, ...] = tuple(GalleryTab)
    selected_tab: GalleryTab = GalleryTab.IMAGES

    def __post_init__(self) -> None:
        tabs = tuple(GalleryTab(tab) for tab in self.tabs)
        if not tabs:
            raise ValueError("Gallery needs at least one tab")
        if len(set(tabs)) != len(tabs):
            raise ValueError("Gallery tabs must be unique")
        selected = GalleryTab(self.selected_tab)
        if selected not in tabs:
            raise ValueError(f"Selected tab '{selected.value}' is not one of the gallery tabs")
        object.__setattr__(self, "tabs", tabs)
        object.__setattr__(self, "selected_tab", selected)


# Badge

class BadgeVariant(str, Enum):
    OUTLINE = "outline"
    FILLED_SUBTLE = "filledSubtle"
    FILLED_STRONG = "filledStrong"


class BadgeSize(str, Enum):
    SMALL = "small"
    BASE = "base"


class BadgeColor(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    PRIMARY = "primary"
    MEDIUM = "medium"
    BRAND = "brand"


@dataclass(frozen=True)
class BadgeDescriptor:
    color: BadgeColor = BadgeColor.BRAND
    variant: BadgeVariant = BadgeVariant.FILLED_STRONG
    text: str = ""
    size: BadgeSize = BadgeSize.SMALL


# Mini product card

def _check_amount(dollars: int, cents: int) -> None:
    if dollars < 0:
        raise ValueError(f"Dollars must not be negative, got {dollars}")
    if not 0 <= cents <= 99:
        raise ValueError(f"Cents must be between 0 and 99, got {cents}")


@dataclass(frozen=True)
class StandardPrice:
    dollars: int
    cents: int = 0

    def __post_init__(self) -> None:
        _check_amount(self.dollars, self.cents)


@dataclass(frozen=True)
class SalePrice:
    dollars: int
    cents: int
    original_dollars: int
    original_cents: int = 0

    def __post_init__(self) -> None:
        _check_amount(self.dollars, self.cents)
        _check_amount(self.original_dollars, self.original_cents)


@dataclass(frozen=True)
class RangePrice:
    min_dollars: int
    min_cents: int
    max_dollars: int
    max_cents: int = 0

    def __post_init__(self) -> None:
        _check_amount(self.min_dollars, self.min_cents)
        _check_amount(self.max_dollars, self.max_cents)


@dataclass(frozen=True)
class StartingAtPrice:
    dollars: int
    cents: int = 0

    def __post_init__(self) -> None:
        _check_amount(self.dollars, self.cents)


Price = Union[StandardPrice, SalePrice, RangePrice, StartingAtPrice]


@dataclass(frozen=True)
class ProductBadge:
    text: str
    color: BadgeColor = BadgeColor.BRAND
    variant: BadgeVariant = BadgeVariant.FILLED_STRONG

    @classmethod
    def sale(cls) -> "ProductBadge":
        return cls("Sale", BadgeColor.DANGER)

    @classmethod
    def new(cls) -> "ProductBadge":
        return cls("New", BadgeColor.SUCCESS)

    @classmethod
    def exclusive(cls) -> "ProductBadge":
        return cls("Exclusive", BadgeColor.BRAND)

    @classmethod
    def limited(cls) -> "ProductBadge":
        return cls("Limited", BadgeColor.WARNING)

    def as_descriptor(self) -> BadgeDescriptor:
        return BadgeDescriptor(color=self.color, variant=self.variant, text=self.text)


@dataclass(frozen=True)
class ProductRating:
    rating: float
    review_count: Optional[int] = None

    def __post_init__(self) -> None:
        rating = float(self.rating)
        if math.isnan(rating):
            raise ValueError("Rating must be a number, got NaN")
        object.__setattr__(self, "rating", min(max(rating, 0.0), 5.0))


@dataclass(frozen=True)
class MiniProductCardDescriptor:
    product_name: str
    price: Price
    badge: Optional[ProductBadge] = None
    rating: Optional[ProductRating] = None
    is_sponsored: bool = False


# Text input field

class TextFieldStateKind(str, Enum):
    DEFAULT = "default"
    FOCUSED = "focused"
    ERROR = "error"
    SUCCESS = "success"
    DISABLED = "disabled"


@dataclass(frozen=True)
class TextFieldState:
    kind: TextFieldStateKind = TextFieldStateKind.DEFAULT
    message: Optional[str] = None

    def __post_init__(self) -> None:
        kind = TextFieldStateKind(self.kind)
        if self.message is not None and kind is not TextFieldStateKind.ERROR:
            raise ValueError("Only the error state carries a message")
        object.__setattr__(self, "kind", kind)

    @classmethod
    def default(cls) -> "TextFieldState":
        return cls(TextFieldStateKind.DEFAULT)

    @classmethod
    def focused(cls) -> "TextFieldState":
        return cls(TextFieldStateKind.FOCUSED)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "TextFieldState":
        return cls(TextFieldStateKind.ERROR, message)

    @classmethod
    def success(cls) -> "TextFieldState":
        return cls(TextFieldStateKind.SUCCESS)

    @classmethod
    def disabled(cls) -> "TextFieldState":
        return cls(TextFieldStateKind.DISABLED)

    @property
    def category(self) -> StateCategory:
        return StateCategory(self.kind.value)

    @property
    def label(self) -> str:
        if self.message:
            return f"{self.kind.value}({self.message})"
        return self.kind.value


@dataclass(frozen=True)
class TextInputFieldDescriptor:
    state: TextFieldState = field(default_factory=TextFieldState.default)
    label: Optional[str] = None
    is_required: bool = False
    helper_text: Optional[str] = None
    placeholder: str = ""


# Filter panel

@dataclass(frozen=True)
class CategoryPill:
    id: str
    label: str


@dataclass(frozen=True)
class FilterPill:
    id: str
    label: str
    is_selected: bool = False
    has_dropdown: bool = False


@dataclass(frozen=True)
class FilterPanelDescriptor:
    category_title: str
    category_pills: tuple[CategoryPill, ...] = ()
    results_count: int = 0
    primary_filters: tuple[FilterPill, ...] = ()
    secondary_filters: tuple[FilterPill, ...] = ()
    selected_category_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_pills", tuple(self.category_pills))
        object.__setattr__(self, "primary_filters", tuple(self.primary_filters))
        object.__setattr__(self, "secondary_filters", tuple(self.secondary_filters))
        if self.results_count < 0:
            raise ValueError(f"Results count must not be negative, got {self.results_count}")
        ids = [pill.id for pill in self.category_pills]
        if len(set(ids)) != len(ids):
            raise ValueError("Category pill ids must be unique")
        if self.selected_category_id is not None and self.selected_category_id not in ids:
            raise ValueError(f"Selected category '{self.selected_category_id}' is not one of the category pills")


__all__ = [
    "AccordionDescriptor",
    "AccordionType",
    "BadgeColor",
    "BadgeDescriptor",
    "BadgeSize",
    "BadgeVariant",
    "BodyPlacement",
    "ButtonDescriptor",
    "ButtonSize",
    "ButtonState",
    "ButtonVariant",
    "CalloutDescriptor",
    "CalloutVariant",
    "CategoryPill",
    "ContentCardDescriptor",
    "FilterPanelDescriptor",
    "FilterPill",
    "GalleryDescriptor",
    "GalleryTab",
    "IconButtonDescriptor",
    "IconButtonSize",
    "IconButtonStyle",
    "MiniProductCardDescriptor",
    "PillDescriptor",
    "PillSize",
    "PillState",
    "PillStyle",
    "Price",
    "ProductBadge",
    "ProductRating",
    "RangePrice",
    "SalePrice",
    "StandardPrice",
    "StartingAtPrice",
    "TabDescriptor",
    "TabSize",
    "TabState",
    "TabStyle",
    "TextFieldState",
    "TextFieldStateKind",
    "TextInputFieldDescriptor",
    "TileDescriptor",
    "TileSize",
    "TileState",
    "TileVariant",
]
