from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .descriptors import (
    AccordionType,
    BadgeColor,
    BadgeSize,
    BadgeVariant,
    BodyPlacement,
    ButtonSize,
    ButtonVariant,
    CalloutVariant,
    GalleryTab,
    IconButtonSize,
    IconButtonStyle,
    PillSize,
    PillStyle,
    TabSize,
    TabStyle,
    TileSize,
    TileVariant,
)
from .tokens import ColorScheme, TokenName, TokenRef


class ResolvedStyle(BaseModel):
    """Base for every resolved style: immutable and compared by value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    scheme: ColorScheme
    state: str

    def token_fields(self) -> dict[str, TokenRef]:
        return {name: value for name, value in self if isinstance(value, TokenRef)}

    def token_names(self) -> dict[str, TokenName]:
        return {name: ref.name for name, ref in self.token_fields().items()}


class ButtonResolvedSize(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    size: ButtonSize
    height: float
    horizontal_padding: float
    icon_size: float
    spinner_size: float
    is_full_width: bool
    meets_ios_tap_target: bool
    meets_android_tap_target: bool


class ButtonResolvedStyle(ResolvedStyle):
    variant: ButtonVariant
    background: TokenRef
    foreground: TokenRef
    border: TokenRef
    pressed_background: TokenRef
    uses_gradient: bool
    shows_spinner: bool
    is_interactive: bool
    dimensions: ButtonResolvedSize


class IconButtonResolvedStyle(ResolvedStyle):
    style: IconButtonStyle
    size: IconButtonSize
    background: TokenRef
    foreground: TokenRef
    border: TokenRef
    pressed_background: TokenRef
    corner_radius: TokenRef
    button_size: float
    touch_target_size: float
    icon_size: float
    spinner_size: float
    shows_spinner: bool
    is_interactive: bool


class PillResolvedStyle(ResolvedStyle):
    style: PillStyle
    size: PillSize
    has_background: bool
    background: TokenRef
    border: TokenRef
    foreground: TokenRef
    height: float
    font_size: float
    icon_size: float
    horizontal_padding: float
    vertical_padding: float
    spacing: float
    corner_radius: float
    border_width: float


class TileResolvedStyle(ResolvedStyle):
    variant: TileVariant
    size: TileSize
    background: TokenRef
    border: TokenRef
    text: TokenRef
    height: float
    image_size: float
    content_spacing: float


class TabResolvedStyle(ResolvedStyle):
    style: TabStyle
    size: TabSize
    background: TokenRef
    text: TokenRef
    indicator: TokenRef
    divider: TokenRef
    background_opacity: float
    height: float
    font_size: float
    icon_size: float
    horizontal_padding: float
    spacing: float
    indicator_height: float
    is_selected: bool
    is_interactive: bool


class AccordionResolvedStyle(ResolvedStyle):
    type: AccordionType
    background: TokenRef
    border: TokenRef
    title: TokenRef
    subtitle: TokenRef
    icon: TokenRef
    divider: TokenRef
    show_divider: bool
    is_expanded: bool
    chevron_rotation: float


class CalloutResolvedStyle(ResolvedStyle):
    variant: CalloutVariant
    background: TokenRef
    title: TokenRef
    body: TokenRef
    icon: TokenRef
    corner_radius: TokenRef
    is_floating: bool


class ContentCardResolvedStyle(ResolvedStyle):
    body_placement: BodyPlacement
    background: TokenRef
    title: TokenRef
    subtitle: TokenRef
    icon: TokenRef
    body_first: bool
    is_full_bleed: bool
    show_title: bool
    show_body: bool
    show_bottom_action: bool


class GalleryTabStyle(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    tab: GalleryTab
    label: str
    is_selected: bool
    color: TokenRef


class GalleryResolvedStyle(ResolvedStyle):
    background: TokenRef
    text: TokenRef
    secondary_text: TokenRef
    icon: TokenRef
    selected_tab_color: TokenRef
    unselected_tab_color: TokenRef
    tab_bar_background: TokenRef
    thumbnail_strip_background: TokenRef
    selected_thumbnail_border: TokenRef
    placeholder: TokenRef
    button: TokenRef
    selected_tab: GalleryTab
    tabs: tuple[GalleryTabStyle, ...]


class BadgeResolvedStyle(ResolvedStyle):
    variant: BadgeVariant
    color: BadgeColor
    size: BadgeSize
    text: str
    foreground: TokenRef
    background: TokenRef
    border: TokenRef
    min_height: float
    font_size: float
    icon_size: float
    corner_radius: float
    padding: float


class MiniProductCardResolvedStyle(ResolvedStyle):
    background_color: TokenRef
    placeholder_background_color: TokenRef
    product_name_color: TokenRef
    price_color: TokenRef
    sale_price_color: TokenRef
    price_secondary_color: TokenRef
    star_color: TokenRef
    review_count_color: TokenRef
    sponsored_text_color: TokenRef
    sponsored_background_color: TokenRef
    display_price_color: TokenRef
    product_name: str
    formatted_price: str
    original_price: Optional[str] = None
    price_prefix: Optional[str] = None
    badge_text: Optional[str] = None
    badge: Optional[BadgeResolvedStyle] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    is_sponsored: bool
    is_sale_price: bool


class TextInputFieldResolvedStyle(ResolvedStyle):
    border: TokenRef
    text: TokenRef
    label: TokenRef
    adornment: TokenRef
    background: TokenRef
    placeholder: TokenRef
    optional_label: TokenRef
    helper_text: TokenRef
    error_text: TokenRef
    success_text: TokenRef
    helper_display_color: TokenRef
    required_marker: Optional[str] = None
    helper_display_text: Optional[str] = None
    is_editable: bool


class FilterPanelResolvedStyle(ResolvedStyle):
    category_title_color: TokenRef
    results_text_color: TokenRef
    background_color: TokenRef
    category_title: str
    results_count: int
    results_text: str
    category_pill_count: int
    primary_filter_count: int
    secondary_filter_count: int
    selected_category_id: Optional[str] = None
    category_pills: tuple[PillResolvedStyle, ...]
    primary_filter_pills: tuple[PillResolvedStyle, ...]
    secondary_filter_pills: tuple[PillResolvedStyle, ...]


__all__ = [
    "AccordionResolvedStyle",
    "BadgeResolvedStyle",
    "ButtonResolvedSize",
    "ButtonResolvedStyle",
    "CalloutResolvedStyle",
    "ContentCardResolvedStyle",
    "FilterPanelResolvedStyle",
    "GalleryResolvedStyle",
    "GalleryTabStyle",
    "IconButtonResolvedStyle",
    "MiniProductCardResolvedStyle",
    "PillResolvedStyle",
    "ResolvedStyle",
    "TabResolvedStyle",
    "TextInputFieldResolvedStyle",
    "TileResolvedStyle",
]
