"""Registry of every component family.

Each family knows its token tables, how to enumerate its closed descriptor
space and which resolver to call. The showcase matrix and palette validation
are both built from this registry.
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping, Optional

from ..schemas.descriptors import (
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
    CategoryPill,
    ContentCardDescriptor,
    FilterPanelDescriptor,
    FilterPill,
    GalleryDescriptor,
    GalleryTab,
    IconButtonDescriptor,
    IconButtonSize,
    IconButtonStyle,
    MiniProductCardDescriptor,
    PillDescriptor,
    PillSize,
    PillState,
    PillStyle,
    ProductBadge,
    ProductRating,
    RangePrice,
    SalePrice,
    StandardPrice,
    StartingAtPrice,
    TabDescriptor,
    TabSize,
    TabState,
    TabStyle,
    TextFieldState,
    TextInputFieldDescriptor,
    TileDescriptor,
    TileSize,
    TileState,
    TileVariant,
)
from ..schemas.styles import ResolvedStyle
from ..schemas.tokens import ColorScheme, TokenName
from .palette import TokenPalette, active_palette
from .precedence import TokenTable, describe_tables, referenced_tokens
from .resolvers.accordion import ACCORDION_TABLES, resolve_accordion
from .resolvers.badge import BADGE_TABLES, resolve_badge
from .resolvers.button import BUTTON_TABLES, resolve_button
from .resolvers.callout import CALLOUT_TABLES, resolve_callout
from .resolvers.content_card import CONTENT_CARD_TABLES, resolve_content_card
from .resolvers.filter_panel import FILTER_PANEL_TABLES, resolve_filter_panel
from .resolvers.gallery import GALLERY_TAB_TABLE, GALLERY_TABLES, resolve_gallery
from .resolvers.icon_button import ICON_BUTTON_TABLES, resolve_icon_button
from .resolvers.mini_product_card import MINI_PRODUCT_CARD_TABLES, resolve_mini_product_card
from .resolvers.pill import PILL_TABLES, resolve_pill
from .resolvers.tab import TAB_TABLES, resolve_tab
from .resolvers.text_input_field import TEXT_INPUT_FIELD_TABLES, resolve_text_input_field
from .resolvers.tile import TILE_TABLES, resolve_tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentFamily:
    name: str
    tables: Mapping[str, TokenTable]
    space: Callable[[], Iterable[Any]]
    resolver: Callable[..., ResolvedStyle]
    extra_tables: tuple[TokenTable, ...] = field(default_factory=tuple)

    def all_tables(self) -> list[TokenTable]:
        return [*self.tables.values(), *self.extra_tables]

    def descriptors(self) -> list[Any]:
        return list(self.space())

    def describe_tables(self) -> dict[str, Any]:
        tables = {**self.tables, **{table.name: table for table in self.extra_tables}}
        return describe_tables(tables)


def _button_descriptors() -> Iterable[ButtonDescriptor]:
    for variant, state, size in itertools.product(ButtonVariant, ButtonState, ButtonSize):
        yield ButtonDescriptor(variant=variant, state=state, size=size)


def _icon_button_descriptors() -> Iterable[IconButtonDescriptor]:
    for style, state, size in itertools.product(IconButtonStyle, ButtonState, IconButtonSize):
        yield IconButtonDescriptor(style=style, state=state, size=size)


def _pill_descriptors() -> Iterable[PillDescriptor]:
    for style, state, size, has_background in itertools.product(PillStyle, PillState, PillSize, (True, False)):
        yield PillDescriptor(style=style, state=state, size=size, has_background=has_background)


def _tile_descriptors() -> Iterable[TileDescriptor]:
    for variant, state, size in itertools.product(TileVariant, TileState, TileSize):
        yield TileDescriptor(variant=variant, state=state, size=size)


def _tab_descriptors() -> Iterable[TabDescriptor]:
    for style, state, size in itertools.product(TabStyle, TabState, TabSize):
        yield TabDescriptor(style=style, state=state, size=size)


def _accordion_descriptors() -> Iterable[AccordionDescriptor]:
    flags = (False, True)
    for accordion_type, borderless, divider, expanded in itertools.product(AccordionType, flags, flags, flags):
        yield AccordionDescriptor(
            type=accordion_type,
            is_borderless=borderless,
            show_divider=divider,
            is_expanded=expanded,
        )


def _callout_descriptors() -> Iterable[CalloutDescriptor]:
    for variant, floating in itertools.product(CalloutVariant, (False, True)):
        yield CalloutDescriptor(variant=variant, is_floating=floating)


def _content_card_descriptors() -> Iterable[ContentCardDescriptor]:
    flags = (True, False)
    for placement, title, body, action in itertools.product(BodyPlacement, flags, flags, flags):
        yield ContentCardDescriptor(
            body_placement=placement,
            show_title=title,
            show_body=body,
            show_bottom_action=action,
        )


def _gallery_descriptors() -> Iterable[GalleryDescriptor]:
    for tab in GalleryTab:
        yield GalleryDescriptor(selected_tab=tab)


def _badge_descriptors() -> Iterable[BadgeDescriptor]:
    for variant, color, size in itertools.product(BadgeVariant, BadgeColor, BadgeSize):
        yield BadgeDescriptor(color=color, variant=variant, size=size, text=color.value.title())


SAMPLE_PRICES = (
    StandardPrice(149, 99),
    SalePrice(129, 0, 179, 99),
    RangePrice(20, 0, 45, 50),
    StartingAtPrice(99),
)

SAMPLE_BADGES = (
    None,
    ProductBadge.sale(),
    ProductBadge.new(),
    ProductBadge.exclusive(),
    ProductBadge.limited(),
)


def _mini_product_card_descriptors() -> Iterable[MiniProductCardDescriptor]:
    # Product data is open-ended; the showcase covers every price kind and badge preset.
    for price, badge in itertools.product(SAMPLE_PRICES, SAMPLE_BADGES):
        yield MiniProductCardDescriptor(
            product_name="Cordless Drill",
            price=price,
            badge=badge,
            rating=ProductRating(4.5, 128),
            is_sponsored=badge is None,
        )


SAMPLE_TEXT_FIELD_STATES = (
    TextFieldState.default(),
    TextFieldState.focused(),
    TextFieldState.error("This field is required"),
    TextFieldState.error(),
    TextFieldState.success(),
    TextFieldState.disabled(),
)


def _text_input_field_descriptors() -> Iterable[TextInputFieldDescriptor]:
    for state, required in itertools.product(SAMPLE_TEXT_FIELD_STATES, (True, False)):
        yield TextInputFieldDescriptor(
            state=state,
            label="Email",
            is_required=required,
            helper_text="We never share your email",
            placeholder="name@example.com",
        )


SAMPLE_CATEGORY_PILLS = (
    CategoryPill("drills", "Drills"),
    CategoryPill("saws", "Saws"),
    CategoryPill("sanders", "Sanders"),
)

SAMPLE_PRIMARY_FILTERS = (
    FilterPill("sort", "Sort", has_dropdown=True),
    FilterPill("brand", "Brand", is_selected=True, has_dropdown=True),
    FilterPill("price", "Price", has_dropdown=True),
)

SAMPLE_SECONDARY_FILTERS = (
    FilterPill("cordless", "Cordless", is_selected=True),
    FilterPill("in-stock", "In Stock"),
)


def _filter_panel_descriptors() -> Iterable[FilterPanelDescriptor]:
    # Panel data is open-ended; the showcase covers an empty panel and every selection position.
    yield FilterPanelDescriptor(category_title="Power Tools")
    for selected in (None, *(pill.id for pill in SAMPLE_CATEGORY_PILLS)):
        yield FilterPanelDescriptor(
            category_title="Power Tools",
            category_pills=SAMPLE_CATEGORY_PILLS,
            results_count=248,
            primary_filters=SAMPLE_PRIMARY_FILTERS,
            secondary_filters=SAMPLE_SECONDARY_FILTERS,
            selected_category_id=selected,
        )


FAMILIES: dict[str, ComponentFamily] = {
    family.name: family
    for family in (
        ComponentFamily("button", BUTTON_TABLES, _button_descriptors, resolve_button),
        ComponentFamily("icon_button", ICON_BUTTON_TABLES, _icon_button_descriptors, resolve_icon_button),
        ComponentFamily("pill", PILL_TABLES, _pill_descriptors, resolve_pill),
        ComponentFamily("tile", TILE_TABLES, _tile_descriptors, resolve_tile),
        ComponentFamily("tab", TAB_TABLES, _tab_descriptors, resolve_tab),
        ComponentFamily("accordion", ACCORDION_TABLES, _accordion_descriptors, resolve_accordion),
        ComponentFamily("callout", CALLOUT_TABLES, _callout_descriptors, resolve_callout),
        ComponentFamily("content_card", CONTENT_CARD_TABLES, _content_card_descriptors, resolve_content_card),
        ComponentFamily(
            "gallery",
            GALLERY_TABLES,
            _gallery_descriptors,
            resolve_gallery,
            extra_tables=(GALLERY_TAB_TABLE,),
        ),
        ComponentFamily("badge", BADGE_TABLES, _badge_descriptors, resolve_badge),
        ComponentFamily(
            "mini_product_card",
            MINI_PRODUCT_CARD_TABLES,
            _mini_product_card_descriptors,
            resolve_mini_product_card,
        ),
        ComponentFamily(
            "text_input_field",
            TEXT_INPUT_FIELD_TABLES,
            _text_input_field_descriptors,
            resolve_text_input_field,
        ),
        ComponentFamily("filter_panel", FILTER_PANEL_TABLES, _filter_panel_descriptors, resolve_filter_panel),
    )
}


def get_family(name: str) -> ComponentFamily:
    try:
        return FAMILIES[name]
    except KeyError:
        raise ValueError(f"Unknown component family '{name}'. Known: {', '.join(FAMILIES)}") from None


@lru_cache(maxsize=1)
def all_referenced_tokens() -> frozenset[TokenName]:
    tables: list[TokenTable] = []
    for family in FAMILIES.values():
        tables.extend(family.all_tables())
    return referenced_tokens(tables)


@dataclass
class PaletteReport:
    palette: str
    required: int
    missing: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.missing


def validate_palette(palette: Optional[TokenPalette] = None) -> PaletteReport:
    """Check that every token referenced by a shipped table exists in both schemes."""
    palette = palette or active_palette()
    required = all_referenced_tokens()
    missing = {
        scheme.value: [token.value for token in tokens]
        for scheme, tokens in palette.missing(required).items()
    }
    report = PaletteReport(palette=palette.name, required=len(required), missing=missing)
    if report.ok:
        logger.info("Palette %s covers all %d referenced tokens", palette.name, report.required)
    else:
        logger.warning("Palette %s is incomplete", palette.name, extra={"data": {"missing": missing}})
    return report


def _describe_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return describe_descriptor(value)
    if isinstance(value, (list, tuple)):
        return [_describe_value(item) for item in value]
    return value


def describe_descriptor(descriptor: Any) -> dict[str, Any]:
    """JSON-ready view of a descriptor; every nested dataclass carries its ``kind``."""
    payload = {
        item.name: _describe_value(getattr(descriptor, item.name))
        for item in dataclasses.fields(descriptor)
    }
    payload["kind"] = type(descriptor).__name__
    return payload


def build_matrix(
    family_name: str,
    scheme: ColorScheme,
    palette: Optional[TokenPalette] = None,
) -> list[dict[str, Any]]:
    """Resolve every descriptor in a family's showcase space."""
    family = get_family(family_name)
    palette = palette or active_palette()
    rows: list[dict[str, Any]] = []
    for descriptor in family.descriptors():
        style = family.resolver(descriptor, scheme, palette)
        rows.append({"descriptor": describe_descriptor(descriptor), "style": style.model_dump(mode="json")})
    logger.debug("Built %s matrix with %d rows", family_name, len(rows))
    return rows


__all__ = [
    "FAMILIES",
    "ComponentFamily",
    "PaletteReport",
    "all_referenced_tokens",
    "build_matrix",
    "describe_descriptor",
    "get_family",
    "validate_palette",
]
