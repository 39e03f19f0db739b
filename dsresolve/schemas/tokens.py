from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class ColorScheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class TokenName(str, Enum):
    # Sentinels shared by every palette
    CLEAR = "clear"
    WHITE = "white"

    # Button backgrounds
    BUTTON_BACKGROUND_BRAND_FILLED_DEFAULT = "buttonBackgroundBrandFilledDefault"
    BUTTON_BACKGROUND_BRAND_FILLED_INACTIVE = "buttonBackgroundBrandFilledInactive"
    BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_DEFAULT = "buttonBackgroundBrandGradientFilledDefault"
    BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_INACTIVE = "buttonBackgroundBrandGradientFilledInactive"
    BUTTON_BACKGROUND_WHITE_FILLED_DEFAULT = "buttonBackgroundWhiteFilledDefault"
    BUTTON_BACKGROUND_WHITE_FILLED_INACTIVE = "buttonBackgroundWhiteFilledInactive"
    BUTTON_BACKGROUND_TRANSPARENT05_DEFAULT = "buttonBackgroundTransparent05Default"
    BUTTON_BACKGROUND_TRANSPARENT05_INACTIVE = "buttonBackgroundTransparent05Inactive"
    BUTTON_BACKGROUND_TRANSPARENT05_PRESSED = "buttonBackgroundTransparent05Pressed"
    BUTTON_BACKGROUND_TRANSPARENT10_DEFAULT = "buttonBackgroundTransparent10Default"
    BUTTON_BACKGROUND_TRANSPARENT10_INACTIVE = "buttonBackgroundTransparent10Inactive"
    BUTTON_BACKGROUND_TRANSPARENT10_PRESSED = "buttonBackgroundTransparent10Pressed"
    BUTTON_BACKGROUND_GHOST_FILLED_DEFAULT = "buttonBackgroundGhostFilledDefault"
    BUTTON_BACKGROUND_GHOST_FILLED_INACTIVE = "buttonBackgroundGhostFilledInactive"
    BUTTON_BACKGROUND_GHOST_FILLED_PRESSED = "buttonBackgroundGhostFilledPressed"

    # Button text
    BUTTON_TEXT_ORANGE_FILLED_DEFAULT = "buttonTextOrangeFilledDefault"
    BUTTON_TEXT_ORANGE_FILLED_INACTIVE = "buttonTextOrangeFilledInactive"
    BUTTON_TEXT_GRADIENT_FILLED_DEFAULT = "buttonTextGradientFilledDefault"
    BUTTON_TEXT_GRADIENT_FILLED_INACTIVE = "buttonTextGradientFilledInactive"
    BUTTON_TEXT_ORANGE_OUTLINE_DEFAULT = "buttonTextOrangeOutlineDefault"
    BUTTON_TEXT_ORANGE_OUTLINE_INACTIVE = "buttonTextOrangeOutlineInactive"
    BUTTON_TEXT_WHITE_FILLED_DEFAULT = "buttonTextWhiteFilledDefault"
    BUTTON_TEXT_WHITE_FILLED_INACTIVE = "buttonTextWhiteFilledInactive"
    BUTTON_TEXT_TRANSPARENT05_FILLED_DEFAULT = "buttonTextTransparent05FilledDefault"
    BUTTON_TEXT_TRANSPARENT05_FILLED_INACTIVE = "buttonTextTransparent05FilledInactive"
    BUTTON_TEXT_TRANSPARENT10_FILLED_DEFAULT = "buttonTextTransparent10FilledDefault"
    BUTTON_TEXT_TRANSPARENT10_FILLED_INACTIVE = "buttonTextTransparent10FilledInactive"
    BUTTON_TEXT_GHOST_FILLED_DEFAULT = "buttonTextGhostFilledDefault"
    BUTTON_TEXT_GHOST_FILLED_INACTIVE = "buttonTextGhostFilledInactive"

    # Button borders
    BUTTON_BORDER_ORANGE_OUTLINE_DEFAULT = "buttonBorderOrangeOutlineDefault"
    BUTTON_BORDER_ORANGE_OUTLINE_INACTIVE = "buttonBorderOrangeOutlineInactive"

    # Containers
    CONTAINER_BACKGROUND_TRANSPARENT05 = "containerBackgroundTransparent05"
    CONTAINER_BACKGROUND_TRANSPARENT10 = "containerBackgroundTransparent10"
    CONTAINER_BACKGROUND_TRANSPARENT20 = "containerBackgroundTransparent20"
    CONTAINER_BACKGROUND_BRAND_ACCENT = "containerBackgroundBrandAccent"
    CONTAINER_BACKGROUND_INVERSE = "containerBackgroundInverse"
    CONTAINER_BACKGROUND_PRIMARY = "containerBackgroundPrimary"
    CONTAINER_BACKGROUND_SECONDARY = "containerBackgroundSecondary"
    CONTAINER_BACKGROUND_BRAND = "containerBackgroundBrand"
    BACKGROUND_SURFACE_COLOR_SECONDARY = "backgroundSurfaceColorSecondary"

    # Text on surface
    TEXT_ON_SURFACE_COLOR_PRIMARY = "textOnSurfaceColorPrimary"
    TEXT_ON_SURFACE_COLOR_SECONDARY = "textOnSurfaceColorSecondary"
    TEXT_ON_SURFACE_COLOR_TERTIARY = "textOnSurfaceColorTertiary"
    TEXT_ON_SURFACE_COLOR_INVERSE = "textOnSurfaceColorInverse"
    TEXT_ON_SURFACE_COLOR_DANGER = "textOnSurfaceColorDanger"
    TEXT_ON_SURFACE_COLOR_ERROR = "textOnSurfaceColorError"
    TEXT_ON_SURFACE_COLOR_SUCCESS = "textOnSurfaceColorSuccess"

    # Icons and borders
    ICON_COLOR_SECONDARY = "iconColorSecondary"
    ICON_COLOR_BRAND = "iconColorBrand"
    BORDER_COLOR_PRIMARY = "borderColorPrimary"

    # Inputs
    INPUT_BORDER_DEFAULT = "inputBorderDefault"
    INPUT_BORDER_FOCUS = "inputBorderFocus"
    INPUT_BORDER_ERROR = "inputBorderError"
    INPUT_BORDER_SUCCESS = "inputBorderSuccess"
    INPUT_BORDER_INACTIVE = "inputBorderInactive"

    # Badges and feedback
    BADGE_INFO_ACCENT = "badgeInfoAccent"
    BADGE_SUCCESS_ACCENT = "badgeSuccessAccent"
    BADGE_WARNING_ACCENT = "badgeWarningAccent"
    BADGE_DANGER_ACCENT = "badgeDangerAccent"
    FEEDBACK_BACKGROUND_INFORMATIONAL_ACCENT1 = "feedbackBackgroundInformationalAccent1"
    FEEDBACK_BACKGROUND_SUCCESS_ACCENT1 = "feedbackBackgroundSuccessAccent1"
    FEEDBACK_BACKGROUND_WARNING_ACCENT1 = "feedbackBackgroundWarningAccent1"
    FEEDBACK_BACKGROUND_ERROR_ACCENT1 = "feedbackBackgroundErrorAccent1"

    # Dimensions
    BORDER_RADIUS_XL = "borderRadiusXl"
    BORDER_RADIUS_FULL = "borderRadiusFull"


TokenValue = Union[str, float]


class TokenRef(BaseModel):
    """A token name together with its value under one color scheme."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: TokenName
    value: TokenValue


__all__ = ["ColorScheme", "TokenName", "TokenRef", "TokenValue"]
