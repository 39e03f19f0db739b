from __future__ import annotations

from ..schemas.tokens import TokenName as T
from ..schemas.tokens import TokenValue

# Bundled design-token values. Colors are #RRGGBB or #RRGGBBAA, dimensions are points.

LIGHT_TOKENS: dict[T, TokenValue] = {
    T.CLEAR: "#00000000",
    T.WHITE: "#FFFFFF",
    T.BUTTON_BACKGROUND_BRAND_FILLED_DEFAULT: "#F96302",
    T.BUTTON_BACKGROUND_BRAND_FILLED_INACTIVE: "#E5E1DE",
    T.BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_DEFAULT: "#FFFFFF",
    T.BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_INACTIVE: "#0000000D",
    T.BUTTON_BACKGROUND_WHITE_FILLED_DEFAULT: "#FFFFFF",
    T.BUTTON_BACKGROUND_WHITE_FILLED_INACTIVE: "#E5E1DE",
    T.BUTTON_BACKGROUND_TRANSPARENT05_DEFAULT: "#0000000D",
    T.BUTTON_BACKGROUND_TRANSPARENT05_INACTIVE: "#BAB7B4",
    T.BUTTON_BACKGROUND_TRANSPARENT05_PRESSED: "#0000001A",
    T.BUTTON_BACKGROUND_TRANSPARENT10_DEFAULT: "#0000001A",
    T.BUTTON_BACKGROUND_TRANSPARENT10_INACTIVE: "#BAB7B4",
    T.BUTTON_BACKGROUND_TRANSPARENT10_PRESSED: "#00000026",
    T.BUTTON_BACKGROUND_GHOST_FILLED_DEFAULT: "#00000000",
    T.BUTTON_BACKGROUND_GHOST_FILLED_INACTIVE: "#BAB7B4",
    T.BUTTON_BACKGROUND_GHOST_FILLED_PRESSED: "#0000001A",
    T.BUTTON_TEXT_ORANGE_FILLED_DEFAULT: "#FFFFFF",
    T.BUTTON_TEXT_ORANGE_FILLED_INACTIVE: "#979492",
    T.BUTTON_TEXT_GRADIENT_FILLED_DEFAULT: "#FFFFFF",
    T.BUTTON_TEXT_GRADIENT_FILLED_INACTIVE: "#FFFFFFB3",
    T.BUTTON_TEXT_ORANGE_OUTLINE_DEFAULT: "#E95C02",
    T.BUTTON_TEXT_ORANGE_OUTLINE_INACTIVE: "#979492",
    T.BUTTON_TEXT_WHITE_FILLED_DEFAULT: "#252524",
    T.BUTTON_TEXT_WHITE_FILLED_INACTIVE: "#979492",
    T.BUTTON_TEXT_TRANSPARENT05_FILLED_DEFAULT: "#252524",
    T.BUTTON_TEXT_TRANSPARENT05_FILLED_INACTIVE: "#979492",
    T.BUTTON_TEXT_TRANSPARENT10_FILLED_DEFAULT: "#252524",
    T.BUTTON_TEXT_TRANSPARENT10_FILLED_INACTIVE: "#979492",
    T.BUTTON_TEXT_GHOST_FILLED_DEFAULT: "#252524",
    T.BUTTON_TEXT_GHOST_FILLED_INACTIVE: "#979492",
    T.BUTTON_BORDER_ORANGE_OUTLINE_DEFAULT: "#F96302",
    T.BUTTON_BORDER_ORANGE_OUTLINE_INACTIVE: "#979492",
    T.CONTAINER_BACKGROUND_TRANSPARENT05: "#0000000D",
    T.CONTAINER_BACKGROUND_TRANSPARENT10: "#0000001A",
    T.CONTAINER_BACKGROUND_TRANSPARENT20: "#00000033",
    T.CONTAINER_BACKGROUND_BRAND_ACCENT: "#FEF2E9",
    T.CONTAINER_BACKGROUND_INVERSE: "#252524",
    T.CONTAINER_BACKGROUND_PRIMARY: "#FFFFFF",
    T.CONTAINER_BACKGROUND_SECONDARY: "#F5F4F3",
    T.CONTAINER_BACKGROUND_BRAND: "#F96302",
    T.BACKGROUND_SURFACE_COLOR_SECONDARY: "#F5F4F3",
    T.TEXT_ON_SURFACE_COLOR_PRIMARY: "#252524",
    T.TEXT_ON_SURFACE_COLOR_SECONDARY: "#474545",
    T.TEXT_ON_SURFACE_COLOR_TERTIARY: "#6A6867",
    T.TEXT_ON_SURFACE_COLOR_INVERSE: "#FBFAF9",
    T.TEXT_ON_SURFACE_COLOR_DANGER: "#DF3427",
    T.TEXT_ON_SURFACE_COLOR_ERROR: "#DF3427",
    T.TEXT_ON_SURFACE_COLOR_SUCCESS: "#4A8165",
    T.ICON_COLOR_SECONDARY: "#474545",
    T.ICON_COLOR_BRAND: "#F96302",
    T.BORDER_COLOR_PRIMARY: "#252524",
    T.INPUT_BORDER_DEFAULT: "#BAB7B4",
    T.INPUT_BORDER_FOCUS: "#252524",
    T.INPUT_BORDER_ERROR: "#DF3427",
    T.INPUT_BORDER_SUCCESS: "#63937B",
    T.INPUT_BORDER_INACTIVE: "#E5E1DE",
    T.BADGE_INFO_ACCENT: "#495489",
    T.BADGE_SUCCESS_ACCENT: "#4A8165",
    T.BADGE_WARNING_ACCENT: "#F9E270",
    T.BADGE_DANGER_ACCENT: "#DF3427",
    T.FEEDBACK_BACKGROUND_INFORMATIONAL_ACCENT1: "#E8EAF3",
    T.FEEDBACK_BACKGROUND_SUCCESS_ACCENT1: "#E6F0EB",
    T.FEEDBACK_BACKGROUND_WARNING_ACCENT1: "#FEF8DC",
    T.FEEDBACK_BACKGROUND_ERROR_ACCENT1: "#FBE7E5",
    T.BORDER_RADIUS_XL: 8.0,
    T.BORDER_RADIUS_FULL: 999.0,
}

DARK_TOKENS: dict[T, TokenValue] = {
    T.CLEAR: "#00000000",
    T.WHITE: "#FFFFFF",
    T.BUTTON_BACKGROUND_BRAND_FILLED_DEFAULT: "#FF7A1A",
    T.BUTTON_BACKGROUND_BRAND_FILLED_INACTIVE: "#3A3836",
    T.BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_DEFAULT: "#FF7A1A",
    T.BUTTON_BACKGROUND_BRAND_GRADIENT_FILLED_INACTIVE: "#FFFFFF0D",
    T.BUTTON_BACKGROUND_WHITE_FILLED_DEFAULT: "#2E2D2C",
    T.BUTTON_BACKGROUND_WHITE_FILLED_INACTIVE: "#3A3836",
    T.BUTTON_BACKGROUND_TRANSPARENT05_DEFAULT: "#FFFFFF0D",
    T.BUTTON_BACKGROUND_TRANSPARENT05_INACTIVE: "#4A4846",
    T.BUTTON_BACKGROUND_TRANSPARENT05_PRESSED: "#FFFFFF1A",
    T.BUTTON_BACKGROUND_TRANSPARENT10_DEFAULT: "#FFFFFF1A",
    T.BUTTON_BACKGROUND_TRANSPARENT10_INACTIVE: "#4A4846",
    T.BUTTON_BACKGROUND_TRANSPARENT10_PRESSED: "#FFFFFF26",
    T.BUTTON_BACKGROUND_GHOST_FILLED_DEFAULT: "#00000000",
    T.BUTTON_BACKGROUND_GHOST_FILLED_INACTIVE: "#4A4846",
    T.BUTTON_BACKGROUND_GHOST_FILLED_PRESSED: "#FFFFFF1A",
    T.BUTTON_TEXT_ORANGE_FILLED_DEFAULT: "#FFFFFF",
    T.BUTTON_TEXT_ORANGE_FILLED_INACTIVE: "#7A7674",
    T.BUTTON_TEXT_GRADIENT_FILLED_DEFAULT: "#FFFFFF",
    T.BUTTON_TEXT_GRADIENT_FILLED_INACTIVE: "#FFFFFF80",
    T.BUTTON_TEXT_ORANGE_OUTLINE_DEFAULT: "#FF8A33",
    T.BUTTON_TEXT_ORANGE_OUTLINE_INACTIVE: "#7A7674",
    T.BUTTON_TEXT_WHITE_FILLED_DEFAULT: "#F2F1F0",
    T.BUTTON_TEXT_WHITE_FILLED_INACTIVE: "#7A7674",
    T.BUTTON_TEXT_TRANSPARENT05_FILLED_DEFAULT: "#F2F1F0",
    T.BUTTON_TEXT_TRANSPARENT05_FILLED_INACTIVE: "#7A7674",
    T.BUTTON_TEXT_TRANSPARENT10_FILLED_DEFAULT: "#F2F1F0",
    T.BUTTON_TEXT_TRANSPARENT10_FILLED_INACTIVE: "#7A7674",
    T.BUTTON_TEXT_GHOST_FILLED_DEFAULT: "#F2F1F0",
    T.BUTTON_TEXT_GHOST_FILLED_INACTIVE: "#7A7674",
    T.BUTTON_BORDER_ORANGE_OUTLINE_DEFAULT: "#FF7A1A",
    T.BUTTON_BORDER_ORANGE_OUTLINE_INACTIVE: "#7A7674",
    T.CONTAINER_BACKGROUND_TRANSPARENT05: "#FFFFFF0D",
    T.CONTAINER_BACKGROUND_TRANSPARENT10: "#FFFFFF1A",
    T.CONTAINER_BACKGROUND_TRANSPARENT20: "#FFFFFF33",
    T.CONTAINER_BACKGROUND_BRAND_ACCENT: "#3D2414",
    T.CONTAINER_BACKGROUND_INVERSE: "#F2F1F0",
    T.CONTAINER_BACKGROUND_PRIMARY: "#1C1B1A",
    T.CONTAINER_BACKGROUND_SECONDARY: "#262524",
    T.CONTAINER_BACKGROUND_BRAND: "#FF7A1A",
    T.BACKGROUND_SURFACE_COLOR_SECONDARY: "#262524",
    T.TEXT_ON_SURFACE_COLOR_PRIMARY: "#F2F1F0",
    T.TEXT_ON_SURFACE_COLOR_SECONDARY: "#C9C6C4",
    T.TEXT_ON_SURFACE_COLOR_TERTIARY: "#9C9896",
    T.TEXT_ON_SURFACE_COLOR_INVERSE: "#252524",
    T.TEXT_ON_SURFACE_COLOR_DANGER: "#FF6B5E",
    T.TEXT_ON_SURFACE_COLOR_ERROR: "#FF6B5E",
    T.TEXT_ON_SURFACE_COLOR_SUCCESS: "#7BC29C",
    T.ICON_COLOR_SECONDARY: "#C9C6C4",
    T.ICON_COLOR_BRAND: "#FF7A1A",
    T.BORDER_COLOR_PRIMARY: "#F2F1F0",
    T.INPUT_BORDER_DEFAULT: "#5C5957",
    T.INPUT_BORDER_FOCUS: "#F2F1F0",
    T.INPUT_BORDER_ERROR: "#FF6B5E",
    T.INPUT_BORDER_SUCCESS: "#7BC29C",
    T.INPUT_BORDER_INACTIVE: "#3A3836",
    T.BADGE_INFO_ACCENT: "#8C97D1",
    T.BADGE_SUCCESS_ACCENT: "#7BC29C",
    T.BADGE_WARNING_ACCENT: "#F9E270",
    T.BADGE_DANGER_ACCENT: "#FF6B5E",
    T.FEEDBACK_BACKGROUND_INFORMATIONAL_ACCENT1: "#23283F",
    T.FEEDBACK_BACKGROUND_SUCCESS_ACCENT1: "#1E3329",
    T.FEEDBACK_BACKGROUND_WARNING_ACCENT1: "#3D3514",
    T.FEEDBACK_BACKGROUND_ERROR_ACCENT1: "#3F1D1A",
    T.BORDER_RADIUS_XL: 8.0,
    T.BORDER_RADIUS_FULL: 999.0,
}


__all__ = ["LIGHT_TOKENS", "DARK_TOKENS"]
