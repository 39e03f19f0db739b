from __future__ import annotations

from typing import Any


class StyleResolutionError(Exception):
    def __init__(self, message: str, *, error_type: str) -> None:
        self.error_type = error_type
        super().__init__(message)

    def with_type(self) -> str:
        return f"{self.args[0]} (error_type={self.error_type})"


class UnknownTokenError(StyleResolutionError):
    """A palette has no value for a token name under the requested scheme.

    Shipped token tables only reference names present in both schemes of a
    valid palette, so this signals a packaging defect rather than bad input.
    """

    def __init__(self, token: Any, scheme: Any) -> None:
        self.token = token
        self.scheme = scheme
        name = getattr(token, "value", token)
        scheme_name = getattr(scheme, "value", scheme)
        super().__init__(
            f"Unknown token '{name}' for color scheme '{scheme_name}'",
            error_type="unknown_token",
        )


class TokenTableError(StyleResolutionError):
    def __init__(self, message: str, *, table: str) -> None:
        self.table = table
        super().__init__(message, error_type="token_table")


class PaletteLoadError(StyleResolutionError):
    def __init__(self, message: str, *, missing: list[str] | None = None) -> None:
        self.missing = list(missing or [])
        super().__init__(message, error_type="palette_load")


__all__ = [
    "StyleResolutionError",
    "UnknownTokenError",
    "TokenTableError",
    "PaletteLoadError",
]
