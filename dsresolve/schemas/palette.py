from __future__ import annotations

import re
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_HEX_PATTERN = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

PaletteValue = Union[str, float]


def _normalize_values(values: dict[str, PaletteValue]) -> dict[str, PaletteValue]:
    normalized: dict[str, PaletteValue] = {}
    for name, value in values.items():
        if isinstance(value, str):
            if not _HEX_PATTERN.match(value.strip()):
                raise ValueError(f"Token '{name}' must be #RRGGBB or #RRGGBBAA, got {value!r}")
            normalized[name] = value.strip().upper()
        else:
            normalized[name] = float(value)
    return normalized


class PaletteDocument(BaseModel):
    """External palette file: token name to value, per color scheme."""

    model_config = ConfigDict(extra="forbid")

    name: str = "custom"
    light: dict[str, PaletteValue] = Field(default_factory=dict)
    dark: dict[str, PaletteValue] = Field(default_factory=dict)

    @field_validator("light", "dark")
    @classmethod
    def _check_values(cls, values: dict[str, PaletteValue]) -> dict[str, PaletteValue]:
        return _normalize_values(values)


__all__ = ["PaletteDocument", "PaletteValue"]
