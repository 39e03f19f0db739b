from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from pydantic import ValidationError

from ..config import get_settings
from ..exceptions import PaletteLoadError, UnknownTokenError
from ..schemas.palette import PaletteDocument
from ..schemas.tokens import ColorScheme, TokenName, TokenRef, TokenValue
from .palette_data import DARK_TOKENS, LIGHT_TOKENS

logger = logging.getLogger(__name__)


class TokenPalette:
    """Read-only token values partitioned by color scheme."""

    def __init__(
        self,
        light: Mapping[TokenName, TokenValue],
        dark: Mapping[TokenName, TokenValue],
        *,
        name: str = "default",
    ) -> None:
        self._name = name
        self._schemes: Mapping[ColorScheme, Mapping[TokenName, TokenValue]] = MappingProxyType(
            {
                ColorScheme.LIGHT: MappingProxyType(dict(light)),
                ColorScheme.DARK: MappingProxyType(dict(dark)),
            }
        )

    @property
    def name(self) -> str:
        return self._name

    def lookup(self, name: TokenName, scheme: ColorScheme) -> TokenValue:
        values = self._schemes[ColorScheme(scheme)]
        try:
            return values[name]
        except KeyError:
            raise UnknownTokenError(name, scheme) from None

    def ref(self, name: TokenName, scheme: ColorScheme) -> TokenRef:
        return TokenRef(name=name, value=self.lookup(name, scheme))

    def names(self, scheme: ColorScheme) -> frozenset[TokenName]:
        return frozenset(self._schemes[ColorScheme(scheme)])

    def missing(self, required: Iterable[TokenName]) -> dict[ColorScheme, list[TokenName]]:
        """Required names absent from each scheme; schemes with nothing missing are omitted."""
        required = sorted(set(required), key=lambda token: token.value)
        report: dict[ColorScheme, list[TokenName]] = {}
        for scheme, values in self._schemes.items():
            absent = [token for token in required if token not in values]
            if absent:
                report[scheme] = absent
        return report

    @classmethod
    def from_document(cls, document: PaletteDocument) -> "TokenPalette":
        known = {token.value: token for token in TokenName}
        schemes: dict[str, dict[TokenName, TokenValue]] = {}
        for scheme_name in ("light", "dark"):
            values: dict[TokenName, TokenValue] = {}
            for key, value in getattr(document, scheme_name).items():
                token = known.get(key)
                if token is None:
                    logger.debug("Ignoring unreferenced palette token %s", key)
                    continue
                values[token] = value
            schemes[scheme_name] = values
        return cls(schemes["light"], schemes["dark"], name=document.name)

    def __repr__(self) -> str:
        return f"TokenPalette(name={self._name!r})"


@lru_cache(maxsize=1)
def default_palette() -> TokenPalette:
    return TokenPalette(LIGHT_TOKENS, DARK_TOKENS, name="default")


def load_palette(path: str | Path, *, required: Optional[Iterable[TokenName]] = None) -> TokenPalette:
    """Load a JSON palette file.

    When ``required`` is given, every listed token must be present in both
    schemes or ``PaletteLoadError`` is raised with the missing names.
    """
    palette_path = Path(path).expanduser()
    try:
        raw = json.loads(palette_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PaletteLoadError(f"Cannot read palette file {palette_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PaletteLoadError(f"Palette file {palette_path} is not valid JSON: {exc}") from exc

    try:
        document = PaletteDocument.model_validate(raw)
    except ValidationError as exc:
        raise PaletteLoadError(f"Palette file {palette_path} is malformed: {exc}") from exc

    palette = TokenPalette.from_document(document)
    logger.info("Loaded palette %s from %s", palette.name, palette_path)

    if required is not None:
        report = palette.missing(required)
        if report:
            missing = sorted({f"{scheme.value}.{token.value}" for scheme, tokens in report.items() for token in tokens})
            logger.warning(
                "Palette %s is missing tokens",
                palette.name,
                extra={"data": {"missing": missing}},
            )
            raise PaletteLoadError(
                f"Palette '{palette.name}' is missing {len(missing)} token(s): {', '.join(missing)}",
                missing=missing,
            )
    return palette


@lru_cache(maxsize=8)
def _configured_palette(path: Optional[str], strict: bool) -> TokenPalette:
    if not path:
        return default_palette()
    required = None
    if strict:
        from .catalog import all_referenced_tokens

        required = all_referenced_tokens()
    return load_palette(path, required=required)


def active_palette() -> TokenPalette:
    """Palette selected by settings: ``DS_PALETTE_PATH`` or the bundled default."""
    settings = get_settings()
    return _configured_palette(settings.palette_path, settings.strict_palette)


__all__ = ["TokenPalette", "active_palette", "default_palette", "load_palette"]
