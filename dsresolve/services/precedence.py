"""Shared state precedence and token-table lookup.

Every component family resolves its colors through the same order:

    disabled -> loading -> (selected | error | success | focused) -> default

A family describes its colors as one ``TokenTable`` per output field. A table
row is keyed by whatever selects the row for that field (usually the variant,
sometimes a variant combined with an auxiliary flag) and maps state
categories to token names. A row only lists the categories that change the
field; any category missing from a row falls back to the row's ``DEFAULT``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Hashable, Iterable, Mapping

from ..exceptions import TokenTableError
from ..schemas.tokens import ColorScheme, TokenName, TokenRef

if TYPE_CHECKING:
    from .palette import TokenPalette


class StateCategory(str, Enum):
    DISABLED = "disabled"
    LOADING = "loading"
    SELECTED = "selected"
    ERROR = "error"
    SUCCESS = "success"
    FOCUSED = "focused"
    DEFAULT = "default"


PRECEDENCE: tuple[StateCategory, ...] = (
    StateCategory.DISABLED,
    StateCategory.LOADING,
    StateCategory.SELECTED,
    StateCategory.ERROR,
    StateCategory.SUCCESS,
    StateCategory.FOCUSED,
    StateCategory.DEFAULT,
)

# Row key matching any variant; used by tables that do not branch on variant.
ANY = "*"


class CategorizedState:
    """Mixin for per-family state enums whose values are category names."""

    @property
    def category(self) -> StateCategory:
        return StateCategory(self.value)  # type: ignore[attr-defined]


def collapse_flags(
    *,
    disabled: bool = False,
    loading: bool = False,
    selected: bool = False,
) -> StateCategory:
    """Collapse independent interaction flags into the single governing category."""
    flags = {
        StateCategory.DISABLED: disabled,
        StateCategory.LOADING: loading,
        StateCategory.SELECTED: selected,
    }
    return first_by_precedence(category for category, is_set in flags.items() if is_set)


def first_by_precedence(categories: Iterable[StateCategory]) -> StateCategory:
    present = set(categories)
    for category in PRECEDENCE:
        if category in present:
            return category
    return StateCategory.DEFAULT


def _freeze_rows(
    rows: Mapping[Hashable, Mapping[StateCategory, TokenName]],
) -> Mapping[Hashable, Mapping[StateCategory, TokenName]]:
    return MappingProxyType({key: MappingProxyType(dict(row)) for key, row in rows.items()})


@dataclass(frozen=True)
class TokenTable:
    name: str
    rows: Mapping[Hashable, Mapping[StateCategory, TokenName]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, row in self.rows.items():
            if StateCategory.DEFAULT not in row:
                raise TokenTableError(
                    f"Row {key!r} of table '{self.name}' has no default token",
                    table=self.name,
                )
        object.__setattr__(self, "rows", _freeze_rows(self.rows))

    @classmethod
    def constant(cls, name: str, token: TokenName) -> "TokenTable":
        return cls(name, {ANY: {StateCategory.DEFAULT: token}})

    def lookup(self, key: Hashable, state: StateCategory) -> TokenName:
        row = self.rows.get(key)
        if row is None:
            row = self.rows.get(ANY)
        if row is None:
            raise TokenTableError(f"Table '{self.name}' has no row for {key!r}", table=self.name)
        token = row.get(state)
        if token is None:
            token = row[StateCategory.DEFAULT]
        return token

    def tokens(self) -> frozenset[TokenName]:
        return frozenset(token for row in self.rows.values() for token in row.values())


def resolve_tokens(
    tables: Mapping[str, TokenTable],
    key: Hashable,
    state: StateCategory,
    scheme: ColorScheme,
    palette: "TokenPalette",
    *,
    field_keys: Mapping[str, Hashable] | None = None,
) -> dict[str, TokenRef]:
    """Resolve every table for one descriptor.

    ``key`` selects the row for each table unless ``field_keys`` names a
    different key for that field.
    """
    overrides = field_keys or {}
    resolved: dict[str, TokenRef] = {}
    for field_name, table in tables.items():
        token = table.lookup(overrides.get(field_name, key), state)
        resolved[field_name] = palette.ref(token, scheme)
    return resolved


def referenced_tokens(tables: Iterable[TokenTable]) -> frozenset[TokenName]:
    names: set[TokenName] = set()
    for table in tables:
        names.update(table.tokens())
    return frozenset(names)


def _key_label(key: Hashable) -> str:
    if isinstance(key, tuple):
        return ":".join(_key_label(part) for part in key)
    return str(getattr(key, "value", key))


def describe_tables(tables: Mapping[str, TokenTable]) -> dict[str, Any]:
    return {
        field_name: {
            _key_label(key): {state.value: token.value for state, token in row.items()}
            for key, row in table.rows.items()
        }
        for field_name, table in tables.items()
    }


__all__ = [
    "ANY",
    "PRECEDENCE",
    "CategorizedState",
    "StateCategory",
    "TokenTable",
    "collapse_flags",
    "describe_tables",
    "first_by_precedence",
    "referenced_tokens",
    "resolve_tokens",
]
