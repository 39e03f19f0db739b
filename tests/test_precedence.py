from __future__ import annotations

import pytest

from dsresolve.exceptions import TokenTableError
from dsresolve.schemas.tokens import ColorScheme, TokenName
from dsresolve.services.precedence import (
    ANY,
    PRECEDENCE,
    StateCategory,
    TokenTable,
    collapse_flags,
    describe_tables,
    first_by_precedence,
    referenced_tokens,
    resolve_tokens,
)


def test_precedence_order() -> None:
    assert PRECEDENCE[0] is StateCategory.DISABLED
    assert PRECEDENCE[1] is StateCategory.LOADING
    assert PRECEDENCE[-1] is StateCategory.DEFAULT
    assert set(PRECEDENCE) == set(StateCategory)


def test_collapse_flags_disabled_wins() -> None:
    assert collapse_flags(disabled=True, loading=True, selected=True) is StateCategory.DISABLED
    assert collapse_flags(loading=True, selected=True) is StateCategory.LOADING
    assert collapse_flags(selected=True) is StateCategory.SELECTED
    assert collapse_flags() is StateCategory.DEFAULT


def test_first_by_precedence() -> None:
    assert first_by_precedence([StateCategory.FOCUSED, StateCategory.ERROR]) is StateCategory.ERROR
    assert first_by_precedence([StateCategory.SELECTED, StateCategory.DISABLED]) is StateCategory.DISABLED
    assert first_by_precedence([]) is StateCategory.DEFAULT


def test_table_requires_default_in_every_row() -> None:
    with pytest.raises(TokenTableError) as exc_info:
        TokenTable("broken", {"a": {StateCategory.DISABLED: TokenName.CLEAR}})
    assert exc_info.value.table == "broken"


def test_lookup_falls_back_to_row_default() -> None:
    table = TokenTable(
        "demo",
        {"a": {StateCategory.DEFAULT: TokenName.WHITE, StateCategory.DISABLED: TokenName.CLEAR}},
    )
    assert table.lookup("a", StateCategory.SELECTED) is TokenName.WHITE
    assert table.lookup("a", StateCategory.DISABLED) is TokenName.CLEAR


def test_lookup_uses_any_row() -> None:
    table = TokenTable(
        "demo",
        {
            "a": {StateCategory.DEFAULT: TokenName.WHITE},
            ANY: {StateCategory.DEFAULT: TokenName.CLEAR},
        },
    )
    assert table.lookup("b", StateCategory.DEFAULT) is TokenName.CLEAR


def test_lookup_without_row_raises() -> None:
    table = TokenTable("demo", {"a": {StateCategory.DEFAULT: TokenName.WHITE}})
    with pytest.raises(TokenTableError):
        table.lookup("b", StateCategory.DEFAULT)


def test_table_rows_are_frozen() -> None:
    rows = {"a": {StateCategory.DEFAULT: TokenName.WHITE}}
    table = TokenTable("demo", rows)
    rows["a"][StateCategory.DEFAULT] = TokenName.CLEAR
    assert table.lookup("a", StateCategory.DEFAULT) is TokenName.WHITE
    with pytest.raises(TypeError):
        table.rows["b"] = {}  # type: ignore[index]


def test_constant_table() -> None:
    table = TokenTable.constant("demo", TokenName.WHITE)
    for state in StateCategory:
        assert table.lookup("anything", state) is TokenName.WHITE


def test_resolve_tokens_with_field_keys(palette) -> None:
    tables = {
        "background": TokenTable("bg", {("x", True): {StateCategory.DEFAULT: TokenName.WHITE}}),
        "text": TokenTable("text", {"x": {StateCategory.DEFAULT: TokenName.TEXT_ON_SURFACE_COLOR_PRIMARY}}),
    }
    resolved = resolve_tokens(
        tables,
        "x",
        StateCategory.DEFAULT,
        ColorScheme.LIGHT,
        palette,
        field_keys={"background": ("x", True)},
    )
    assert resolved["background"].name is TokenName.WHITE
    assert resolved["text"].value == "#252524"


def test_referenced_tokens_collects_all_rows() -> None:
    tables = [
        TokenTable("a", {"x": {StateCategory.DEFAULT: TokenName.WHITE, StateCategory.DISABLED: TokenName.CLEAR}}),
        TokenTable.constant("b", TokenName.BORDER_RADIUS_XL),
    ]
    assert referenced_tokens(tables) == {TokenName.WHITE, TokenName.CLEAR, TokenName.BORDER_RADIUS_XL}


def test_describe_tables_labels_tuple_keys() -> None:
    tables = {"bg": TokenTable("bg", {(ColorScheme.LIGHT, True): {StateCategory.DEFAULT: TokenName.WHITE}})}
    assert describe_tables(tables) == {"bg": {"light:True": {"default": "white"}}}
