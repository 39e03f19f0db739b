from __future__ import annotations

import json

from dsresolve.cli.showcase_cli import main
from dsresolve.config import get_settings
from dsresolve.schemas.tokens import TokenName
from dsresolve.services.palette_data import DARK_TOKENS, LIGHT_TOKENS


def test_matrix_for_one_family(capsys) -> None:
    assert main(["matrix", "--family", "tile", "--scheme", "dark"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert list(payload) == ["tile"]
    assert len(payload["tile"]) == 18
    assert {row["style"]["scheme"] for row in payload["tile"]} == {"dark"}


def test_matrix_uses_configured_scheme(monkeypatch, capsys) -> None:
    monkeypatch.setenv("DS_COLOR_SCHEME", "dark")
    from dsresolve.config import refresh_settings

    refresh_settings()
    assert main(["matrix", "--family", "callout"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["callout"][0]["style"]["scheme"] == "dark"


def test_matrix_for_all_families(capsys) -> None:
    assert main(["matrix"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert "mini_product_card" in payload
    assert "text_input_field" in payload


def test_validate_default_palette(capsys) -> None:
    assert main(["validate"]) == 0
    out = capsys.readouterr().out
    assert "Overall: PASS" in out
    assert "- dark: PASS" in out


def test_validate_incomplete_palette(palette_file, capsys) -> None:
    light = dict(LIGHT_TOKENS)
    del light[TokenName.BORDER_COLOR_PRIMARY]
    path = palette_file(light=light)
    assert main(["validate", "--palette", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Overall: FAIL" in out
    assert "missing borderColorPrimary" in out
    assert "- dark: PASS" in out


def test_validate_unreadable_palette(tmp_path, capsys) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[]", encoding="utf-8")
    assert main(["validate", "--palette", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Overall: FAIL" in out
    assert "error_type=palette_load" in out


def test_matrix_reports_unreadable_configured_palette(monkeypatch, tmp_path, capsys) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("DS_PALETTE_PATH", str(path))
    assert main(["matrix", "--family", "tile"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Palette: FAIL" in captured.err
    assert "error_type=palette_load" in captured.err


def test_matrix_rejects_incomplete_palette_flag(palette_file, capsys) -> None:
    dark = dict(DARK_TOKENS)
    del dark[TokenName.TEXT_ON_SURFACE_COLOR_TERTIARY]
    path = palette_file(dark=dark)
    assert main(["matrix", "--family", "tab", "--palette", str(path)]) == 1
    assert "dark.textOnSurfaceColorTertiary" in capsys.readouterr().err


def test_matrix_palette_flag_replaces_default(palette_file, capsys) -> None:
    light = dict(LIGHT_TOKENS)
    light[TokenName.CONTAINER_BACKGROUND_PRIMARY] = "#123456"
    path = palette_file(light=light)
    assert main(["matrix", "--family", "filter_panel", "--palette", str(path), "--scheme", "light"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["filter_panel"][0]["style"]["background_color"]["value"] == "#123456"


def test_scheme_flag_is_applied_as_runtime_override(capsys) -> None:
    assert main(["matrix", "--family", "callout", "--scheme", "dark"]) == 0
    capsys.readouterr()
    assert get_settings().color_scheme == "dark"
    assert main(["matrix", "--family", "callout"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["callout"][0]["style"]["scheme"] == "light"


def test_tables_subcommand(capsys) -> None:
    assert main(["tables", "icon_button"]) == 0
    tables = json.loads(capsys.readouterr().out)
    assert tables["background"]["orangeFilled"] == {
        "default": "buttonBackgroundBrandFilledDefault",
        "loading": "buttonBackgroundBrandFilledInactive",
        "disabled": "buttonBackgroundBrandFilledInactive",
    }
    assert "gradientFilled" not in tables["background"]
    assert tables["corner_radius"] == {"*": {"default": "borderRadiusFull"}}
