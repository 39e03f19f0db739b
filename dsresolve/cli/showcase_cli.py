from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import clear_runtime_overrides, get_settings, refresh_settings, update_runtime_overrides
from ..exceptions import PaletteLoadError
from ..log import setup_logging
from ..services.catalog import FAMILIES, PaletteReport, build_matrix, get_family, validate_palette
from ..services.palette import active_palette, load_palette


def _render_report(report: PaletteReport) -> str:
    overall = "PASS" if report.ok else "FAIL"
    lines = [f"Palette: {report.palette}", f"Overall: {overall} ({report.required} referenced tokens)"]
    for scheme in ("light", "dark"):
        missing = report.missing.get(scheme, [])
        status = "PASS" if not missing else "FAIL"
        lines.append(f"- {scheme}: {status}")
        for token in missing:
            lines.append(f"    missing {token}")
    return "\n".join(lines)


def _run_matrix(args: argparse.Namespace) -> int:
    update_runtime_overrides({"color_scheme": args.scheme, "palette_path": args.palette})
    settings = get_settings()
    try:
        palette = active_palette()
    except PaletteLoadError as exc:
        print(f"Palette: FAIL\n- {exc.with_type()}", file=sys.stderr)
        return 1
    names = [args.family] if args.family else list(FAMILIES)
    payload = {name: build_matrix(name, settings.color_scheme, palette) for name in names}
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _run_validate(args: argparse.Namespace) -> int:
    try:
        palette = load_palette(Path(args.palette)) if args.palette else active_palette()
    except PaletteLoadError as exc:
        print(f"Overall: FAIL\n- {exc.with_type()}")
        return 1
    report = validate_palette(palette)
    print(_render_report(report))
    return 0 if report.ok else 1


def _run_tables(args: argparse.Namespace) -> int:
    print(json.dumps(get_family(args.family).describe_tables(), ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect resolved component styles and validate palettes.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    families = sorted(FAMILIES)

    matrix = subparsers.add_parser("matrix", help="Print every resolved style of a family as JSON")
    matrix.add_argument("--family", choices=families, help="Component family (default: all)")
    matrix.add_argument("--scheme", choices=["light", "dark"], help="Color scheme (default: DS_COLOR_SCHEME)")
    matrix.add_argument("--palette", help="Path to a JSON palette file (default: DS_PALETTE_PATH)")
    matrix.set_defaults(handler=_run_matrix)

    validate = subparsers.add_parser("validate", help="Check a palette against every shipped token table")
    validate.add_argument("--palette", help="Path to a JSON palette file (default: configured palette)")
    validate.set_defaults(handler=_run_validate)

    tables = subparsers.add_parser("tables", help="Print a family's token tables as JSON")
    tables.add_argument("family", choices=families, help="Component family")
    tables.set_defaults(handler=_run_tables)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Each run starts from the environment; flags are applied as runtime overrides.
    clear_runtime_overrides()
    settings = refresh_settings()
    setup_logging(Path(settings.log_dir) if settings.log_dir else None, settings.log_level)
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
