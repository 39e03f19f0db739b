"""Structured JSON logging for dsresolve.

Palette loading, validation reports and resolutions are logged as single-line
JSON so that packaging problems show up clearly in CI output.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "data"):
            entry["data"] = record.data  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    log_dir: Path | None = None,
    level: int | str = logging.WARNING,
) -> logging.Logger:
    """Configure structured logging for the package.

    Args:
        log_dir: Directory for the JSON-lines log file. If None, logs to stderr only.
        level: Logging level, as a number or a level name.

    Returns:
        The root 'dsresolve' logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("dsresolve")
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = JSONFormatter()

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "dsresolve.jsonl", encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    # Stderr handler (only warnings+)
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    sh.setLevel(logging.WARNING)
    logger.addHandler(sh)

    return logger


def log_resolution(family: str, state: str, scheme: str) -> None:
    """Log a completed style resolution at debug level."""
    logger = logging.getLogger("dsresolve.resolve")
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "style_resolved",
        extra={"data": {
            "family": family,
            "state": state,
            "scheme": scheme,
        }},
    )


__all__ = ["JSONFormatter", "setup_logging", "log_resolution"]
