from __future__ import annotations

import json
import logging

import pytest

from dsresolve.config import clear_runtime_overrides, refresh_settings
from dsresolve.services import palette as palette_module
from dsresolve.services.palette import default_palette
from dsresolve.services.palette_data import DARK_TOKENS, LIGHT_TOKENS

_ENV_KEYS = ("DS_COLOR_SCHEME", "DS_PALETTE_PATH", "DS_STRICT_PALETTE", "DS_LOG_LEVEL", "DS_LOG_DIR")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    clear_runtime_overrides()
    palette_module._configured_palette.cache_clear()
    settings = refresh_settings()
    yield settings
    clear_runtime_overrides()
    palette_module._configured_palette.cache_clear()
    refresh_settings()


@pytest.fixture(autouse=True)
def isolated_logger():
    logger = logging.getLogger("dsresolve")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.fixture()
def palette():
    return default_palette()


@pytest.fixture()
def palette_file(tmp_path):
    def _write(light=None, dark=None, name="test-palette"):
        document = {
            "name": name,
            "light": {token.value: value for token, value in (light or LIGHT_TOKENS).items()},
            "dark": {token.value: value for token, value in (dark or DARK_TOKENS).items()},
        }
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
