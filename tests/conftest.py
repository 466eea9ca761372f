"""Shared pytest fixtures for the full wordmatch test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

_WORDMATCH_ENV_KEYS = (
    "WORDMATCH_OUTPUT_FORMAT",
    "WORDMATCH_BUILTIN_CONFUSABLES",
    "WORDMATCH_DECOMPOSE",
)


@pytest.fixture(autouse=True)
def _clear_wordmatch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer `WORDMATCH_*` variables from leaking into tests."""

    for key in _WORDMATCH_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes YAML text to a temporary config file."""

    def _write(text: str) -> Path:
        config_path = tmp_path / "wordmatch.yml"
        config_path.write_text(text.strip() + "\n", encoding="utf-8")
        return config_path

    return _write
