"""Shared pytest fixtures for amountkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

_AMOUNTKIT_ENV_VARS = (
    "AMOUNTKIT_VERBOSE",
    "AMOUNTKIT_LOG_JSON",
    "AMOUNTKIT_FORMAT__USE_SYMBOL",
    "AMOUNTKIT_FORMAT__GROUPING",
)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test in an empty working directory with no AMOUNTKIT_* env vars."""
    for name in _AMOUNTKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
