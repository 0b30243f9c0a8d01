"""Shared pytest fixtures for fair-range tests.

Provides configuration objects reused across test modules.
Configs are built with ``_env_file=None`` so a stray ``.env`` in the
working directory cannot leak into tests.
"""

from __future__ import annotations

import os

import pytest

from fair_range.config import FairRangeConfig


@pytest.fixture(autouse=True)
def _clear_fair_range_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove FAIR_RANGE_* variables so defaults are predictable."""
    for key in list(os.environ):
        if key.startswith("FAIR_RANGE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def default_config() -> FairRangeConfig:
    """Return a FairRangeConfig with all default values."""
    return FairRangeConfig(_env_file=None)  # type: ignore[call-arg]

