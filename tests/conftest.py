"""Shared fixtures for the diamond estimator tests."""

from __future__ import annotations

import pytest

from diamond_estimator.pricing import DiamondDescription
from diamond_estimator.settings import ENV_PREFIX, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop estimator env overrides and the cached settings around every test."""

    for name in ("TITLE", "LOG_LEVEL", "CURRENCY_SYMBOL", "PORT", "ADDRESS"):
        monkeypatch.delenv(ENV_PREFIX + name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reference_diamond() -> DiamondDescription:
    """The form's initial stone: 1 ct Ideal / D / IF, depth 61.5%, table 56%."""

    return DiamondDescription(carat=1.0, cut="Ideal", color="D", clarity="IF", depth=61.5, table=56.0)


@pytest.fixture
def baseline_diamond() -> DiamondDescription:
    return DiamondDescription(carat=1.5, cut="Fair", color="J", clarity="I1", depth=62.0, table=58.0)
