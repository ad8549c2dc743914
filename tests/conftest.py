from __future__ import annotations

import os

import pytest

from matgraph.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and any MATGRAPH_* env vars between tests."""
    for key in list(os.environ):
        if key.startswith("MATGRAPH_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
