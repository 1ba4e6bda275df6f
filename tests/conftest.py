from __future__ import annotations

import os

import pytest

from assertcore import config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Run every test without ASSERTCORE_* variables and with no leftover config."""
    for key in list(os.environ):
        if key.startswith("ASSERTCORE_"):
            monkeypatch.delenv(key)

    yield

    for path in ("render", "report", config.ROOT_PATH):
        config.set(None, path)
