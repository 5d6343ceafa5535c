"""Shared fixtures: every test starts from default settings and silent logging."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from toolxml.foundation.config import clear_settings_cache
from toolxml.observability import configure_logging
from toolxml.schema import clear_schema_cache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop TOOLXML_* overrides from the environment and reset cached state."""
    for key in [k for k in os.environ if k.startswith("TOOLXML_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))  # no stray .env
    clear_settings_cache()
    clear_schema_cache()
    configure_logging("none")
    yield
    clear_settings_cache()
    clear_schema_cache()
    configure_logging("none")
