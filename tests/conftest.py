# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest

from modelentities.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Ensure each test reads settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
