from __future__ import annotations

from collections.abc import Generator

import pytest

from decimal_formatting.core.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()
