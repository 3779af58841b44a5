"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from datetime import date

import pytest

from src.bowling.clock import Clock
from src.core.config import get_settings

# The date used throughout the tests whenever 'a game played on some day' is needed
GAME_DAY = date(2023, 2, 5)


@pytest.fixture
def game_day() -> date:
    return GAME_DAY


@pytest.fixture
def fixed_clock() -> Clock:
    """Calendar that always answers GAME_DAY, so 'today' constructors become deterministic."""
    return lambda: GAME_DAY


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached. Make sure environment changes in one test do not leak into the next."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
