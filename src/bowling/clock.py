"""
The calendar used to date new games.

(placed in its own module so GameMeta and Game share it, and tests can hand in a fixed date instead)
"""

from datetime import date
from typing import Callable

Clock = Callable[[], date]


def local_today() -> date:
    """Current local date. No time component, never cached."""
    return date.today()
