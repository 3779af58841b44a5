"""
Metadata identifying which game a record belongs to.

Either only the date is known (PartialMeta), or both the date and the game number (FullMeta).
Bowlers often play multiple games per session, the game number tells them apart.
"""

import datetime as dt
from dataclasses import dataclass

from src.bowling.clock import Clock, local_today
from src.core.exceptions import GameMetaError, GameNumberUnavailableError
from src.core.logging import get_logger

logger = get_logger(__name__)

# Game number reported when none has been assigned yet
UNASSIGNED_GAME_NUMBER = 0


@dataclass
class PartialMeta:
    date: dt.date

    @property
    def game_number(self) -> int:
        return UNASSIGNED_GAME_NUMBER

    @game_number.setter
    def game_number(self, value: int) -> None:
        logger.warning("Refused to set game number %s on %r", value, self)
        raise GameNumberUnavailableError("game number unavailable for Partial info")


@dataclass
class FullMeta:
    date: dt.date
    game_number: int


GameMeta = PartialMeta | FullMeta


# --- CONSTRUCTORS ---
def build_today_partial(clock: Clock = local_today) -> PartialMeta:
    return PartialMeta(clock())


def build_today_full(clock: Clock = local_today) -> FullMeta:
    """Today's date, and the first game of the day"""
    return FullMeta(clock(), 1)


def build_from_date(date: dt.date) -> PartialMeta:
    return PartialMeta(date)


def build_from_date_and_game(date: dt.date, game_number: int) -> FullMeta:
    return FullMeta(date, game_number)


def as_game_meta(value: GameMeta | dt.date) -> GameMeta:
    """
    Convert whatever the caller has into GameMeta.
    ----

    * A bare date only tells us the date --> PartialMeta
    * GameMeta is passed through as is
    """
    if isinstance(value, (PartialMeta, FullMeta)):
        return value
    # NOTE: datetime is a subclass of date, but carries a time of day we do not want to store
    if isinstance(value, dt.datetime):
        raise GameMetaError(f"Expected a calendar date without a time, got {value!r}")
    if isinstance(value, dt.date):
        return PartialMeta(value)
    raise GameMetaError(f"Cannot interpret {value!r} as game metadata.")
