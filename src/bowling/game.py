"""
The Game record: when it was played, which game of that day it was, and the ten frames.

There is no game flow here. Any slot can be filled in at any moment, and nothing checks if the
frames make up a legal game (no turn order, no tenth-frame bonus rules, no bonus scoring).
"""

import datetime as dt
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Self

from src.bowling.clock import Clock, local_today
from src.bowling.frame import Frame, Uninit, as_frame
from src.bowling.game_meta import FullMeta, GameMeta, PartialMeta, as_game_meta
from src.core.exceptions import GameError
from src.core.logging import get_logger
from src.core.models import GameModel

logger = get_logger(__name__)

FRAMES_PER_GAME = 10

# A game whose number was not given is the first game of that day
DEFAULT_GAME_NUMBER = 1


def _empty_frames() -> list[Frame]:
    return [Uninit() for _ in range(FRAMES_PER_GAME)]


@dataclass
class Game:
    date: dt.date
    game_number: int = DEFAULT_GAME_NUMBER
    _frames: list[Frame] = field(default_factory=_empty_frames, repr=False)

    def __post_init__(self) -> None:
        # The game owns its slots: never share the caller's list
        self._frames = list(self._frames)
        if len(self._frames) != FRAMES_PER_GAME:
            raise GameError(
                f"A game has exactly {FRAMES_PER_GAME} frame slots, got {len(self._frames)}."
            )
        not_frames = [
            idx for idx, frame in enumerate(self._frames, start=1) if not isinstance(frame, Frame)
        ]
        if not_frames:
            raise GameError(f"Frame slots {not_frames} do not hold a Frame.")

    # --- CONSTRUCTORS ---
    @classmethod
    def build_today(cls, clock: Clock = local_today) -> Self:
        return cls.build_with_date(clock())

    @classmethod
    def build_with_date(cls, date: dt.date) -> Self:
        return cls._new(date, DEFAULT_GAME_NUMBER)

    @classmethod
    def _new(cls, date: dt.date, game_number: int) -> Self:
        """All slots start out uninitialised"""
        logger.debug("New game %s on %s", game_number, date)
        return cls(date, game_number)

    @classmethod
    def build_from_meta(cls, meta: GameMeta | dt.date) -> Self:
        """
        Copy the fields of the GameMeta into a new Game.
        NOTE: PartialMeta reports game number 0 (unassigned), but a Game always defaults to game 1.
        """
        match as_game_meta(meta):
            case FullMeta(date=date, game_number=game_number):
                return cls._new(date, game_number)
            case PartialMeta(date=date):
                return cls._new(date, DEFAULT_GAME_NUMBER)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Construct a Game from the transport model. Frames not sent along are left uninitialised."""
        frames = [Frame.from_throws(throws) for throws in model.frames]
        frames.extend(Uninit() for _ in range(FRAMES_PER_GAME - len(frames)))
        return cls(model.date, model.game_number, frames)

    def to_model(self) -> GameModel:
        """Encode into the transport model"""
        return GameModel(
            date=self.date,
            game_number=self.game_number,
            frames=[list(frame.throws) for frame in self._frames],
        )

    # --- FRAME ACCESS ---
    @property
    def frames(self) -> tuple[Frame, ...]:
        """Snapshot of all ten slots. Use set_frame to change them."""
        return tuple(self._frames)

    def frame(self, frame_num: int) -> Optional[Frame]:
        """The frame at (1-based) position frame_num, None if there is no such position."""
        if not self._is_frame_num(frame_num):
            return None
        return self._frames[frame_num - 1]

    def set_frame(self, frame_num: int, frame: Frame | Sequence[int]) -> Optional[Frame]:
        """
        Replace the frame at (1-based) position frame_num.
        ----

        Accepts a Frame, or the throws of one: (7, 2) --> TwoFrame, (10, 10, 10) --> ThreeFrame.
        Returns the frame that was replaced, or None when there is no such position (nothing is changed).
        """
        if not self._is_frame_num(frame_num):
            logger.warning(
                "Frame %s is not within 1-%s. Game on %s left unchanged.",
                frame_num,
                FRAMES_PER_GAME,
                self.date,
            )
            return None

        previous = self._frames[frame_num - 1]
        new_frame = as_frame(frame)
        self._frames[frame_num - 1] = new_frame
        logger.debug("Frame %s of game on %s set to a %s frame", frame_num, self.date, new_frame.kind)
        return previous

    @property
    def valid(self) -> bool:
        """Always True. Frame count, pin counts and tenth-frame rules are not checked."""
        return True

    # --- PRIVATE HELPERS ---
    def _is_frame_num(self, frame_num: int) -> bool:
        return 1 <= frame_num <= FRAMES_PER_GAME
