"""
A single frame of a bowling game: the throws recorded within it.

A frame is either not played yet (Uninit), a regular frame of two throws (TwoFrame),
or a frame with a bonus throw (ThreeFrame, conventionally the tenth frame after a strike/spare).
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import FrameError
from src.core.shared_types import THROWS_PER_KIND, FrameKind

# All pins down
PIN_COUNT = 10

KIND_BY_THROW_COUNT: dict[int, FrameKind] = {count: kind for kind, count in THROWS_PER_KIND.items()}


class Frame(ABC):
    """
    Shared behavior of all kinds of frames.
    ----

    Every variant only has to say which throws it has recorded. The predicates below work on those throws.
    NOTE: pin counts are not checked to be within 0-10. A frame records what it is given.
    """

    @property
    @abstractmethod
    def throws(self) -> tuple[int, ...]:
        """Recorded throws, in order."""

    @property
    @abstractmethod
    def kind(self) -> FrameKind: ...

    @classmethod
    def from_throws(cls, throws: Sequence[int]) -> "Frame":
        """Convert a pair into a TwoFrame and a triple into a ThreeFrame (no throws at all: Uninit)."""
        # NOTE: a string is a sequence too, "73" must not turn into TwoFrame("7", "3")
        if isinstance(throws, (str, bytes)) or not all(
            isinstance(pins, int) and not isinstance(pins, bool) for pins in throws
        ):
            raise FrameError(f"Throws must be whole pin counts, got {throws!r}")

        match KIND_BY_THROW_COUNT.get(len(throws)):
            case FrameKind.UNINIT:
                return Uninit()
            case FrameKind.TWO:
                return TwoFrame(*throws)
            case FrameKind.THREE:
                return ThreeFrame(*throws)
            case None:
                raise FrameError(
                    f"A frame holds 2 or 3 throws, got {len(throws)}: {tuple(throws)!r}"
                )

    def throw(self, throw_num: int) -> Optional[int]:
        """Pin count of the n-th throw (1-based). None if this frame has no such throw."""
        if not 1 <= throw_num <= len(self.throws):
            return None
        return self.throws[throw_num - 1]

    @property
    def valid(self) -> bool:
        """Has any throws recorded (says nothing about the pin counts being legal)"""
        return bool(self.throws)

    @property
    def score(self) -> int:
        """Literal sum of the pins knocked down in this frame. Bonuses from the next frames are not added."""
        return sum(self.throws)

    @property
    def strike(self) -> bool:
        return self.throw(1) == PIN_COUNT

    @property
    def spare(self) -> bool:
        """
        First two throws clear all pins, without the first one being a strike.
        NOTE: only the first two throws are looked at, also in a frame with a bonus throw.
        """
        first, second = self.throw(1), self.throw(2)
        if first is None or second is None:
            return False
        return not self.strike and first + second == PIN_COUNT


@dataclass(frozen=True)
class Uninit(Frame):
    @property
    def throws(self) -> tuple[int, ...]:
        return ()

    @property
    def kind(self) -> FrameKind:
        return FrameKind.UNINIT


@dataclass(frozen=True)
class TwoFrame(Frame):
    first: int
    second: int

    @property
    def throws(self) -> tuple[int, ...]:
        return (self.first, self.second)

    @property
    def kind(self) -> FrameKind:
        return FrameKind.TWO


@dataclass(frozen=True)
class ThreeFrame(Frame):
    first: int
    second: int
    third: int

    @property
    def throws(self) -> tuple[int, ...]:
        return (self.first, self.second, self.third)

    @property
    def kind(self) -> FrameKind:
        return FrameKind.THREE


def build_uninit() -> Uninit:
    return Uninit()


def as_frame(value: Frame | Sequence[int]) -> Frame:
    """Frames are passed through, sequences of throws converted."""
    if isinstance(value, Frame):
        return value
    return Frame.from_throws(value)
