"""
Boundary layer data model(s).

A Game record can be sent to/received from other layers using the model defined here
(Decouples the domain objects from whatever format a caller needs to store or display a game in)
"""

import datetime as dt

from pydantic import BaseModel, Field, field_validator

from src.core.shared_types import THROWS_PER_KIND

# Type alias to make GameModel easier to read
Throws = list[int]

MAX_FRAMES = 10
ALLOWED_THROW_COUNTS: frozenset[int] = frozenset(THROWS_PER_KIND.values())


class GameModel(BaseModel):
    """Transport-safe representation of a bowling game record."""

    date: dt.date
    game_number: int = Field(ge=0)
    frames: list[Throws] = Field(default_factory=list)

    @field_validator("frames")
    @classmethod
    def validate_frames(cls, value: list[Throws]) -> list[Throws]:
        if len(value) > MAX_FRAMES:
            raise ValueError(
                f"A game holds at most {MAX_FRAMES} frames, got {len(value)}."
            )

        # NOTE: pin counts are not range checked, only the number of throws per frame
        for idx, throws in enumerate(value, start=1):
            if len(throws) not in ALLOWED_THROW_COUNTS:
                raise ValueError(
                    f"Frame {idx} has {len(throws)} throws. Allowed: {sorted(ALLOWED_THROW_COUNTS)}."
                )
        return value
