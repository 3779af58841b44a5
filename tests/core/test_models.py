"""Unit tests for /src/core/models.py"""

from datetime import date

import pytest
from pydantic import ValidationError

from src.core.models import MAX_FRAMES, GameModel


def test_defaults_to_no_frames() -> None:
    model = GameModel(date=date(2023, 2, 5), game_number=1)
    assert model.frames == []


def test_parses_iso_dates() -> None:
    """Callers at the boundary will often only have a string"""
    model = GameModel(date="2023-02-05", game_number=2, frames=[[7, 3]])
    assert model.date == date(2023, 2, 5)


@pytest.mark.parametrize("frames", [[[]], [[1, 2]], [[1, 2, 3]], [[10, 0]] * MAX_FRAMES])
def test_valid_frames(frames: list[list[int]]) -> None:
    model = GameModel(date=date(2023, 2, 5), game_number=1, frames=frames)
    assert model.frames == frames


@pytest.mark.parametrize(
    "frames",
    [
        [[5]],  # single throw
        [[1, 2], [1, 2, 3, 4]],  # too many throws in the 2nd frame
        [[0, 0]] * (MAX_FRAMES + 1),  # too many frames
    ],
)
def test_invalid_frames(frames: list[list[int]]) -> None:
    with pytest.raises(ValidationError):
        GameModel(date=date(2023, 2, 5), game_number=1, frames=frames)


def test_negative_game_number() -> None:
    with pytest.raises(ValidationError):
        GameModel(date=date(2023, 2, 5), game_number=-1)


def test_pin_counts_are_not_range_checked() -> None:
    model = GameModel(date=date(2023, 2, 5), game_number=0, frames=[[11, 12]])
    assert model.frames == [[11, 12]]
