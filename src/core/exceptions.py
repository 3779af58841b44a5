"""Custom exceptions shared across layers"""


class BowlingError(Exception):
    """Base class for every error raised by the bowling domain."""


class GameMetaError(BowlingError):
    """Value cannot be interpreted as game metadata."""


class GameNumberUnavailableError(GameMetaError):
    """Only metadata that carries a game number can have it changed."""


class FrameError(BowlingError):
    """Sequence of throws does not fit any kind of frame."""


class GameError(BowlingError):
    """Game cannot be built from the given frame slots."""
