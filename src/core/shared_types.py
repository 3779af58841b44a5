"""
Type definitions used across layers
"""

from enum import StrEnum


class FrameKind(StrEnum):
    UNINIT = "uninit"
    TWO = "two"
    THREE = "three"


# Number of throws recorded by each kind of frame
THROWS_PER_KIND: dict[FrameKind, int] = {
    FrameKind.UNINIT: 0,
    FrameKind.TWO: 2,
    FrameKind.THREE: 3,
}
