"""Typed models for frame encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

MAX_DIMENSION = 0xFFFF


class EncodingFailure(RuntimeError):
    """Output cannot be opened or a frame cannot be written."""


class Disposal(IntEnum):
    NONE = 0
    DO_NOT_DISPOSE = 1
    RESTORE_TO_BACKGROUND = 2
    RESTORE_TO_PREVIOUS = 3


@dataclass(frozen=True)
class LoopMode:
    """NETSCAPE2.0 loop count, 0 meaning forever."""

    repeat: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.repeat <= MAX_DIMENSION:
            raise ValueError("loop count must be in range 0..65535")

    @classmethod
    def infinite(cls) -> "LoopMode":
        return cls(0)

    @classmethod
    def count(cls, n: int) -> "LoopMode":
        if n < 1:
            raise ValueError("finite loop count must be >= 1")
        return cls(n)

    @property
    def is_infinite(self) -> bool:
        return self.repeat == 0


@dataclass(frozen=True)
class Frame:
    width: int
    height: int
    pixel_indices: bytes
    left: int = 0
    top: int = 0
    delay_cs: int = 0
    transparent_index: int | None = None
    disposal: Disposal = Disposal.NONE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        if len(self.pixel_indices) != self.width * self.height:
            raise ValueError("pixel_indices length must be width * height")
        if self.left < 0 or self.top < 0:
            raise ValueError("left and top must be >= 0")
        if not 0 <= self.delay_cs <= MAX_DIMENSION:
            raise ValueError("delay_cs must be in range 0..65535")
        if self.transparent_index is not None and not 0 <= self.transparent_index <= 255:
            raise ValueError("transparent_index must be in range 0..255")


@dataclass
class WriteStats:
    path: Path | None = None
    frames_written: int = 0
    bytes_written: int = 0
    duration_s: float = 0.0
