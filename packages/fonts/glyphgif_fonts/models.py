"""Typed glyph models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphBitmap:
    width: int
    height: int
    coverage: bytes
    bearing_x: int = 0
    bearing_y: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be >= 0")
        if len(self.coverage) != self.width * self.height:
            raise ValueError("coverage length must be width * height")

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0
