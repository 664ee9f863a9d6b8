"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]

EMPTY_COVERAGE = b"\x00"


@dataclass(frozen=True)
class GlyphRecord:
    character: str
    width: int
    height: int
    coverage: bytes
    bearing_x: int = 0
    bearing_y: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("glyph records must have positive area")
        if len(self.coverage) != self.width * self.height:
            raise ValueError("coverage length must be width * height")


@dataclass(frozen=True)
class ScriptModel:
    glyphs: tuple[GlyphRecord, ...]
    canvas_width: int
    canvas_height: int

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self):
        return iter(self.glyphs)

    @property
    def text(self) -> str:
        return "".join(g.character for g in self.glyphs)

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.canvas_width, self.canvas_height


@dataclass(frozen=True)
class Palette:
    entries: tuple[RGB, ...]

    def __post_init__(self) -> None:
        if len(self.entries) != 256:
            raise ValueError("palette must have 256 entries")

    def __getitem__(self, index: int) -> RGB:
        return self.entries[index]

    def __len__(self) -> int:
        return len(self.entries)

    def to_bytes(self) -> bytes:
        return bytes(channel for entry in self.entries for channel in entry)
