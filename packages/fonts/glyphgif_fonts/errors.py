"""Font engine failures."""

from __future__ import annotations


class FontLoadFailure(OSError):
    """Font file is missing, unreadable or not a font."""


class RasterizationFailure(RuntimeError):
    """The font engine could not produce a bitmap for a character."""

    def __init__(self, character: str, reason: str) -> None:
        super().__init__(f"cannot rasterize {character!r}: {reason}")
        self.character = character
        self.reason = reason
