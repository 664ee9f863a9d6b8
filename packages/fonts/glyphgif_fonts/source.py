"""Glyph sources backed by Pillow's FreeType bindings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from .errors import FontLoadFailure, RasterizationFailure
from .models import GlyphBitmap

_log = logging.getLogger("glyphgif.fonts")


class GlyphSource(Protocol):
    def rasterize(self, character: str) -> GlyphBitmap: ...


class PillowGlyphSource:
    """Rasterizes single characters into "L" coverage masks.

    Bitmaps are cropped to the ink box of the glyph. Bearings are measured from
    the pen position on the baseline: ``bearing_x`` is the left edge of the ink
    box, ``bearing_y`` the distance from the baseline up to its top edge.
    """

    def __init__(self, font: ImageFont.FreeTypeFont) -> None:
        self.font = font

    @classmethod
    def from_path(cls, font_path: str | Path | None, size: int = 28) -> "PillowGlyphSource":
        if font_path is None:
            # Pillow ships a FreeType sans-serif for load_default(size=...).
            return cls(ImageFont.load_default(size=size))
        try:
            font = ImageFont.truetype(str(font_path), size)
        except OSError as exc:
            raise FontLoadFailure(f"cannot load font {font_path}: {exc}") from exc
        _log.debug("font loaded", extra={"event": "font_loaded", "path": str(font_path), "size": size})
        return cls(font)

    def rasterize(self, character: str) -> GlyphBitmap:
        if len(character) != 1:
            raise RasterizationFailure(character, "expected a single character")
        try:
            left, top, right, bottom = (int(v) for v in self.font.getbbox(character, anchor="ls"))
            width = max(right - left, 0)
            height = max(bottom - top, 0)
            if width == 0 or height == 0:
                return GlyphBitmap(width=width, height=height, coverage=b"", bearing_x=left, bearing_y=-top)

            mask = Image.new("L", (width, height), 0)
            ImageDraw.Draw(mask).text((-left, -top), character, font=self.font, fill=255, anchor="ls")
            coverage = mask.tobytes()
        except (OSError, ValueError, TypeError) as exc:
            raise RasterizationFailure(character, str(exc)) from exc

        return GlyphBitmap(width=width, height=height, coverage=coverage, bearing_x=left, bearing_y=-top)
