"""Script model construction from text and a glyph source."""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable

from glyphgif_fonts import GlyphBitmap, GlyphSource

from .errors import EmptyInputError
from .models import EMPTY_COVERAGE, GlyphRecord, ScriptModel

_log = logging.getLogger("glyphgif.renderer")


def to_record(character: str, bitmap: GlyphBitmap) -> GlyphRecord:
    # Zero-area glyphs (spaces) still need a frame with positive area.
    if bitmap.is_empty:
        return GlyphRecord(
            character=character,
            width=1,
            height=1,
            coverage=EMPTY_COVERAGE,
            bearing_x=bitmap.bearing_x,
            bearing_y=bitmap.bearing_y,
        )
    return GlyphRecord(
        character=character,
        width=bitmap.width,
        height=bitmap.height,
        coverage=bytes(bitmap.coverage),
        bearing_x=bitmap.bearing_x,
        bearing_y=bitmap.bearing_y,
    )


def canvas_size(glyphs: Iterable[GlyphRecord]) -> tuple[int, int]:
    return reduce(lambda acc, g: (max(acc[0], g.width), max(acc[1], g.height)), glyphs, (0, 0))


def build_script(text: str, source: GlyphSource) -> ScriptModel:
    """Rasterize every character of ``text`` in order.

    One record is produced per character, so the frame count always equals
    ``len(text)``. Rasterization errors propagate unchanged.
    """
    if not text:
        raise EmptyInputError("text must contain at least one character")

    glyphs: list[GlyphRecord] = []
    for character in text:
        record = to_record(character, source.rasterize(character))
        _log.debug(
            f"glyph {character!r} {record.width}x{record.height} bearing=({record.bearing_x}, {record.bearing_y})",
            extra={"event": "glyph_rasterized", "character": character},
        )
        glyphs.append(record)

    width, height = canvas_size(glyphs)
    _log.info(f"canvas {width}x{height} for {len(glyphs)} glyphs", extra={"event": "canvas_frozen"})
    return ScriptModel(glyphs=tuple(glyphs), canvas_width=width, canvas_height=height)
