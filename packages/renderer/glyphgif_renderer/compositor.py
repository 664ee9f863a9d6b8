"""Centers glyph coverage masks inside fixed-size canvas frames."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from .models import GlyphRecord, ScriptModel

BACKGROUND_INDEX = 0


@dataclass(frozen=True)
class CompositedFrame:
    width: int
    height: int
    pixels: bytes
    left: int = 0
    top: int = 0

    def pixel_at(self, x: int, y: int) -> int:
        index = canvas_index(x, y, self.width, self.height)
        if index is None:
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} canvas")
        return self.pixels[index]


def canvas_index(x: int, y: int, width: int, height: int) -> int | None:
    """Row-major index of ``(x, y)``, or None when the point is off canvas."""
    if 0 <= x < width and 0 <= y < height:
        return y * width + x
    return None


def centering_offset(glyph_size: tuple[int, int], canvas_size: tuple[int, int]) -> tuple[int, int]:
    # Floor division: odd leftovers put the extra pixel on the right/bottom.
    return (canvas_size[0] - glyph_size[0]) // 2, (canvas_size[1] - glyph_size[1]) // 2


def _clip_span(offset: int, length: int, limit: int) -> tuple[int, int, int, int] | None:
    dst_start = max(offset, 0)
    dst_end = min(offset + length, limit)
    if dst_end <= dst_start:
        return None
    src_start = dst_start - offset
    return src_start, src_start + (dst_end - dst_start), dst_start, dst_end


def composite(glyph: GlyphRecord, canvas_width: int, canvas_height: int) -> CompositedFrame:
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError("canvas must have positive area")

    canvas = np.full((canvas_height, canvas_width), BACKGROUND_INDEX, dtype=np.uint8)
    off_x, off_y = centering_offset((glyph.width, glyph.height), (canvas_width, canvas_height))

    cols = _clip_span(off_x, glyph.width, canvas_width)
    rows = _clip_span(off_y, glyph.height, canvas_height)
    if cols is not None and rows is not None:
        mask = np.frombuffer(glyph.coverage, dtype=np.uint8).reshape((glyph.height, glyph.width))
        sx0, sx1, dx0, dx1 = cols
        sy0, sy1, dy0, dy1 = rows
        canvas[dy0:dy1, dx0:dx1] = mask[sy0:sy1, sx0:sx1]

    return CompositedFrame(width=canvas_width, height=canvas_height, pixels=canvas.tobytes())


def composite_all(script: ScriptModel, workers: int | None = None) -> list[CompositedFrame]:
    width, height = script.canvas_size
    if not workers or workers <= 1:
        return [composite(g, width, height) for g in script.glyphs]
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="glyphgif-composite") as pool:
        return list(pool.map(lambda g: composite(g, width, height), script.glyphs))
