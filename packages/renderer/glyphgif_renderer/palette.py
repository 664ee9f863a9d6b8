"""Two-color coverage ramp palettes."""

from __future__ import annotations

from .models import RGB, Palette

PALETTE_SIZE = 256
_MAX_INDEX = PALETTE_SIZE - 1


def _validate(color: RGB, name: str) -> RGB:
    if len(color) != 3:
        raise ValueError(f"{name} must be an RGB triple")
    r, g, b = (int(c) for c in color)
    if min(r, g, b) < 0 or max(r, g, b) > 255:
        raise ValueError(f"{name} channels must be in range 0..255")
    return r, g, b


def build_palette(fg: RGB, bg: RGB) -> Palette:
    """Linear ramp from ``bg`` at index 0 to ``fg`` at index 255.

    A coverage byte is used as the palette index directly. Integer division
    keeps the ramp bit-identical across runs and makes both endpoints exact.
    """
    fg = _validate(fg, "foreground")
    bg = _validate(bg, "background")
    entries = tuple(
        tuple((f * i + b * (_MAX_INDEX - i)) // _MAX_INDEX for f, b in zip(fg, bg))
        for i in range(PALETTE_SIZE)
    )
    return Palette(entries=entries)  # type: ignore[arg-type]
