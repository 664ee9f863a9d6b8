"""Color string parsing."""

from __future__ import annotations

import re

from .errors import ColorParseError
from .models import RGB

_COLOR_RE = re.compile(r"0x([0-9a-f]{6})", re.IGNORECASE)

WHITE: RGB = (255, 255, 255)


def parse_color(value: str) -> RGB:
    match = _COLOR_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ColorParseError(f"invalid color {value!r}, expected 0xRRGGBB")
    digits = match.group(1)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


def format_color(color: RGB) -> str:
    r, g, b = color
    return f"0x{r:02X}{g:02X}{b:02X}"
