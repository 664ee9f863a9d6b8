"""Font package turning characters into 8-bit coverage bitmaps."""

from .errors import FontLoadFailure, RasterizationFailure
from .models import GlyphBitmap
from .source import GlyphSource, PillowGlyphSource

__all__ = [
    "FontLoadFailure",
    "GlyphBitmap",
    "GlyphSource",
    "PillowGlyphSource",
    "RasterizationFailure",
]
