"""Renderer package for glyph scripts, palettes, and frame composition."""

from .colors import WHITE, format_color, parse_color
from .compositor import CompositedFrame, canvas_index, centering_offset, composite, composite_all
from .errors import ColorParseError, EmptyInputError
from .models import GlyphRecord, Palette, ScriptModel
from .palette import build_palette
from .script import build_script, canvas_size

__all__ = [
    "ColorParseError",
    "CompositedFrame",
    "EmptyInputError",
    "GlyphRecord",
    "Palette",
    "ScriptModel",
    "WHITE",
    "build_palette",
    "build_script",
    "canvas_index",
    "canvas_size",
    "centering_offset",
    "composite",
    "composite_all",
    "format_color",
    "parse_color",
]
