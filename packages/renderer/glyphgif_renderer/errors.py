"""Renderer input errors."""

from __future__ import annotations


class ColorParseError(ValueError):
    """Color string is not 0x followed by six hex digits."""


class EmptyInputError(ValueError):
    """Text has no characters, so there is nothing to animate."""
