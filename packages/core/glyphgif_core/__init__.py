"""Core services for configuration, logging, and animation assembly."""

from .animation import PIPELINE_ERRORS, AnimationWriter, FramePolicy, load_glyph_source, render_text
from .config import (
    AnimationConfig,
    AppConfig,
    LoggingConfig,
    RenderConfig,
    load_config,
    normalize_config,
    save_config,
)

__all__ = [
    "AnimationConfig",
    "AnimationWriter",
    "AppConfig",
    "FramePolicy",
    "LoggingConfig",
    "PIPELINE_ERRORS",
    "RenderConfig",
    "load_config",
    "load_glyph_source",
    "normalize_config",
    "render_text",
    "save_config",
]
