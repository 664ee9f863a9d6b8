"""Persistent render settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from glyphgif_renderer import WHITE, format_color


CONFIG_VERSION = 1
HOME_ENV = "GLYPHGIF_HOME"


@dataclass
class RenderConfig:
    font_path: str | None = None
    font_size: int = 28
    foreground: str = format_color(WHITE)
    background: str = format_color(WHITE)
    workers: int = 1


@dataclass
class AnimationConfig:
    delay_cs: int = 30
    transparent_index: int = 0
    loop: int = 0
    output_path: str = "animation.gif"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    override = os.environ.get(HOME_ENV, "").strip()
    if override:
        return Path(override)
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "GlyphGif"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "GlyphGif"
    return Path.home() / ".config" / "glyphgif"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _clamp(value: Any, low: int, high: int, default: int) -> int:
    try:
        return max(low, min(high, int(value)))
    except (TypeError, ValueError):
        return default


def _normalize_render(cfg: AppConfig) -> None:
    cfg.render.font_size = _clamp(cfg.render.font_size, 4, 512, RenderConfig.font_size)
    cfg.render.workers = _clamp(cfg.render.workers, 1, 64, RenderConfig.workers)
    if cfg.render.font_path is not None:
        cfg.render.font_path = str(cfg.render.font_path) or None


def _normalize_animation(cfg: AppConfig) -> None:
    cfg.animation.delay_cs = _clamp(cfg.animation.delay_cs, 0, 0xFFFF, AnimationConfig.delay_cs)
    cfg.animation.loop = _clamp(cfg.animation.loop, 0, 0xFFFF, AnimationConfig.loop)
    cfg.animation.transparent_index = _clamp(
        cfg.animation.transparent_index, 0, 255, AnimationConfig.transparent_index
    )
    if not cfg.animation.output_path:
        cfg.animation.output_path = AnimationConfig.output_path


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if isinstance(logging.getLevelName(level), int) else "INFO"
    cfg.logging.keep_log_files = _clamp(cfg.logging.keep_log_files, 2, 365, LoggingConfig.keep_log_files)


def normalize_config(cfg: AppConfig) -> AppConfig:
    _normalize_render(cfg)
    _normalize_animation(cfg)
    _normalize_logging(cfg)
    return cfg


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        render=_merge(RenderConfig, raw.get("render", {})),
        animation=_merge(AnimationConfig, raw.get("animation", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    return normalize_config(cfg)


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
