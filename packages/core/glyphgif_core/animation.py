"""Animation assembly: frame timing, transparency, disposal, and emission order."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from glyphgif_encoder import Disposal, EncodingFailure, Frame, GifFrameWriter, LoopMode, WriteStats
from glyphgif_fonts import FontLoadFailure, GlyphSource, PillowGlyphSource, RasterizationFailure
from glyphgif_renderer import (
    ColorParseError,
    EmptyInputError,
    Palette,
    ScriptModel,
    build_palette,
    build_script,
    composite,
    composite_all,
    parse_color,
)

from .config import AppConfig
from .logging_setup import get_logger

PIPELINE_ERRORS: tuple[type[Exception], ...] = (
    ColorParseError,
    EmptyInputError,
    EncodingFailure,
    FontLoadFailure,
    RasterizationFailure,
)

WriterFactory = Callable[[], GifFrameWriter]


@dataclass(frozen=True)
class FramePolicy:
    delay_cs: int = 30
    transparent_index: int | None = 0
    disposal: Disposal = Disposal.RESTORE_TO_BACKGROUND
    loop: LoopMode = LoopMode.infinite()


class AnimationWriter:
    def __init__(
        self,
        policy: FramePolicy | None = None,
        workers: int = 1,
        writer_factory: WriterFactory = GifFrameWriter,
    ) -> None:
        self.policy = policy or FramePolicy()
        self.workers = workers
        self._writer_factory = writer_factory
        self._events: list[dict[str, Any]] = []
        self._log = get_logger().getChild("animation")

    @classmethod
    def from_config(cls, cfg: AppConfig, **kwargs: Any) -> "AnimationWriter":
        policy = FramePolicy(
            delay_cs=cfg.animation.delay_cs,
            transparent_index=cfg.animation.transparent_index,
            loop=LoopMode(cfg.animation.loop),
        )
        return cls(policy=policy, workers=cfg.render.workers, **kwargs)

    def recent_events(self, limit: int = 200) -> list[dict[str, Any]]:
        return self._events[-limit:]

    def _log_event(self, event: str, **fields: Any) -> None:
        row = {"ts_utc": datetime.now(timezone.utc).isoformat(), "event": event}
        row.update(fields)
        self._events.append(row)
        if len(self._events) > 1000:
            self._events = self._events[-1000:]

    def _frame_for(self, pixels: bytes, width: int, height: int) -> Frame:
        return Frame(
            width=width,
            height=height,
            pixel_indices=pixels,
            left=0,
            top=0,
            delay_cs=self.policy.delay_cs,
            transparent_index=self.policy.transparent_index,
            disposal=self.policy.disposal,
        )

    def emit(self, script: ScriptModel, palette: Palette, path: str | Path) -> WriteStats:
        """Write one frame per glyph, in text order, and publish ``path``.

        Any failure deletes the partially written file and re-raises.
        """
        if len(script) == 0:
            raise EmptyInputError("script has no glyphs")

        width, height = script.canvas_size
        stats = WriteStats()
        start = time.perf_counter()
        writer = self._writer_factory()

        try:
            writer.open(path, width, height, palette.to_bytes())
            writer.set_loop(self.policy.loop)
            self._log_event("open", path=str(path), width=width, height=height)

            if self.workers > 1:
                frames = iter(composite_all(script, workers=self.workers))
            else:
                frames = (composite(g, width, height) for g in script.glyphs)

            for index, composited in enumerate(frames):
                written = writer.write_frame(self._frame_for(composited.pixels, width, height))
                stats.frames_written += 1
                stats.bytes_written += written
                self._log.debug(
                    f"frame {index} {script.glyphs[index].character!r} bytes={written}",
                    extra={"event": "frame_written", "frame": index, "character": script.glyphs[index].character},
                )

            stats.path = writer.commit()
        except BaseException as exc:
            writer.abort()
            self._log_event("abort", path=str(path), frames_written=stats.frames_written, error=str(exc))
            self._log.error(f"animation write aborted: {exc}", extra={"event": "write_aborted"})
            raise

        stats.duration_s = time.perf_counter() - start
        self._log_event(
            "commit",
            path=str(stats.path),
            frames_written=stats.frames_written,
            bytes_written=stats.bytes_written,
        )
        self._log.info(
            f"wrote {stats.frames_written} frames to {stats.path}",
            extra={"event": "write_committed", "path": str(stats.path)},
        )
        return stats


def load_glyph_source(cfg: AppConfig) -> PillowGlyphSource:
    return PillowGlyphSource.from_path(cfg.render.font_path, size=cfg.render.font_size)


def render_text(
    text: str,
    cfg: AppConfig | None = None,
    output_path: str | Path | None = None,
    source: GlyphSource | None = None,
) -> WriteStats:
    """Rasterize ``text``, build its palette, and write the animation."""
    cfg = cfg or AppConfig()
    fg = parse_color(cfg.render.foreground)
    bg = parse_color(cfg.render.background)
    if not text:
        raise EmptyInputError("text must contain at least one character")

    source = source or load_glyph_source(cfg)
    script = build_script(text, source)
    palette = build_palette(fg, bg)
    path = Path(output_path or cfg.animation.output_path)
    return AnimationWriter.from_config(cfg).emit(script, palette, path)
