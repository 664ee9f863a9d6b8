"""CLI entrypoint rendering text into a looping GIF, one character per frame."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from glyphgif_core import PIPELINE_ERRORS, AppConfig, load_config, normalize_config, render_text
from glyphgif_core.logging_setup import configure_logging, get_logger


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glyphgif", description="Render text as an animated GIF, one glyph per frame")
    parser.add_argument("text", help="Text to animate")
    parser.add_argument("foreground", nargs="?", default=None, help="Ink color as 0xRRGGBB (default white)")
    parser.add_argument("background", nargs="?", default=None, help="Background color as 0xRRGGBB (default white)")
    parser.add_argument("font", nargs="?", default=None, help="Path to a TrueType/OpenType font")
    parser.add_argument("-o", "--output", default=None, help="Output GIF path")
    parser.add_argument("--font-size", type=int, default=None, help="Font size in pixels")
    parser.add_argument("--delay", type=int, default=None, help="Per-frame delay in centiseconds")
    parser.add_argument("--config", default=None, help="Optional config JSON path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to the console at debug level")
    return parser


def apply_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.foreground is not None:
        cfg.render.foreground = args.foreground
    if args.background is not None:
        cfg.render.background = args.background
    if args.font is not None:
        cfg.render.font_path = args.font
    if args.font_size is not None:
        cfg.render.font_size = args.font_size
    if args.delay is not None:
        cfg.animation.delay_cs = args.delay
    if args.output is not None:
        cfg.animation.output_path = args.output
    return normalize_config(cfg)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    apply_overrides(cfg, args)

    try:
        configure_logging(
            level="DEBUG" if args.verbose else cfg.logging.level,
            keep_files=cfg.logging.keep_log_files,
            console=args.verbose,
        )
    except OSError as exc:
        print(f"error: cannot set up logging: {exc}", file=sys.stderr)
        return 1

    try:
        stats = render_text(args.text, cfg)
    except PIPELINE_ERRORS as exc:
        get_logger().error(f"render failed: {exc}", exc_info=True, extra={"event": "render_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _print_json(
        {
            "path": stats.path,
            "frames": stats.frames_written,
            "bytes": stats.bytes_written,
            "duration_s": round(stats.duration_s, 4),
        }
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
