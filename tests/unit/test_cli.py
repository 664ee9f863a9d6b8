import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
for sub in ("fonts", "encoder", "renderer", "core"):
    sys.path.insert(0, str(ROOT / "packages" / sub))

from glyphgif_app.cli import apply_overrides, build_parser
from glyphgif_core.config import AppConfig


class CliTests(unittest.TestCase):
    def test_text_only(self):
        args = build_parser().parse_args(["Hello"])
        self.assertEqual(args.text, "Hello")
        self.assertIsNone(args.foreground)
        self.assertIsNone(args.background)
        self.assertIsNone(args.font)

    def test_all_positionals(self):
        args = build_parser().parse_args(["Hi", "0xFF0000", "0x000000", "Font.ttf"])
        self.assertEqual(args.foreground, "0xFF0000")
        self.assertEqual(args.background, "0x000000")
        self.assertEqual(args.font, "Font.ttf")

    def test_overrides_apply_to_config(self):
        args = build_parser().parse_args(
            ["Hi", "0x00FF00", "-o", "x.gif", "--font-size", "12", "--delay", "99999"]
        )
        cfg = apply_overrides(AppConfig(), args)
        self.assertEqual(cfg.render.foreground, "0x00FF00")
        self.assertEqual(cfg.render.background, "0xFFFFFF")
        self.assertEqual(cfg.render.font_size, 12)
        self.assertEqual(cfg.animation.output_path, "x.gif")
        self.assertEqual(cfg.animation.delay_cs, 0xFFFF)

    def test_text_required(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
