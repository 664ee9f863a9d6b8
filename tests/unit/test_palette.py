import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "fonts"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from glyphgif_renderer.palette import build_palette


class PaletteTests(unittest.TestCase):
    def test_white_on_black_ramp(self):
        palette = build_palette((255, 255, 255), (0, 0, 0))
        self.assertEqual(len(palette), 256)
        self.assertEqual(palette[0], (0, 0, 0))
        self.assertEqual(palette[255], (255, 255, 255))
        self.assertEqual(palette[128], (128, 128, 128))

    def test_endpoints_exact_for_odd_colors(self):
        fg = (17, 200, 3)
        bg = (250, 1, 99)
        palette = build_palette(fg, bg)
        self.assertEqual(palette[0], bg)
        self.assertEqual(palette[255], fg)

    def test_ramp_is_monotonic_per_channel(self):
        palette = build_palette((255, 0, 128), (0, 255, 128))
        reds = [entry[0] for entry in palette.entries]
        greens = [entry[1] for entry in palette.entries]
        self.assertEqual(reds, sorted(reds))
        self.assertEqual(greens, sorted(greens, reverse=True))
        self.assertTrue(all(entry[2] == 128 for entry in palette.entries))

    def test_same_colors_give_flat_palette(self):
        palette = build_palette((255, 255, 255), (255, 255, 255))
        self.assertEqual(set(palette.entries), {(255, 255, 255)})

    def test_deterministic_bytes(self):
        a = build_palette((10, 20, 30), (200, 100, 0)).to_bytes()
        b = build_palette((10, 20, 30), (200, 100, 0)).to_bytes()
        self.assertEqual(a, b)
        self.assertEqual(len(a), 768)
        self.assertEqual(a[:3], bytes([200, 100, 0]))
        self.assertEqual(a[-3:], bytes([10, 20, 30]))

    def test_rejects_out_of_range_channel(self):
        with self.assertRaises(ValueError):
            build_palette((256, 0, 0), (0, 0, 0))
        with self.assertRaises(ValueError):
            build_palette((0, 0), (0, 0, 0))


if __name__ == "__main__":
    unittest.main()
