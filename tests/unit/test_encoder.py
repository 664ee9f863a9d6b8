import os
import stat
import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "encoder"))

from glyphgif_encoder import Disposal, EncodingFailure, Frame, GifFrameWriter, LoopMode

PALETTE = bytes(255 - i // 3 for i in range(768))


def frame(pixels, width=2, height=2, **kwargs):
    kwargs.setdefault("delay_cs", 30)
    kwargs.setdefault("transparent_index", 0)
    kwargs.setdefault("disposal", Disposal.RESTORE_TO_BACKGROUND)
    return Frame(width=width, height=height, pixel_indices=bytes(pixels), **kwargs)


class FrameModelTests(unittest.TestCase):
    def test_rejects_bad_shapes(self):
        with self.assertRaises(ValueError):
            Frame(width=0, height=1, pixel_indices=b"")
        with self.assertRaises(ValueError):
            Frame(width=2, height=2, pixel_indices=b"\x00")
        with self.assertRaises(ValueError):
            Frame(width=1, height=1, pixel_indices=b"\x00", transparent_index=256)
        with self.assertRaises(ValueError):
            Frame(width=1, height=1, pixel_indices=b"\x00", delay_cs=-1)

    def test_loop_modes(self):
        self.assertTrue(LoopMode.infinite().is_infinite)
        self.assertEqual(LoopMode.count(3).repeat, 3)
        with self.assertRaises(ValueError):
            LoopMode.count(0)


class GifFrameWriterTests(unittest.TestCase):
    def test_round_trip_through_pillow(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out.gif"
            writer = GifFrameWriter()
            writer.open(path, 2, 2, PALETTE)
            writer.set_loop(LoopMode.infinite())
            writer.write_frame(frame([0, 64, 128, 255]))
            writer.write_frame(frame([255, 0, 0, 255]))
            self.assertEqual(writer.commit(), path)

            with Image.open(path) as im:
                self.assertEqual(im.size, (2, 2))
                self.assertEqual(im.n_frames, 2)
                self.assertEqual(im.info["loop"], 0)
                self.assertEqual(im.info["duration"], 300)
                self.assertEqual(im.info["transparency"], 0)
                self.assertEqual(im.disposal_method, 2)
                self.assertEqual(im.tobytes(), bytes([0, 64, 128, 255]))

    def test_identical_and_blank_frames_are_not_merged(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "blank.gif"
            writer = GifFrameWriter()
            writer.open(path, 2, 2, PALETTE)
            for _ in range(3):
                writer.write_frame(frame([0, 0, 0, 0]))
            writer.commit()

            with Image.open(path) as im:
                self.assertEqual(im.n_frames, 3)

    def test_finite_loop_count(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "loop.gif"
            writer = GifFrameWriter()
            writer.open(path, 2, 2, PALETTE)
            writer.set_loop(LoopMode.count(2))
            writer.write_frame(frame([1, 2, 3, 4]))
            writer.commit()

            with Image.open(path) as im:
                self.assertEqual(im.info["loop"], 2)

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_committed_file_mode_follows_umask(self):
        mask = os.umask(0o022)
        try:
            with tempfile.TemporaryDirectory() as tmp:
                path = Path(tmp) / "mode.gif"
                writer = GifFrameWriter()
                writer.open(path, 2, 2, PALETTE)
                writer.write_frame(frame([1, 2, 3, 4]))
                writer.commit()
                self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o644)
        finally:
            os.umask(mask)

    def test_abort_leaves_nothing_behind(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "partial.gif"
            writer = GifFrameWriter()
            writer.open(path, 2, 2, PALETTE)
            writer.write_frame(frame([1, 2, 3, 4]))
            writer.abort()
            self.assertFalse(writer.is_open)
            self.assertEqual(list(Path(tmp).iterdir()), [])

    def test_context_manager_aborts_uncommitted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "ctx.gif"
            with self.assertRaises(RuntimeError):
                with GifFrameWriter() as writer:
                    writer.open(path, 2, 2, PALETTE)
                    writer.write_frame(frame([1, 2, 3, 4]))
                    raise RuntimeError("boom")
            self.assertEqual(list(Path(tmp).iterdir()), [])

    def test_missing_directory_is_encoding_failure(self):
        with tempfile.TemporaryDirectory() as tmp:
            writer = GifFrameWriter()
            with self.assertRaises(EncodingFailure):
                writer.open(Path(tmp) / "missing" / "out.gif", 2, 2, PALETTE)

    def test_rejects_frame_larger_than_screen(self):
        with tempfile.TemporaryDirectory() as tmp:
            writer = GifFrameWriter()
            writer.open(Path(tmp) / "out.gif", 2, 2, PALETTE)
            with self.assertRaises(ValueError):
                writer.write_frame(frame([0] * 9, width=3, height=3))
            writer.abort()

    def test_open_validates_arguments(self):
        writer = GifFrameWriter()
        with self.assertRaises(ValueError):
            writer.open("x.gif", 0, 2, PALETTE)
        with self.assertRaises(ValueError):
            writer.open("x.gif", 2, 2, b"\x00" * 6)

    def test_loop_locked_after_first_frame(self):
        with tempfile.TemporaryDirectory() as tmp:
            writer = GifFrameWriter()
            writer.open(Path(tmp) / "out.gif", 2, 2, PALETTE)
            writer.write_frame(frame([0, 0, 0, 0]))
            with self.assertRaises(RuntimeError):
                writer.set_loop(LoopMode.count(1))
            writer.abort()


if __name__ == "__main__":
    unittest.main()
