"""GIF stream writer over Pillow's per-frame GIF encoder."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import IO

from PIL import GifImagePlugin, Image

from .models import MAX_DIMENSION, EncodingFailure, Frame, LoopMode

PALETTE_BYTES = 256 * 3
_TRAILER = b";"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class GifFrameWriter:
    """Writes one GIF frame at a time in the order frames are given.

    Pillow's ``save_all`` path merges identical consecutive frames and crops
    deltas, so the header and each frame are encoded individually instead.
    Output goes to a hidden sibling file that only replaces the target on
    ``commit()``.
    """

    def __init__(self) -> None:
        self._fp: IO[bytes] | None = None
        self._tmp_path: Path | None = None
        self.path: Path | None = None
        self.width = 0
        self.height = 0
        self.palette = b""
        self.loop = LoopMode.infinite()
        self.frames_written = 0
        self.bytes_written = 0
        self._header_written = False

    @property
    def is_open(self) -> bool:
        return self._fp is not None

    def open(self, path: str | Path, width: int, height: int, palette: bytes) -> None:
        if self.is_open:
            raise RuntimeError("writer is already open")
        if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
            raise ValueError(f"logical screen {width}x{height} is out of range 1..{MAX_DIMENSION}")
        if len(palette) != PALETTE_BYTES:
            raise ValueError(f"palette must be {PALETTE_BYTES} bytes")

        target = Path(path)
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".part", dir=target.parent)
        except OSError as exc:
            raise EncodingFailure(f"cannot open {target}: {exc}") from exc

        self._fp = os.fdopen(fd, "wb")
        self._tmp_path = Path(tmp_name)
        # mkstemp creates 0600 files; published output follows the umask like open() would.
        try:
            os.chmod(tmp_name, 0o666 & ~_current_umask())
        except OSError as exc:
            self.abort()
            raise EncodingFailure(f"cannot open {target}: {exc}") from exc
        self.path = target
        self.width = width
        self.height = height
        self.palette = bytes(palette)
        self.frames_written = 0
        self.bytes_written = 0
        self._header_written = False

    def set_loop(self, loop: LoopMode) -> None:
        if self._header_written:
            raise RuntimeError("loop mode must be set before the first frame")
        self.loop = loop

    def _indexed_image(self, size: tuple[int, int], pixels: bytes) -> Image.Image:
        image = Image.frombytes("P", size, pixels)
        image.putpalette(self.palette)
        return image

    def _write(self, chunks: list[bytes]) -> int:
        if self._fp is None:
            raise RuntimeError("writer is not open")
        payload = b"".join(chunks)
        try:
            self._fp.write(payload)
        except OSError as exc:
            raise EncodingFailure(f"write to {self._tmp_path} failed: {exc}") from exc
        self.bytes_written += len(payload)
        return len(payload)

    def _write_header(self) -> int:
        screen = self._indexed_image((self.width, self.height), bytes(self.width * self.height))
        header, _ = GifImagePlugin.getheader(screen, None, {"loop": self.loop.repeat})
        self._header_written = True
        return self._write(header)

    def write_frame(self, frame: Frame) -> int:
        if not self.is_open:
            raise RuntimeError("writer is not open")
        if frame.left + frame.width > self.width or frame.top + frame.height > self.height:
            raise ValueError("frame exceeds the logical screen")

        written = 0
        if not self._header_written:
            written += self._write_header()

        params: dict[str, int] = {
            "duration": frame.delay_cs * 10,
            "disposal": int(frame.disposal),
        }
        if frame.transparent_index is not None:
            params["transparency"] = frame.transparent_index

        image = self._indexed_image((frame.width, frame.height), frame.pixel_indices)
        try:
            chunks = GifImagePlugin.getdata(image, offset=(frame.left, frame.top), **params)
        except (OSError, ValueError) as exc:
            raise EncodingFailure(f"cannot encode frame {self.frames_written}: {exc}") from exc
        written += self._write(chunks)
        self.frames_written += 1
        return written

    def commit(self) -> Path:
        if not self.is_open or self.path is None or self._tmp_path is None:
            raise RuntimeError("writer is not open")
        if not self._header_written:
            self._write_header()
        self._write([_TRAILER])

        try:
            self._fp.close()
            os.replace(self._tmp_path, self.path)
        except OSError as exc:
            self.abort()
            raise EncodingFailure(f"cannot publish {self.path}: {exc}") from exc

        self._fp = None
        self._tmp_path = None
        return self.path

    def abort(self) -> None:
        fp, tmp_path = self._fp, self._tmp_path
        self._fp = None
        self._tmp_path = None
        if fp is not None:
            fp.close()
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)

    def __enter__(self) -> "GifFrameWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.is_open:
            self.abort()
