"""GIF encoder adapter for indexed-color frame sequences."""

from .models import Disposal, EncodingFailure, Frame, LoopMode, WriteStats
from .writer import GifFrameWriter

__all__ = [
    "Disposal",
    "EncodingFailure",
    "Frame",
    "GifFrameWriter",
    "LoopMode",
    "WriteStats",
]
