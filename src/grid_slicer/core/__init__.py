"""
Grid Slicer Core Package

Shared data models and error types used by every other subpackage.

All models are frozen dataclasses: rectangles and cell descriptors are
computed once and passed between worker threads without copying.
"""

from .errors import SlicerError, DecodeError, BoundsError, EncodeError
from .models import (
    PixelRect,
    Mode,
    CellLabel,
    SliceSpec,
    RevealSpec,
    EncodedImage,
)

__all__ = [
    "SlicerError",
    "DecodeError",
    "BoundsError",
    "EncodeError",
    "PixelRect",
    "Mode",
    "CellLabel",
    "SliceSpec",
    "RevealSpec",
    "EncodedImage",
]
