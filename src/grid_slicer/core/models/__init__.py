"""
Core Models Package

Immutable, validated data models for the slicing pipeline.

| Model | Meaning |
|-------|---------|
| `PixelRect` | Crop rectangle in source-image pixels |
| `Mode` | Portrait (strips) or landscape (quadrants) |
| `SliceSpec` | One of the four cells, in cropped-buffer pixels |
| `RevealSpec` | A cell plus its extended source mapping |
| `EncodedImage` | One finished JPEG in upload order |
"""

from .rect import PixelRect
from .mode import Mode, CellLabel
from .specs import SliceSpec, RevealSpec, EncodedImage

__all__ = [
    "PixelRect",
    "Mode",
    "CellLabel",
    "SliceSpec",
    "RevealSpec",
    "EncodedImage",
]
