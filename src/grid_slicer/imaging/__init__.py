"""
Module: imaging

Purpose:
    Raster primitives (decode, crop, blit) and the JPEG encoder.

Key Functions:
    - load_image(): Decode source bytes or path
    - crop_image(): Crop a PixelRect into a new buffer
    - blit(): Resample one rectangle into another
    - encode(): JPEG-encode a finished buffer

Dependencies:
    - PIL: Image manipulation

Used By:
    - pipeline, slicing, output
"""

from .raster import load_image, crop_image, blit, new_canvas, to_rgb, BLACK
from .encoder import encode, decode_encoded, to_data_url, DEFAULT_QUALITY

__all__ = [
    "load_image",
    "crop_image",
    "blit",
    "new_canvas",
    "to_rgb",
    "BLACK",
    "encode",
    "decode_encoded",
    "to_data_url",
    "DEFAULT_QUALITY",
]
