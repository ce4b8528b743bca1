"""
Module: imaging.raster

Purpose:
    Pixel-buffer primitives for the slicing pipeline: decoding a source
    image, cropping a rectangle out of it, and drawing one rectangle of a
    buffer into another with resampling. Every other component is built
    on blit().

Key Functions:
    - load_image(): Decode bytes / file / path into an RGB image
    - crop_image(): Copy a validated rectangle into a new image
    - blit(): Resample a source rectangle into a destination rectangle
    - new_canvas(): Allocate a solid-colour RGB canvas
    - to_rgb(): Normalise a decoded image to 8-bit RGB

Dependencies:
    - PIL: Decoding, resampling, EXIF orientation
    - numpy: 16-bit sample scaling
    - grid_slicer.core.models: PixelRect

Used By:
    - pipeline: Loads and crops the source
    - slicing.reveal: Composites extended regions
    - output.preview: Grid preview
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from grid_slicer.core.errors import BoundsError, DecodeError
from grid_slicer.core.models import PixelRect

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, BinaryIO, Path, str]

BLACK: Tuple[int, int, int] = (0, 0, 0)

# Slack for source edges computed in floating point
_EDGE_TOLERANCE = 1e-6


def load_image(source: ImageSource) -> Image.Image:
    """
    Decode a source image into an RGB buffer.

    EXIF orientation is applied so the buffer matches what a viewer
    displays. Transparent pixels are flattened onto black, which is what
    a JPEG export of them shows.

    Args:
        source: Raw bytes, a binary file object, or a filesystem path

    Returns:
        Fully loaded RGB image (independent of the source file)

    Raises:
        DecodeError: If the data is missing or not a readable image
    """
    if isinstance(source, (bytes, bytearray)):
        stream: Union[BinaryIO, Path, str] = BytesIO(bytes(source))
    else:
        stream = source

    try:
        with Image.open(stream) as opened:
            opened.load()
            image = ImageOps.exif_transpose(opened)
    except FileNotFoundError as e:
        raise DecodeError(f"Source image not found: {source}") from e
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise DecodeError(f"Could not decode source image: {e}") from e

    rgb = to_rgb(image)
    logger.debug(f"Loaded source image {rgb.width}x{rgb.height} (mode {image.mode})")
    return rgb


def to_rgb(image: Image.Image) -> Image.Image:
    """
    Normalise any decoded image to an independent 8-bit RGB buffer.

    Alpha is composited over black. Integer greyscale modes ("I",
    "I;16" and variants) hold 16-bit samples and are scaled down to
    8 bits rather than clipped.

    Example:
        >>> to_rgb(Image.new("I;16", (1, 1), 30000)).getpixel((0, 0))
        (117, 117, 117)
    """
    if image.mode == "RGB":
        return image.copy()

    if image.mode == "I" or image.mode.startswith("I;16"):
        samples = np.asarray(image.convert("I"), dtype=np.int64)
        grey = np.clip(samples >> 8, 0, 255).astype(np.uint8)
        return Image.fromarray(grey).convert("RGB")

    has_alpha = image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    if not has_alpha:
        return image.convert("RGB")

    rgba = image.convert("RGBA")
    canvas = new_canvas(rgba.width, rgba.height)
    canvas.paste(rgba, (0, 0), rgba)
    return canvas


def new_canvas(
    width: int,
    height: int,
    color: Tuple[int, int, int] = BLACK,
) -> Image.Image:
    """
    Allocate a solid-colour RGB canvas.

    Example:
        >>> new_canvas(4, 2).getpixel((0, 0))
        (0, 0, 0)
    """
    return Image.new("RGB", (width, height), color)


def crop_image(image: Image.Image, rect: PixelRect) -> Image.Image:
    """
    Crop a rectangle from an image.

    Args:
        image: Source image
        rect: Region to copy, in image pixels

    Returns:
        New image of size (round(width), round(height))

    Raises:
        BoundsError: If rect is not fully inside the image

    Example:
        >>> cropped = crop_image(source, PixelRect(0, 0, 800, 1600))
        >>> cropped.size
        (800, 1600)
    """
    if not rect.fits_within(image.width, image.height):
        raise BoundsError(
            f"Crop {rect!r} exceeds image bounds {image.width}x{image.height}"
        )

    if rect.is_integral:
        return image.crop(tuple(int(v) for v in rect.as_box()))

    width = max(1, round(rect.width))
    height = max(1, round(rect.height))
    canvas = new_canvas(width, height)
    blit(canvas, PixelRect(0, 0, width, height), image, rect)
    return canvas


def blit(
    dst: Image.Image,
    dst_rect: PixelRect,
    src: Image.Image,
    src_rect: PixelRect,
) -> None:
    """
    Draw src_rect of src into dst_rect of dst.

    The source region may have fractional coordinates; it is resampled
    bilinearly to the destination size. The destination rectangle is
    snapped to whole pixels. A destination that rounds to zero pixels is
    skipped.

    Args:
        dst: Image to draw into (modified in place)
        dst_rect: Target region in dst
        src: Image to read from (not modified)
        src_rect: Region of src to sample

    Raises:
        BoundsError: If either rectangle lies outside its image
    """
    if not src_rect.fits_within(src.width + _EDGE_TOLERANCE, src.height + _EDGE_TOLERANCE):
        raise BoundsError(
            f"Source rect {src_rect!r} exceeds {src.width}x{src.height}"
        )

    left = round(dst_rect.x)
    top = round(dst_rect.y)
    right = round(dst_rect.right)
    bottom = round(dst_rect.bottom)
    if right > dst.width or bottom > dst.height:
        raise BoundsError(
            f"Destination rect {dst_rect!r} exceeds {dst.width}x{dst.height}"
        )

    width = right - left
    height = bottom - top
    if width <= 0 or height <= 0:
        return

    region = src.resize(
        (width, height),
        resample=Image.Resampling.BILINEAR,
        box=(
            float(src_rect.x),
            float(src_rect.y),
            float(min(src_rect.right, src.width)),
            float(min(src_rect.bottom, src.height)),
        ),
    )
    dst.paste(region, (left, top))
