"""
Module: imaging.encoder

Purpose:
    Serialize finished cell buffers to JPEG bytes at a fixed quality, and
    the small helpers that read them back.

Key Functions:
    - encode(): RGB image -> EncodedImage
    - decode_encoded(): EncodedImage -> RGB image
    - to_data_url(): EncodedImage -> "data:image/jpeg;base64,..."

Dependencies:
    - PIL: JPEG compression
    - base64 (std)

Used By:
    - pipeline: Encodes the four cells
    - output.preview: Decodes cells for the preview grid
"""

from __future__ import annotations

import base64
import logging
from io import BytesIO

from PIL import Image

from grid_slicer.core.errors import EncodeError
from grid_slicer.core.models import EncodedImage

logger = logging.getLogger(__name__)

# Canvas toBlob-style quality (0..1) used for every output
DEFAULT_QUALITY = 0.92
OUTPUT_FORMAT = "JPEG"


def encode(
    image: Image.Image,
    *,
    quality: float = DEFAULT_QUALITY,
    index: int = 0,
) -> EncodedImage:
    """
    Encode an image as JPEG.

    Byte output depends on the libjpeg build; compare decoded pixels, not
    bytes.

    Args:
        image: Buffer to encode
        quality: Quality on a 0..1 scale (0.92 -> libjpeg quality 92)
        index: Position of this image in the output sequence

    Returns:
        EncodedImage holding the JPEG bytes

    Raises:
        EncodeError: If the buffer is empty or the encoder fails
    """
    if image.width == 0 or image.height == 0:
        raise EncodeError(f"Cannot encode empty image {image.width}x{image.height}")
    if not 0 < quality <= 1:
        raise EncodeError(f"quality must be 0 < q <= 1, got {quality}")

    if image.mode != "RGB":
        image = image.convert("RGB")

    buffer = BytesIO()
    try:
        image.save(buffer, format=OUTPUT_FORMAT, quality=round(quality * 100))
    except (OSError, ValueError) as e:
        raise EncodeError(f"JPEG encoding failed for image {index + 1}: {e}") from e

    data = buffer.getvalue()
    logger.debug(f"Encoded image {index + 1}: {image.width}x{image.height}, {len(data)} bytes")
    return EncodedImage(
        index=index,
        data=data,
        width=image.width,
        height=image.height,
        format=OUTPUT_FORMAT,
    )


def decode_encoded(encoded: EncodedImage) -> Image.Image:
    """Decode an EncodedImage back into an RGB image."""
    with Image.open(BytesIO(encoded.data)) as img:
        return img.convert("RGB")


def to_data_url(encoded: EncodedImage) -> str:
    """
    Convert to a data URL for embedding in HTML.

    Example:
        >>> to_data_url(blob)[:23]
        'data:image/jpeg;base64,'
    """
    payload = base64.b64encode(encoded.data).decode("ascii")
    return f"data:{encoded.mime_type};base64,{payload}"
