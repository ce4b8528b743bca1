"""
Module: output.preview

Purpose:
    Render a static picture of how the four images look in the feed:
    a 2x2 grid where each attachment is centre-cropped to a square cell,
    as the platform does.

Key Functions:
    - render_grid_preview(): Four images -> one preview image

Dependencies:
    - PIL: Fitting and pasting

Used By:
    - cli: --preview
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from PIL import Image, ImageOps

from grid_slicer.core.models import EncodedImage
from grid_slicer.imaging.encoder import decode_encoded
from grid_slicer.imaging.raster import new_canvas

logger = logging.getLogger(__name__)

# Feed gutter colour (dark theme)
GUTTER_COLOR = (15, 15, 15)


def render_grid_preview(
    images: Sequence[Union[EncodedImage, Image.Image]],
    cell_size: int = 300,
    gap: int = 4,
) -> Image.Image:
    """
    Compose a feed-grid preview.

    Args:
        images: Four images (encoded or decoded) in upload order
        cell_size: Side length of each square cell
        gap: Gutter between cells

    Returns:
        RGB image of size (2 * cell_size + gap) squared

    Raises:
        ValueError: If there are not exactly four images or sizes are invalid
    """
    if len(images) != 4:
        raise ValueError(f"Expected 4 images, got {len(images)}")
    if cell_size <= 0 or gap < 0:
        raise ValueError(f"Invalid preview geometry: cell={cell_size}, gap={gap}")

    side = cell_size * 2 + gap
    preview = new_canvas(side, side, GUTTER_COLOR)

    for position, item in enumerate(images):
        image = decode_encoded(item) if isinstance(item, EncodedImage) else item
        cell = ImageOps.fit(
            image.convert("RGB"),
            (cell_size, cell_size),
            method=Image.Resampling.BILINEAR,
            centering=(0.5, 0.5),
        )
        row, col = divmod(position, 2)
        preview.paste(cell, (col * (cell_size + gap), row * (cell_size + gap)))

    logger.debug(f"Rendered {side}x{side} grid preview")
    return preview
