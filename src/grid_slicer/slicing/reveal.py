"""
Module: slicing.reveal

Purpose:
    Extended-reveal rendering. Each tiled cell becomes a taller image:
    the cell stays centred, and the rows above and below are filled with
    real content from the original (uncropped) photo. Where the photo
    runs out, the canvas stays black and a linear fade marks the edge.

    The feed grid centre-crops each attachment, so the grid still shows
    the seamless tiled cells; opening an image shows the extra content.

Key Functions:
    - plan_reveal(): Pure geometry for the four outputs
    - render_reveal(): Composite one RevealSpec onto a canvas
    - extend(): Plan and render all four cells

Key Classes:
    - RevealSpec (core.models.specs): Per-cell geometry

Dependencies:
    - PIL: Compositing
    - numpy: Fade masks
    - slicing.partition: Cell layout
    - imaging.raster: blit(), new_canvas()

Used By:
    - pipeline: Extended output

Coordinate Spaces:
    Cropped space is the cropped buffer (one pixel per output pixel).
    Source space is the original image. scale_x/scale_y convert cropped
    lengths to source lengths. They are 1.0 unless the crop was
    resampled from a fractional rectangle.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image

from grid_slicer.core.models import Mode, PixelRect, RevealSpec, SliceSpec
from grid_slicer.imaging.raster import BLACK, blit, new_canvas

from .fanout import map_cells
from .partition import partition

logger = logging.getLogger(__name__)

# Output height / cell height shown to the user
LANDSCAPE_MULTIPLIER = 2.5
PORTRAIT_MULTIPLIER = 1.5

DEFAULT_MULTIPLIERS = {
    Mode.LANDSCAPE: LANDSCAPE_MULTIPLIER,
    Mode.PORTRAIT: PORTRAIT_MULTIPLIER,
}


def plan_cell(
    cell: SliceSpec,
    original_size: Tuple[int, int],
    crop_rect: PixelRect,
    scale_x: float,
    scale_y: float,
    multiplier: float,
) -> RevealSpec:
    """
    Compute the reveal geometry for a single cell.

    Args:
        cell: Cell within the cropped buffer
        original_size: (width, height) of the original image
        crop_rect: Crop rectangle in original-image pixels
        scale_x: crop_rect.width / cropped width
        scale_y: crop_rect.height / cropped height
        multiplier: Output height / cell height

    Returns:
        RevealSpec with source mapping and clamping resolved
    """
    original_width, original_height = original_size

    output_width = cell.width
    output_height = max(cell.height, round(cell.height * multiplier))
    extra_height = (output_height - cell.height) / 2

    src_x = crop_rect.x + cell.x * scale_x
    src_y = crop_rect.y + cell.y * scale_y
    # Float error must not push the right edge past the image
    src_w = min(cell.width * scale_x, original_width - src_x)
    src_h = cell.height * scale_y

    extra_src_height = extra_height * scale_y
    extended_src_y = src_y - extra_src_height
    extended_src_h = src_h + extra_src_height * 2

    clamped_src_y = max(0.0, extended_src_y)
    clamped_src_bottom = min(float(original_height), extended_src_y + extended_src_h)

    return RevealSpec(
        cell=cell,
        multiplier=multiplier,
        output_width=output_width,
        output_height=output_height,
        extra_height=extra_height,
        scale_x=scale_x,
        scale_y=scale_y,
        src_x=src_x,
        src_y=src_y,
        src_w=src_w,
        src_h=src_h,
        extended_src_y=extended_src_y,
        extended_src_h=extended_src_h,
        clamped_src_y=clamped_src_y,
        clamped_src_bottom=clamped_src_bottom,
    )


def plan_reveal(
    cropped_size: Tuple[int, int],
    original_size: Tuple[int, int],
    crop_rect: PixelRect,
    mode: Mode,
    multiplier: Optional[float] = None,
) -> List[RevealSpec]:
    """
    Compute reveal geometry for all four cells without touching pixels.

    Args:
        cropped_size: (width, height) of the cropped buffer
        original_size: (width, height) of the original image
        crop_rect: Crop rectangle in original-image pixels
        mode: Slicing mode (selects partition and default multiplier)
        multiplier: Output height / cell height; defaults to 2.5
                    (landscape) or 1.5 (portrait)

    Returns:
        Four RevealSpecs in upload order

    Raises:
        ValueError: If multiplier < 1
        BoundsError: If the cropped buffer cannot be partitioned

    Example:
        >>> specs = plan_reveal((800, 1600), (800, 1600),
        ...                     PixelRect(0, 0, 800, 1600), Mode.PORTRAIT)
        >>> [(s.output_width, s.output_height) for s in specs][0]
        (800, 600)
    """
    if multiplier is None:
        multiplier = DEFAULT_MULTIPLIERS[mode]
    if multiplier < 1:
        raise ValueError(f"multiplier must be >= 1, got {multiplier}")

    cropped_width, cropped_height = cropped_size
    scale_x = crop_rect.width / cropped_width
    scale_y = crop_rect.height / cropped_height

    return [
        plan_cell(cell, original_size, crop_rect, scale_x, scale_y, multiplier)
        for cell in partition(cropped_width, cropped_height, mode)
    ]


def render_reveal(
    spec: RevealSpec,
    original: Image.Image,
    *,
    fade_opacity: float = 1.0,
) -> Image.Image:
    """
    Render one extended output.

    Steps:
    1. Fill a black output_width x output_height canvas
    2. Blit the clamped source span, offset by the rows lost to clamping
    3. Fade toward black over extra_height rows on each clipped edge

    Args:
        spec: Geometry from plan_reveal()
        original: Original (uncropped) RGB image
        fade_opacity: Opacity of black at the outermost faded row (0..1)

    Returns:
        New RGB image of size (output_width, output_height)
    """
    canvas = new_canvas(spec.output_width, spec.output_height)

    if not spec.has_content:
        logger.debug(f"Cell {spec.index}: extended span outside image, left black")
        return canvas

    blit(
        canvas,
        PixelRect(0, spec.dest_y_offset, spec.output_width, spec.dest_height),
        original,
        PixelRect(spec.src_x, spec.clamped_src_y, spec.src_w, spec.clamped_src_h),
    )

    band = round(spec.extra_height)
    if band > 0 and fade_opacity > 0:
        if spec.clipped_top:
            _fade_band(canvas, 0, band, fade_opacity, from_top=True)
        if spec.clipped_bottom:
            _fade_band(canvas, spec.output_height - band, band, fade_opacity, from_top=False)

    logger.debug(
        f"Cell {spec.index}: {spec.output_width}x{spec.output_height}, "
        f"content rows {spec.dest_y_offset:.1f}+{spec.dest_height:.1f}, "
        f"clipped top={spec.clipped_top} bottom={spec.clipped_bottom}"
    )
    return canvas


def _fade_band(
    canvas: Image.Image,
    top: int,
    height: int,
    opacity: float,
    *,
    from_top: bool,
) -> None:
    """
    Blend rows [top, top + height) toward black.

    Row alpha runs linearly from `opacity` at the outer edge of the
    canvas to 0 at the inner edge of the band.
    """
    ramp = np.linspace(opacity, 0.0, num=height, endpoint=False)
    if not from_top:
        ramp = ramp[::-1]
    rows = np.repeat((ramp * 255).round().astype(np.uint8)[:, None], canvas.width, axis=1)
    mask = Image.fromarray(rows)

    black = new_canvas(canvas.width, height, BLACK)
    canvas.paste(black, (0, top), mask)


def extend(
    cropped: Image.Image,
    original: Image.Image,
    crop_rect: PixelRect,
    mode: Mode,
    multiplier: Optional[float] = None,
    *,
    fade_opacity: float = 1.0,
    max_workers: int = 4,
) -> List[Image.Image]:
    """
    Build the four extended-reveal outputs.

    Args:
        cropped: Cropped buffer (defines the cell layout)
        original: Original uncropped image (supplies the extra content)
        crop_rect: Where `cropped` came from in `original`
        mode: Slicing mode
        multiplier: Output height / cell height (mode default if None)
        fade_opacity: Opacity of the edge fade (0 disables it)
        max_workers: Cells rendered in parallel

    Returns:
        Four RGB images in upload order

    Example:
        >>> outputs = extend(cropped, original, rect, Mode.LANDSCAPE)
        >>> outputs[0].size
        (500, 1250)
    """
    specs = plan_reveal(cropped.size, original.size, crop_rect, mode, multiplier)
    logger.debug(
        f"Extending {len(specs)} {mode.value} cells x{specs[0].multiplier} "
        f"from {original.width}x{original.height} original"
    )
    return map_cells(
        lambda spec: render_reveal(spec, original, fade_opacity=fade_opacity),
        specs,
        max_workers,
    )
