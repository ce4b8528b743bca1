"""
Module: slicing.partition

Purpose:
    Split a cropped buffer into the four tiled cells: a 2x2 grid of
    quadrants for landscape crops, four horizontal strips for portrait
    crops. Also used by the reveal extender to locate each cell.

Key Functions:
    - quadrant_specs(): Four SliceSpecs in TL, TR, BL, BR order
    - strip_specs(): Four SliceSpecs top to bottom
    - partition(): Specs for a given Mode
    - verify_tiling(): Check specs cover the buffer exactly once
    - slice_quadrants() / slice_strips() / slice_cells(): Crop the cells

Dependencies:
    - PIL: Cropping
    - grid_slicer.core.models: SliceSpec, Mode, CellLabel

Used By:
    - pipeline: Basic (non-extended) output
    - slicing.reveal: Cell geometry

Remainder Policy:
    Cell sizes are floored; the last cell along each axis absorbs the
    leftover rows/columns. A 1001x1001 landscape crop gives a 500-wide
    left column and a 501-wide right column.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Sequence

from PIL import Image

from grid_slicer.core.errors import BoundsError
from grid_slicer.core.models import Mode, SliceSpec
from grid_slicer.core.models.mode import QUADRANT_LABELS, STRIP_LABELS

from .fanout import map_cells

logger = logging.getLogger(__name__)

CELL_COUNT = 4


def _split_axis(length: int, parts: int) -> List[tuple[int, int]]:
    """Split [0, length) into (offset, size) runs; the last run takes the remainder."""
    base = length // parts
    runs = [(i * base, base) for i in range(parts - 1)]
    runs.append(((parts - 1) * base, length - (parts - 1) * base))
    return runs


def quadrant_specs(width: int, height: int) -> List[SliceSpec]:
    """
    Partition a buffer into 2x2 quadrants.

    Args:
        width: Buffer width (>= 2)
        height: Buffer height (>= 2)

    Returns:
        Specs for Top-Left, Top-Right, Bottom-Left, Bottom-Right

    Raises:
        BoundsError: If the buffer is too small to split

    Example:
        >>> [s.box for s in quadrant_specs(1000, 1000)][:2]
        [(0, 0, 500, 500), (500, 0, 1000, 500)]
    """
    if width < 2 or height < 2:
        raise BoundsError(f"Cannot split {width}x{height} into quadrants")

    columns = _split_axis(width, 2)
    rows = _split_axis(height, 2)
    specs = []
    index = 1
    for y, h in rows:
        for x, w in columns:
            specs.append(SliceSpec(index, QUADRANT_LABELS[index - 1], x, y, w, h))
            index += 1
    return specs


def strip_specs(width: int, height: int) -> List[SliceSpec]:
    """
    Partition a buffer into four full-width horizontal strips.

    Args:
        width: Buffer width (>= 1)
        height: Buffer height (>= 4)

    Returns:
        Specs for Top, Upper-middle, Lower-middle, Bottom

    Raises:
        BoundsError: If the buffer is too small to split

    Example:
        >>> [s.box for s in strip_specs(800, 1600)][1]
        (0, 400, 800, 800)
    """
    if width < 1 or height < CELL_COUNT:
        raise BoundsError(f"Cannot split {width}x{height} into {CELL_COUNT} strips")

    return [
        SliceSpec(i + 1, STRIP_LABELS[i], 0, y, width, h)
        for i, (y, h) in enumerate(_split_axis(height, CELL_COUNT))
    ]


def partition(width: int, height: int, mode: Mode) -> List[SliceSpec]:
    """Cell specs for the given mode, checked to tile the buffer."""
    if mode is Mode.PORTRAIT:
        specs = strip_specs(width, height)
    else:
        specs = quadrant_specs(width, height)
    verify_tiling(specs, width, height)
    return specs


def verify_tiling(specs: Sequence[SliceSpec], width: int, height: int) -> None:
    """
    Check that specs cover a width x height buffer exactly once.

    Raises:
        BoundsError: On a missing cell, a cell outside the buffer,
                     overlapping cells, or uncovered pixels
    """
    if len(specs) != CELL_COUNT:
        raise BoundsError(f"Expected {CELL_COUNT} cells, got {len(specs)}")

    for spec in specs:
        if spec.right > width or spec.bottom > height:
            raise BoundsError(
                f"Cell {spec.index} {spec.box} exceeds buffer {width}x{height}"
            )

    for a, b in combinations(specs, 2):
        if a.overlaps(b):
            raise BoundsError(f"Cells {a.index} and {b.index} overlap")

    # Disjoint and contained, so equal area means full coverage
    covered = sum(spec.area for spec in specs)
    if covered != width * height:
        raise BoundsError(
            f"Cells cover {covered} of {width * height} pixels"
        )


def slice_cells(
    image: Image.Image,
    mode: Mode,
    *,
    max_workers: int = 4,
) -> List[Image.Image]:
    """
    Crop the four tiled cells out of a buffer.

    Args:
        image: Cropped buffer
        mode: PORTRAIT for strips, LANDSCAPE for quadrants
        max_workers: Cells cropped in parallel

    Returns:
        Four images in upload order
    """
    specs = partition(image.width, image.height, mode)
    logger.debug(
        f"Slicing {image.width}x{image.height} as {mode.value}: "
        + ", ".join(f"{s.index}={s.width}x{s.height}" for s in specs)
    )
    return map_cells(lambda spec: image.crop(spec.box), specs, max_workers)


def slice_quadrants(image: Image.Image, *, max_workers: int = 4) -> List[Image.Image]:
    """Split into TL, TR, BL, BR quadrants."""
    return slice_cells(image, Mode.LANDSCAPE, max_workers=max_workers)


def slice_strips(image: Image.Image, *, max_workers: int = 4) -> List[Image.Image]:
    """Split into four strips, top to bottom."""
    return slice_cells(image, Mode.PORTRAIT, max_workers=max_workers)
