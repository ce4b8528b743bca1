"""
Module: slicing

Purpose:
    Geometry of the four-image grid: orientation, tiled partitions and
    the extended reveal.

Key Functions:
    - classify(): Portrait or landscape
    - slice_cells(): Basic quadrant/strip output
    - extend(): Extended-reveal output
    - plan_reveal(): Reveal geometry without pixels

Dependencies:
    - PIL, numpy
    - grid_slicer.core.models

Used By:
    - pipeline
"""

from .orientation import (
    classify,
    processing_mode,
    default_crop,
    parse_aspect,
    ProcessingMode,
    DEFAULT_ASPECT,
)
from .partition import (
    quadrant_specs,
    strip_specs,
    partition,
    verify_tiling,
    slice_cells,
    slice_quadrants,
    slice_strips,
)
from .reveal import (
    plan_reveal,
    render_reveal,
    extend,
    LANDSCAPE_MULTIPLIER,
    PORTRAIT_MULTIPLIER,
)
from .fanout import map_cells

__all__ = [
    "classify",
    "processing_mode",
    "default_crop",
    "parse_aspect",
    "ProcessingMode",
    "DEFAULT_ASPECT",
    "quadrant_specs",
    "strip_specs",
    "partition",
    "verify_tiling",
    "slice_cells",
    "slice_quadrants",
    "slice_strips",
    "plan_reveal",
    "render_reveal",
    "extend",
    "LANDSCAPE_MULTIPLIER",
    "PORTRAIT_MULTIPLIER",
    "map_cells",
]
