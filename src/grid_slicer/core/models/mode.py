"""
Module: core.models.mode

Purpose:
    Enums naming the two slicing modes and the four cell positions
    within each mode.

Key Classes:
    - Mode: Portrait (stacked strips) or landscape (quadrant panorama)
    - CellLabel: Semantic name of each output cell

Used By:
    - slicing.orientation: classify()
    - slicing.partition: SliceSpec labels
    - output.zip_writer: README text
"""

from enum import Enum


class Mode(Enum):
    """
    Slicing mode derived from the crop rectangle.

    Attributes:
        PORTRAIT: Crop is taller than wide. Output is four horizontal
                  strips; swiping 1→2→3→4 rebuilds the portrait.
        LANDSCAPE: Crop is at least as wide as tall (squares included).
                   Output is four quadrants forming a seamless panorama
                   in the feed grid.

    Example:
        >>> Mode("portrait") is Mode.PORTRAIT
        True
    """
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class CellLabel(Enum):
    """Position of a cell within its mode's partition."""
    TOP_LEFT = "Top-Left"
    TOP_RIGHT = "Top-Right"
    BOTTOM_LEFT = "Bottom-Left"
    BOTTOM_RIGHT = "Bottom-Right"

    TOP = "Top"
    UPPER_MIDDLE = "Upper-middle"
    LOWER_MIDDLE = "Lower-middle"
    BOTTOM = "Bottom"


QUADRANT_LABELS = (
    CellLabel.TOP_LEFT,
    CellLabel.TOP_RIGHT,
    CellLabel.BOTTOM_LEFT,
    CellLabel.BOTTOM_RIGHT,
)

STRIP_LABELS = (
    CellLabel.TOP,
    CellLabel.UPPER_MIDDLE,
    CellLabel.LOWER_MIDDLE,
    CellLabel.BOTTOM,
)
