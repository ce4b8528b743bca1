"""
Module: rect

Purpose:
    Provides the PixelRect dataclass - a rectangle in source-image pixel
    space. This is what the crop selector hands to the pipeline, and what
    the pipeline uses to address regions of any buffer.

Key Functions:
    - PixelRect.fits_within(width, height): Containment check
    - PixelRect.as_box(): (left, top, right, bottom) tuple for PIL
    - PixelRect.to_dict(): Serialize for JSON
    - PixelRect.from_dict(data): Deserialize from JSON / CLI input

Dependencies:
    - dataclasses (std)

Used By:
    - imaging.raster: crop_image(), blit()
    - slicing.orientation: classify()
    - slicing.reveal: Source mapping
    - pipeline: process()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class PixelRect:
    """
    Rectangle in pixel space.

    Coordinates are relative to the image origin (0, 0). Values may be
    fractional: crop selectors work in scaled display space and do not
    always land on whole pixels.

    The region is [x, x + width) x [y, y + height).

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent

    Invariants:
        - x >= 0, y >= 0
        - width > 0, height > 0

    Example:
        >>> rect = PixelRect(0, 0, 1000, 500)
        >>> rect.bottom
        500
        >>> rect.fits_within(1000, 1000)
        True
    """

    x: Number
    y: Number
    width: Number
    height: Number

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        if self.x < 0:
            raise ValueError(f"x must be >= 0: {self.x}")
        if self.y < 0:
            raise ValueError(f"y must be >= 0: {self.y}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0: {self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> Number:
        """X-coordinate of the right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> Number:
        """Y-coordinate of the bottom edge (exclusive)."""
        return self.y + self.height

    @property
    def is_integral(self) -> bool:
        """True when every coordinate is a whole number of pixels."""
        return all(float(v).is_integer() for v in (self.x, self.y, self.width, self.height))

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def fits_within(self, width: Number, height: Number) -> bool:
        """
        Check if this rectangle lies entirely inside a width x height buffer.

        Args:
            width: Buffer width in pixels
            height: Buffer height in pixels

        Returns:
            True if right <= width and bottom <= height
        """
        return self.right <= width and self.bottom <= height

    def as_box(self) -> tuple:
        """
        Get as (left, top, right, bottom) tuple for PIL.

        Returns:
            Tuple suitable for Image.crop() or the box= argument of resize()
        """
        return (self.x, self.y, self.right, self.bottom)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> PixelRect:
        """
        Deserialize from dictionary.

        Accepts both the long keys (width/height) and the short keys (w/h)
        used by crop selectors.

        Args:
            data: Dict with x, y and width/height (or w/h)

        Returns:
            PixelRect instance
        """
        width = data["width"] if "width" in data else data["w"]
        height = data["height"] if "height" in data else data["h"]
        return cls(x=data["x"], y=data["y"], width=width, height=height)

    @classmethod
    def parse(cls, text: str) -> PixelRect:
        """
        Parse an "X,Y,W,H" string.

        Raises:
            ValueError: If the string does not hold four numbers
        """
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 4:
            raise ValueError(f"Expected X,Y,W,H but got {text!r}")
        values = [float(p) for p in parts]
        x, y, w, h = (int(v) if v.is_integer() else v for v in values)
        return cls(x, y, w, h)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"PixelRect({self.x}, {self.y}, {self.width}, {self.height})"
