"""
Module: slicing.orientation

Purpose:
    Decide whether a crop is sliced as portrait strips or landscape
    quadrants, and describe what each mode looks like once posted.

Key Functions:
    - classify(): PixelRect -> Mode
    - processing_mode(): Mode plus user-facing descriptions
    - default_crop(): Largest centred crop of a given aspect ratio

Dependencies:
    - grid_slicer.core.models: PixelRect, Mode

Used By:
    - pipeline: Mode dispatch
    - cli: Default crop when none is given
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_slicer.core.models import Mode, PixelRect

# Aspect ratio the crop selector locks to by default
DEFAULT_ASPECT = 16 / 9


def classify(rect: PixelRect) -> Mode:
    """
    Classify a crop rectangle.

    Strictly taller than wide is portrait; everything else, squares
    included, is landscape.

    Example:
        >>> classify(PixelRect(0, 0, 100, 100))
        <Mode.LANDSCAPE: 'landscape'>
        >>> classify(PixelRect(0, 0, 100, 101))
        <Mode.PORTRAIT: 'portrait'>
    """
    return Mode.PORTRAIT if rect.height > rect.width else Mode.LANDSCAPE


@dataclass(frozen=True)
class ProcessingMode:
    """
    Description of how a crop will be posted.

    Attributes:
        mode: Portrait or landscape
        description: How the image is split
        grid_preview: What the feed grid shows
        opened_view: What a viewer sees after opening the post
    """
    mode: Mode
    description: str
    grid_preview: str
    opened_view: str

    @property
    def is_portrait(self) -> bool:
        return self.mode is Mode.PORTRAIT


_DESCRIPTIONS = {
    Mode.PORTRAIT: ProcessingMode(
        mode=Mode.PORTRAIT,
        description="Horizontal strips - swipe to reveal full portrait",
        grid_preview="Creative composite (strips in grid)",
        opened_view="Swipe 1→2→3→4 reveals complete image",
    ),
    Mode.LANDSCAPE: ProcessingMode(
        mode=Mode.LANDSCAPE,
        description="Quadrant grid - seamless panorama on timeline",
        grid_preview="Seamless panorama",
        opened_view="Each quadrant with extended content",
    ),
}


def processing_mode(rect: PixelRect) -> ProcessingMode:
    """Get the processing-mode description for a crop."""
    return _DESCRIPTIONS[classify(rect)]


def default_crop(width: int, height: int, aspect: float = DEFAULT_ASPECT) -> PixelRect:
    """
    Largest centred crop with the given width/height ratio.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        aspect: Target width / height (16/9 landscape, 9/16 portrait)

    Returns:
        Integer PixelRect inside the image

    Raises:
        ValueError: If the image is empty or aspect is not positive

    Example:
        >>> default_crop(1600, 1600)
        PixelRect(0, 350, 1600, 900)
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive: {width}x{height}")
    if aspect <= 0:
        raise ValueError(f"aspect must be positive: {aspect}")

    if width / height > aspect:
        # Image is wider than the target: full height, trim the sides
        crop_h = height
        crop_w = max(1, min(width, round(height * aspect)))
    else:
        crop_w = width
        crop_h = max(1, min(height, round(width / aspect)))

    x = (width - crop_w) // 2
    y = (height - crop_h) // 2
    return PixelRect(x, y, crop_w, crop_h)


def parse_aspect(text: str) -> float:
    """
    Parse "16:9", "9/16" or "1.5" into a width/height ratio.

    Raises:
        ValueError: If the text is not a positive ratio
    """
    for sep in (":", "/"):
        if sep in text:
            w, h = text.split(sep, 1)
            if float(h) == 0:
                raise ValueError(f"aspect height must be non-zero: {text!r}")
            ratio = float(w) / float(h)
            break
    else:
        ratio = float(text)
    if ratio <= 0:
        raise ValueError(f"aspect must be positive: {text!r}")
    return ratio
