"""
Module: config

Purpose:
    Configuration dataclass for the slicing pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - SlicerConfig: Encoding quality, reveal multipliers, fade, workers

Dependencies:
    - dataclasses (std)

Used By:
    - pipeline: process(), run()
    - cli: Built from command-line flags
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_slicer.core.models import Mode
from grid_slicer.imaging.encoder import DEFAULT_QUALITY, OUTPUT_FORMAT
from grid_slicer.slicing.reveal import LANDSCAPE_MULTIPLIER, PORTRAIT_MULTIPLIER


@dataclass(frozen=True)
class SlicerConfig:
    """
    Configuration for slicing (immutable).

    Attributes:
        quality: JPEG quality on a 0..1 scale
        landscape_multiplier: Reveal height / quadrant height
        portrait_multiplier: Reveal height / strip height
        fade_opacity: Opacity of black at the outer edge of a fade
                      (0 disables fades)
        max_workers: Threads used for the four cells (1 = sequential)
        image_format: Output format (JPEG only)

    Example:
        >>> config = SlicerConfig(landscape_multiplier=2.0, max_workers=1)
        >>> config.multiplier_for(Mode.LANDSCAPE)
        2.0
    """

    quality: float = DEFAULT_QUALITY
    landscape_multiplier: float = LANDSCAPE_MULTIPLIER
    portrait_multiplier: float = PORTRAIT_MULTIPLIER
    fade_opacity: float = 1.0
    max_workers: int = 4
    image_format: str = OUTPUT_FORMAT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not 0 < self.quality <= 1:
            raise ValueError(f"quality must be 0 < q <= 1: {self.quality}")
        if self.landscape_multiplier < 1:
            raise ValueError(
                f"landscape_multiplier must be >= 1: {self.landscape_multiplier}"
            )
        if self.portrait_multiplier < 1:
            raise ValueError(
                f"portrait_multiplier must be >= 1: {self.portrait_multiplier}"
            )
        if not 0 <= self.fade_opacity <= 1:
            raise ValueError(f"fade_opacity must be 0..1: {self.fade_opacity}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
        if self.image_format.upper() != OUTPUT_FORMAT:
            raise ValueError(f"image_format must be {OUTPUT_FORMAT}: {self.image_format!r}")

    def multiplier_for(self, mode: Mode) -> float:
        """Reveal multiplier for a mode."""
        if mode is Mode.PORTRAIT:
            return self.portrait_multiplier
        return self.landscape_multiplier
