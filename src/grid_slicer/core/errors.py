"""
Module: core.errors

Purpose:
    Exception hierarchy raised by the slicing pipeline. Every error is
    fatal to the call that raised it; nothing is retried internally.

Key Classes:
    - SlicerError: Base class for all pipeline failures
    - DecodeError: Source bytes are not a readable raster image
    - BoundsError: Rectangle outside its buffer, or cells fail to tile
    - EncodeError: The JPEG encoder rejected a buffer

Used By:
    - imaging.raster, imaging.encoder, slicing.partition
    - pipeline: Propagates all of these unchanged
    - cli: Top-level error reporting
"""


class SlicerError(Exception):
    """Base class for grid slicer failures."""
    pass


class DecodeError(SlicerError):
    """Source data could not be decoded as an image."""
    pass


class BoundsError(SlicerError):
    """A rectangle does not fit inside its buffer."""
    pass


class EncodeError(SlicerError):
    """A buffer could not be encoded."""
    pass
