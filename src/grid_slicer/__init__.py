"""Top-level package for the grid slicer.

Provides subpackages:
- grid_slicer.core – data models and error types
- grid_slicer.imaging – decoding, cropping, resampling and JPEG encoding
- grid_slicer.slicing – quadrant/strip partitions and the reveal extender
- grid_slicer.output – ZIP packaging and grid previews
"""

from importlib.metadata import PackageNotFoundError, version

from .config import SlicerConfig
from .core.errors import SlicerError, DecodeError, BoundsError, EncodeError
from .core.models import PixelRect, Mode, EncodedImage
from .pipeline import process, process_image, run, ProcessResult

try:
    __version__ = version("grid-slicer")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = [
    "__version__",
    "SlicerConfig",
    "SlicerError",
    "DecodeError",
    "BoundsError",
    "EncodeError",
    "PixelRect",
    "Mode",
    "EncodedImage",
    "process",
    "process_image",
    "run",
    "ProcessResult",
]
