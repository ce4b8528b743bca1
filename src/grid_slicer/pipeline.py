"""
Module: pipeline

Purpose:
    Orchestrate a complete slicing run.
    Load → Crop → Classify → Slice or Extend → Encode

Key Functions:
    - process(): Source + crop rect -> four EncodedImages
    - process_image(): Same, from an already-decoded image
    - run(): process() plus default crop, mode metadata and timing

Key Classes:
    - ProcessResult: Output of run()

Dependencies:
    - grid_slicer.imaging: Decode, crop, encode
    - grid_slicer.slicing: Classification, partition, reveal

Used By:
    - cli: Command-line front end
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Union

from PIL import Image

from .config import SlicerConfig
from .core.models import EncodedImage, PixelRect
from .imaging.encoder import encode
from .imaging.raster import ImageSource, crop_image, load_image, to_rgb
from .slicing.fanout import map_cells
from .slicing.orientation import (
    DEFAULT_ASPECT,
    ProcessingMode,
    classify,
    default_crop,
    processing_mode,
)
from .slicing.partition import slice_cells
from .slicing.reveal import extend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """
    Result of a slicing run (immutable).

    Attributes:
        images: Four encoded images in upload order
        mode: Processing-mode description for the crop
        crop_rect: Crop rectangle that was used
        extended: Whether extended-reveal output was produced
        duration_s: Wall-clock time for the run

    Example:
        >>> result = run(Path("photo.jpg"), PixelRect(0, 0, 1600, 900))
        >>> [img.filename() for img in result.images]
        ['1.jpg', '2.jpg', '3.jpg', '4.jpg']
    """
    images: tuple[EncodedImage, ...]
    mode: ProcessingMode
    crop_rect: PixelRect
    extended: bool
    duration_s: float


def process(
    source: ImageSource,
    crop_rect: PixelRect,
    use_extended_reveal: bool = True,
    *,
    config: Optional[SlicerConfig] = None,
) -> List[EncodedImage]:
    """
    Slice a source image into four encoded grid images.

    Pipeline:
    1. Decode the source
    2. Crop to crop_rect
    3. Classify portrait/landscape from crop_rect
    4. Basic: split the crop into quadrants or strips
       Extended: build taller reveal images from the original
    5. Encode the four images in order

    Args:
        source: Image bytes, binary file, or path
        crop_rect: Crop in source-image pixels
        use_extended_reveal: Extended reveal (True) or plain tiles (False)
        config: Optional slicing configuration

    Returns:
        Four EncodedImages; index 0 is upload position 1

    Raises:
        DecodeError: If the source is not a readable image
        BoundsError: If crop_rect is outside the image
        EncodeError: If a cell cannot be encoded
    """
    image = load_image(source)
    return process_image(image, crop_rect, use_extended_reveal, config=config)


def process_image(
    image: Image.Image,
    crop_rect: PixelRect,
    use_extended_reveal: bool = True,
    *,
    config: Optional[SlicerConfig] = None,
) -> List[EncodedImage]:
    """
    Slice an already-decoded image.

    Same contract as process(). The image is normalised to RGB the way
    load_image() does it (alpha over black, 16-bit samples scaled), so
    both entry points give the same pixels. The caller's image is only
    read, never modified.
    """
    config = config or SlicerConfig()

    image = to_rgb(image)
    cropped = crop_image(image, crop_rect)
    mode = classify(crop_rect)

    if use_extended_reveal:
        cells = extend(
            cropped,
            image,
            crop_rect,
            mode,
            config.multiplier_for(mode),
            fade_opacity=config.fade_opacity,
            max_workers=config.max_workers,
        )
    else:
        cells = slice_cells(cropped, mode, max_workers=config.max_workers)

    encoded = map_cells(
        lambda item: encode(item[1], quality=config.quality, index=item[0]),
        list(enumerate(cells)),
        config.max_workers,
    )

    logger.info(
        f"Sliced {crop_rect!r} as {mode.value} "
        f"({'extended' if use_extended_reveal else 'basic'}): "
        + ", ".join(f"{e.width}x{e.height}" for e in encoded)
    )
    return encoded


def run(
    source: Union[ImageSource, Image.Image],
    crop_rect: Optional[PixelRect] = None,
    use_extended_reveal: bool = True,
    *,
    config: Optional[SlicerConfig] = None,
    aspect: float = DEFAULT_ASPECT,
) -> ProcessResult:
    """
    Run a slicing pass and collect metadata for reporting.

    Args:
        source: Image bytes, binary file, path, or a decoded image
        crop_rect: Crop in source pixels; None uses the largest centred
                   crop of the given aspect
        use_extended_reveal: Extended reveal (True) or plain tiles (False)
        config: Optional slicing configuration
        aspect: Width / height of the default crop

    Raises:
        Same as process()
    """
    start_time = time.perf_counter()
    image = source if isinstance(source, Image.Image) else load_image(source)
    if crop_rect is None:
        crop_rect = default_crop(image.width, image.height, aspect)
    images = process_image(image, crop_rect, use_extended_reveal, config=config)
    duration = time.perf_counter() - start_time

    logger.debug(f"Slicing finished in {duration:.3f}s")
    return ProcessResult(
        images=tuple(images),
        mode=processing_mode(crop_rect),
        crop_rect=crop_rect,
        extended=use_extended_reveal,
        duration_s=duration,
    )
