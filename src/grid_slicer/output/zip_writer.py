"""
Module: output.zip_writer

Purpose:
    Package the four grid images for upload: a ZIP with the images named
    in upload order plus a README explaining the posting steps, or the
    images written individually.

Key Functions:
    - write_grid_zip(): ZIP with 1.jpg..4.jpg and README.txt
    - write_individual(): <prefix>-1.jpg..<prefix>-4.jpg in a directory
    - generate_readme(): Upload instructions for a mode

Dependencies:
    - zipfile (std)
    - grid_slicer.core.models: EncodedImage, Mode

Used By:
    - cli: --out / --individual
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List, Sequence

from grid_slicer.core.models import EncodedImage, Mode

logger = logging.getLogger(__name__)

DEFAULT_ZIP_NAME = "x-grid-images"
DEFAULT_PREFIX = "x-grid"

GRID_COUNT = 4


def write_grid_zip(
    images: Sequence[EncodedImage],
    output_path: Path,
    mode: Mode,
    *,
    include_readme: bool = True,
) -> Path:
    """
    Write the four images as a ZIP archive.

    Creates a ZIP file with structure:
        x-grid-images.zip
        ├── 1.jpg          # Upload first (top-left / top strip)
        ├── 2.jpg
        ├── 3.jpg
        ├── 4.jpg
        └── README.txt     # Posting instructions (optional)

    Args:
        images: Four EncodedImages in upload order
        output_path: Path for .zip file (will append .zip if missing)
        mode: Mode the images were sliced with (selects README text)
        include_readme: Whether to include README.txt

    Returns:
        Path to created ZIP file

    Raises:
        ValueError: If there are not exactly four images
        OSError: If output path is not writable
    """
    _check_count(images)

    if output_path.suffix != ".zip":
        output_path = output_path.with_suffix(".zip")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating ZIP export at {output_path}")

    with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zf:
        for image in _in_upload_order(images):
            zf.writestr(image.filename(), image.data)
        if include_readme:
            zf.writestr("README.txt", generate_readme(mode))

    return output_path


def write_individual(
    images: Sequence[EncodedImage],
    output_dir: Path,
    prefix: str = DEFAULT_PREFIX,
) -> List[Path]:
    """
    Write the four images as separate files.

    Args:
        images: Four EncodedImages in upload order
        output_dir: Directory for the files (created if needed)
        prefix: Filename prefix; files are named "<prefix>-1.jpg" etc.

    Returns:
        Paths written, in upload order

    Raises:
        ValueError: If there are not exactly four images
    """
    _check_count(images)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for image in _in_upload_order(images):
        path = output_dir / image.filename(f"{prefix}-")
        path.write_bytes(image.data)
        paths.append(path)

    logger.info(f"Wrote {len(paths)} images to {output_dir}")
    return paths


def _check_count(images: Sequence[EncodedImage]) -> None:
    if len(images) != GRID_COUNT:
        raise ValueError(f"Expected {GRID_COUNT} images, got {len(images)}")


def _in_upload_order(images: Sequence[EncodedImage]) -> List[EncodedImage]:
    """Sort by index, rejecting duplicate or missing positions."""
    ordered = sorted(images, key=lambda image: image.index)
    if [image.index for image in ordered] != list(range(GRID_COUNT)):
        raise ValueError(
            f"Image indices must be 0..{GRID_COUNT - 1}: "
            f"{[image.index for image in images]}"
        )
    return ordered


def generate_readme(mode: Mode) -> str:
    """Generate README.txt content for a mode."""
    is_portrait = mode is Mode.PORTRAIT
    mode_name = (
        "PORTRAIT (Stacked Reveal)" if is_portrait else "LANDSCAPE (Seamless Panorama)"
    )

    lines = [
        "X Image Slicer - Upload Instructions",
        "=" * 37,
        f"Mode: {mode_name}",
        "",
        "HOW TO POST ON X:",
        "-" * 17,
        "1. Open X (Twitter) and create a new post",
        "2. Click the image/media icon",
        "3. Select ALL 4 images at once (1.jpg through 4.jpg)",
        "4. IMPORTANT: Verify they appear in order: 1, 2, 3, 4",
        "5. Post!",
        "",
        "IMAGE LAYOUT:",
        "-" * 13,
        "Upload order maps to X's 2x2 grid:",
        "",
        "+-----+-----+",
        "|  1  |  2  |",
        "+-----+-----+",
        "|  3  |  4  |",
        "+-----+-----+",
        "",
    ]

    if is_portrait:
        lines.extend([
            "PORTRAIT MODE - HOW IT WORKS:",
            "-" * 29,
            "- Timeline: Shows a creative 2x2 grid arrangement",
            "- When Opened: Swiping through 1->2->3->4 reveals the full portrait!",
            "",
            "The 4 images are horizontal strips:",
            "  1 = Top of your image",
            "  2 = Upper-middle",
            "  3 = Lower-middle",
            "  4 = Bottom",
            "",
            "When someone swipes through them on X, they stack to form",
            "your complete portrait photo. It's like a vertical puzzle!",
            "",
            'PRO TIP: Add a caption like "Swipe to see the full picture"',
        ])
    else:
        lines.extend([
            "LANDSCAPE MODE - HOW IT WORKS:",
            "-" * 30,
            "- Timeline: The 4 quadrants form a SEAMLESS panorama",
            "- When Opened: Each image shows extended content",
            "",
            "The 4 images are quadrants:",
            "  1 = Top-Left      2 = Top-Right",
            "  3 = Bottom-Left   4 = Bottom-Right",
            "",
            "In the timeline, they tile together perfectly.",
            "When tapped, each image reveals more content above/below.",
            "",
            "PRO TIP: Works best with wide landscape photos or panoramas!",
        ])

    lines.extend([
        "",
        "TROUBLESHOOTING:",
        "-" * 16,
        "- Images not in order? Re-select them, ensuring 1.jpg is first",
        "- Grid looks wrong? Check that X hasn't auto-cropped unexpectedly",
        "- Effect not working? Make sure you uploaded exactly 4 images",
        "",
        "Created with X Image Slicer",
        "",
    ])

    return "\n".join(lines)
