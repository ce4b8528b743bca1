"""
Command-line front end: slice a photo into four grid images.

Usage:
    grid-slicer photo.jpg --crop 0,0,1600,900 --out grid.zip
    grid-slicer tall.png --aspect 9:16 --basic --individual out/
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import SlicerConfig
from .core.errors import SlicerError
from .core.models import PixelRect
from .output.preview import render_grid_preview
from .output.zip_writer import DEFAULT_PREFIX, DEFAULT_ZIP_NAME, write_grid_zip, write_individual
from .pipeline import ProcessResult, run
from .slicing.orientation import DEFAULT_ASPECT, parse_aspect

logger = logging.getLogger(__name__)

_DEFAULTS = SlicerConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-slicer",
        description="Slice a photo into 4 images for a 2x2 grid post",
    )
    parser.add_argument("image", type=Path, help="Source image")
    crop = parser.add_mutually_exclusive_group()
    crop.add_argument("--crop", type=PixelRect.parse, metavar="X,Y,W,H",
                      help="Crop rectangle in source pixels")
    crop.add_argument("--aspect", type=parse_aspect, default=DEFAULT_ASPECT,
                      help="Centred crop aspect when --crop is not given (default 16:9)")
    parser.add_argument("--basic", action="store_true",
                        help="Plain tiles instead of extended reveal")
    parser.add_argument("--out", "-o", type=Path,
                        help=f"ZIP output path (default ./{DEFAULT_ZIP_NAME}.zip)")
    parser.add_argument("--no-readme", action="store_true", help="Leave README.txt out of the ZIP")
    parser.add_argument("--individual", type=Path, metavar="DIR",
                        help="Write images separately into DIR instead of a ZIP")
    parser.add_argument("--prefix", default=DEFAULT_PREFIX, help="Filename prefix for --individual")
    parser.add_argument("--preview", type=Path, metavar="PATH", help="Also write a grid preview PNG")
    parser.add_argument("--quality", type=float, default=_DEFAULTS.quality,
                        help="JPEG quality 0..1")
    parser.add_argument("--landscape-multiplier", type=float, default=_DEFAULTS.landscape_multiplier)
    parser.add_argument("--portrait-multiplier", type=float,
                        default=_DEFAULTS.portrait_multiplier)
    parser.add_argument("--fade-opacity", type=float, default=_DEFAULTS.fade_opacity)
    parser.add_argument("--workers", type=int, default=_DEFAULTS.max_workers)
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = SlicerConfig(
            quality=args.quality,
            landscape_multiplier=args.landscape_multiplier,
            portrait_multiplier=args.portrait_multiplier,
            fade_opacity=args.fade_opacity,
            max_workers=args.workers,
        )
        result = run(
            args.image,
            args.crop,
            not args.basic,
            config=config,
            aspect=args.aspect,
        )
        logger.info(f"Mode: {result.mode.mode.value} - {result.mode.description}")
        logger.info(f"Processed in {result.duration_s:.2f}s")
        _write_outputs(result, args)
    except (SlicerError, ValueError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


def _write_outputs(result: ProcessResult, args: argparse.Namespace) -> None:
    if args.individual:
        for path in write_individual(result.images, args.individual, args.prefix):
            logger.info(f"  {path}")
    else:
        out = args.out or Path(f"{DEFAULT_ZIP_NAME}.zip")
        path = write_grid_zip(
            result.images, out, result.mode.mode, include_readme=not args.no_readme
        )
        logger.info(f"Saved {path}")

    if args.preview:
        args.preview.parent.mkdir(parents=True, exist_ok=True)
        render_grid_preview(result.images).save(args.preview, format="PNG")
        logger.info(f"Preview saved to {args.preview}")

    logger.info(f"Opened view: {result.mode.opened_view}")


if __name__ == "__main__":
    sys.exit(main())
