import pytest
import sys
from io import BytesIO
from pathlib import Path

import numpy as np
from PIL import Image

# Add src to sys.path so we can import grid_slicer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


RED = (220, 30, 30)
GREEN = (30, 200, 60)
BLUE = (30, 60, 220)
YELLOW = (240, 220, 40)

BAND_COLORS = (RED, GREEN, BLUE, YELLOW)


def make_strip_image(width: int, height: int, colors=BAND_COLORS) -> Image.Image:
    """Image of len(colors) equal horizontal bands, top to bottom."""
    img = Image.new("RGB", (width, height))
    band = height // len(colors)
    for i, color in enumerate(colors):
        bottom = height if i == len(colors) - 1 else (i + 1) * band
        img.paste(color, (0, i * band, width, bottom))
    return img


def make_quadrant_image(width: int, height: int, colors=BAND_COLORS) -> Image.Image:
    """Image with a distinct solid colour in each quadrant (TL, TR, BL, BR)."""
    img = Image.new("RGB", (width, height))
    hw, hh = width // 2, height // 2
    boxes = [(0, 0, hw, hh), (hw, 0, width, hh), (0, hh, hw, height), (hw, hh, width, height)]
    for color, box in zip(colors, boxes):
        img.paste(color, box)
    return img


def to_png_bytes(img: Image.Image) -> bytes:
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def region_mean(img: Image.Image, box) -> tuple:
    """Mean RGB of a (left, top, right, bottom) region."""
    arr = np.asarray(img.convert("RGB").crop(box), dtype=np.float64)
    return tuple(arr.reshape(-1, 3).mean(axis=0))


def assert_color_close(actual, expected, tol: float = 12.0) -> None:
    diff = max(abs(a - e) for a, e in zip(actual, expected))
    assert diff <= tol, f"{actual} != {expected} (max diff {diff:.1f})"


# Common test fixtures
@pytest.fixture
def strip_image():
    """800x1600 portrait source with four colour bands."""
    return make_strip_image(800, 1600)


@pytest.fixture
def quadrant_image():
    """1000x1000 square source with four coloured quadrants."""
    return make_quadrant_image(1000, 1000)


@pytest.fixture
def sample_image_path(tmp_path: Path, quadrant_image):
    """Quadrant source saved as PNG."""
    path = tmp_path / "sample.png"
    quadrant_image.save(path)
    return path
