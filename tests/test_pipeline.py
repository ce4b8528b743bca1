"""
Integration Tests for the Slicing Pipeline

Tests process() / run() end to end: decode, crop, classify, slice or
extend, encode.
"""

import numpy as np
import pytest
from PIL import Image

from conftest import (
    BAND_COLORS,
    BLUE,
    GREEN,
    RED,
    YELLOW,
    assert_color_close,
    make_quadrant_image,
    region_mean,
    to_png_bytes,
)
from grid_slicer import SlicerConfig
from grid_slicer.core.errors import BoundsError, DecodeError, EncodeError
from grid_slicer.core.models import Mode, PixelRect
from grid_slicer.imaging.encoder import decode_encoded
from grid_slicer.pipeline import process, process_image, run


def _decoded(encoded):
    return [decode_encoded(e) for e in encoded]


class TestProcessBasic:
    """Basic (non-extended) slicing."""

    def test_landscape_square_crop_gives_four_quadrants(self, quadrant_image):
        encoded = process(to_png_bytes(quadrant_image), PixelRect(0, 0, 1000, 1000), False)

        assert [e.index for e in encoded] == [0, 1, 2, 3]
        assert [(e.width, e.height) for e in encoded] == [(500, 500)] * 4
        for image, color in zip(_decoded(encoded), (RED, GREEN, BLUE, YELLOW)):
            assert_color_close(region_mean(image, (50, 50, 450, 450)), color)

    def test_portrait_crop_gives_four_strips(self, strip_image):
        encoded = process(to_png_bytes(strip_image), PixelRect(0, 0, 800, 1600), False)

        assert [(e.width, e.height) for e in encoded] == [(800, 400)] * 4
        for image, color in zip(_decoded(encoded), BAND_COLORS):
            assert_color_close(region_mean(image, (50, 50, 750, 350)), color)

    def test_crop_offset_is_honoured(self):
        source = make_quadrant_image(2000, 2000)
        encoded = process(to_png_bytes(source), PixelRect(1000, 1000, 1000, 1000), False)
        for image in _decoded(encoded):
            assert_color_close(region_mean(image, (50, 50, 450, 450)), YELLOW)

    def test_odd_crop_sizes_tile_with_remainder(self, quadrant_image):
        encoded = process_image(quadrant_image, PixelRect(0, 0, 1000, 999), False)
        assert [(e.width, e.height) for e in encoded] == [
            (500, 499), (500, 499), (500, 500), (500, 500)
        ]


class TestProcessExtended:
    """Extended-reveal slicing."""

    def test_portrait_extended_outputs_are_taller(self, strip_image):
        encoded = process(to_png_bytes(strip_image), PixelRect(0, 0, 800, 1600))

        assert [(e.width, e.height) for e in encoded] == [(800, 600)] * 4
        first = _decoded(encoded)[0]
        assert_color_close(region_mean(first, (0, 0, 800, 90)), (0, 0, 0))
        assert_color_close(region_mean(first, (0, 110, 800, 490)), RED)
        assert_color_close(region_mean(first, (0, 510, 800, 600)), GREEN)

    def test_landscape_extended_outputs_are_two_and_a_half_times_tall(self, quadrant_image):
        encoded = process_image(quadrant_image, PixelRect(0, 0, 1000, 1000))
        assert [(e.width, e.height) for e in encoded] == [(500, 1250)] * 4

    def test_config_multiplier_is_used(self, quadrant_image):
        config = SlicerConfig(landscape_multiplier=2.0, max_workers=1)
        encoded = process_image(quadrant_image, PixelRect(0, 0, 1000, 1000), config=config)
        assert encoded[0].height == 1000

    def test_parallel_and_sequential_runs_agree(self, quadrant_image):
        rect = PixelRect(100, 0, 800, 1000)
        parallel = process_image(quadrant_image, rect, config=SlicerConfig(max_workers=4))
        sequential = process_image(quadrant_image, rect, config=SlicerConfig(max_workers=1))

        for a, b in zip(_decoded(parallel), _decoded(sequential)):
            assert np.array_equal(np.asarray(a), np.asarray(b))

    def test_repeated_runs_are_pixel_identical(self, strip_image):
        rect = PixelRect(0, 200, 800, 1200)
        first = _decoded(process_image(strip_image, rect))
        second = _decoded(process_image(strip_image, rect))
        for a, b in zip(first, second):
            assert np.array_equal(np.asarray(a), np.asarray(b))


class TestProcessErrors:
    """Failure modes."""

    def test_undecodable_source_raises_decode_error(self):
        with pytest.raises(DecodeError):
            process(b"\x00\x01\x02", PixelRect(0, 0, 10, 10))

    def test_crop_outside_image_raises_bounds_error(self, quadrant_image):
        with pytest.raises(BoundsError):
            process_image(quadrant_image, PixelRect(500, 500, 600, 600))

    def test_crop_too_small_to_split_raises_bounds_error(self, quadrant_image):
        with pytest.raises(BoundsError):
            process_image(quadrant_image, PixelRect(0, 0, 10, 1), False)


class TestDecodedInput:
    """Decoded images get the same normalisation as encoded sources."""

    def test_transparent_image_matches_bytes_path(self):
        transparent = Image.new("RGBA", (100, 100), (255, 255, 255, 0))
        rect = PixelRect(0, 0, 100, 100)

        from_bytes = _decoded(process(to_png_bytes(transparent), rect, False))
        from_image = _decoded(process_image(transparent, rect, False))

        for a, b in zip(from_bytes, from_image):
            assert_color_close(region_mean(b, (5, 5, 45, 45)), (0, 0, 0))
            assert np.array_equal(np.asarray(a), np.asarray(b))

    def test_16_bit_image_is_scaled_not_clipped(self):
        grey = Image.new("I;16", (40, 80), 30000)

        result = run(grey, PixelRect(0, 0, 40, 80), False)

        first = decode_encoded(result.images[0])
        assert_color_close(region_mean(first, (5, 5, 35, 15)), (117, 117, 117), tol=3)

    def test_caller_image_is_not_modified(self):
        transparent = Image.new("RGBA", (10, 10), (255, 255, 255, 0))
        process_image(transparent, PixelRect(0, 0, 10, 10), False)
        assert transparent.mode == "RGBA"
        assert transparent.getpixel((0, 0)) == (255, 255, 255, 0)


class TestRun:
    """Tests for run()."""

    def test_run_without_crop_uses_centred_default(self):
        source = make_quadrant_image(1600, 1600)

        result = run(source, use_extended_reveal=False)

        assert result.crop_rect == PixelRect(0, 350, 1600, 900)
        assert result.mode.mode is Mode.LANDSCAPE
        assert [(e.width, e.height) for e in result.images] == [(800, 450)] * 4
        assert not result.extended
        assert result.duration_s >= 0

    def test_run_reports_portrait_mode(self, sample_image_path):
        result = run(sample_image_path, PixelRect(0, 0, 400, 1000))
        assert result.mode.is_portrait
        assert len(result.images) == 4

    def test_run_accepts_decoded_image(self, quadrant_image):
        result = run(quadrant_image, PixelRect(0, 0, 1000, 1000), False)
        assert result.images[0].width == 500


def test_encode_failure_surfaces_as_encode_error(monkeypatch, quadrant_image):
    """A failing encoder aborts the run with EncodeError."""
    import grid_slicer.pipeline as pipeline

    def broken(image, *, quality, index):
        raise EncodeError(f"JPEG encoding failed for image {index + 1}")

    monkeypatch.setattr(pipeline, "encode", broken)
    with pytest.raises(EncodeError, match="image"):
        process_image(quadrant_image, PixelRect(0, 0, 1000, 1000), False)
