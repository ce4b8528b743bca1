"""
Unit Tests for Orientation Classification

Tests classify(), processing-mode descriptions, default crops and
aspect parsing.
"""

import pytest

from grid_slicer.core.models import Mode, PixelRect
from grid_slicer.slicing.orientation import (
    classify,
    default_crop,
    parse_aspect,
    processing_mode,
)


class TestClassify:
    """Tests for classify()."""

    def test_classify_when_taller_than_wide_then_portrait(self):
        assert classify(PixelRect(0, 0, 800, 1600)) is Mode.PORTRAIT

    def test_classify_when_wider_than_tall_then_landscape(self):
        assert classify(PixelRect(0, 0, 1600, 900)) is Mode.LANDSCAPE

    def test_classify_when_square_then_landscape(self):
        assert classify(PixelRect(0, 0, 1000, 1000)) is Mode.LANDSCAPE

    def test_classify_when_one_pixel_taller_then_portrait(self):
        assert classify(PixelRect(0, 0, 1000, 1001)) is Mode.PORTRAIT


class TestProcessingMode:
    """Tests for processing_mode()."""

    def test_portrait_description_mentions_strips(self):
        info = processing_mode(PixelRect(0, 0, 900, 1600))
        assert info.is_portrait
        assert "strips" in info.description

    def test_landscape_description_mentions_panorama(self):
        info = processing_mode(PixelRect(0, 0, 1600, 900))
        assert not info.is_portrait
        assert info.grid_preview == "Seamless panorama"


class TestDefaultCrop:
    """Tests for default_crop()."""

    def test_default_crop_when_square_image_then_centred_16_9(self):
        assert default_crop(1600, 1600) == PixelRect(0, 350, 1600, 900)

    def test_default_crop_when_wide_image_then_trims_sides(self):
        assert default_crop(4000, 900) == PixelRect(1200, 0, 1600, 900)

    def test_default_crop_when_portrait_aspect_then_portrait_rect(self):
        rect = default_crop(1600, 1600, 9 / 16)
        assert rect == PixelRect(350, 0, 900, 1600)
        assert classify(rect) is Mode.PORTRAIT

    def test_default_crop_always_fits(self):
        rect = default_crop(333, 777, 1.37)
        assert rect.fits_within(333, 777)

    def test_default_crop_when_bad_aspect_then_raises(self):
        with pytest.raises(ValueError):
            default_crop(100, 100, 0)


class TestParseAspect:
    """Tests for parse_aspect()."""

    @pytest.mark.parametrize(
        "text,expected",
        [("16:9", 16 / 9), ("9/16", 9 / 16), ("1.5", 1.5)],
    )
    def test_parse_aspect_when_valid_then_ratio(self, text, expected):
        assert parse_aspect(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["16:0", "-1", "0", "wide"])
    def test_parse_aspect_when_invalid_then_raises(self, text):
        with pytest.raises(ValueError):
            parse_aspect(text)
