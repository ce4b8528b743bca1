"""
Tests for core.models.specs

Test Coverage:
- SliceSpec validation, edges and overlap
- RevealSpec derived destination geometry
- EncodedImage naming
"""

import pytest

from grid_slicer.core.models import CellLabel, EncodedImage, SliceSpec
from grid_slicer.core.models.specs import RevealSpec


def test_slice_spec_rejects_index_out_of_range():
    with pytest.raises(ValueError, match="index must be 1..4"):
        SliceSpec(5, CellLabel.TOP, 0, 0, 10, 10)


def test_slice_spec_rejects_empty_cell():
    with pytest.raises(ValueError, match="empty size"):
        SliceSpec(1, CellLabel.TOP, 0, 0, 10, 0)


def test_slice_spec_box_and_area():
    spec = SliceSpec(2, CellLabel.TOP_RIGHT, 500, 0, 500, 400)
    assert spec.box == (500, 0, 1000, 400)
    assert spec.area == 200_000


def test_slice_spec_overlap_is_exclusive_at_edges():
    left = SliceSpec(1, CellLabel.TOP_LEFT, 0, 0, 50, 50)
    right = SliceSpec(2, CellLabel.TOP_RIGHT, 50, 0, 50, 50)
    shifted = SliceSpec(3, CellLabel.BOTTOM_LEFT, 49, 49, 10, 10)
    assert not left.overlaps(right)
    assert left.overlaps(shifted)


def test_reveal_spec_destination_when_top_clipped():
    """Rows lost above the image become the destination offset."""
    cell = SliceSpec(1, CellLabel.TOP, 0, 0, 800, 400)
    spec = RevealSpec(
        cell=cell, multiplier=1.5, output_width=800, output_height=600,
        extra_height=100.0, scale_x=2.0, scale_y=2.0,
        src_x=0.0, src_y=0.0, src_w=1600.0, src_h=800.0,
        extended_src_y=-200.0, extended_src_h=1200.0,
        clamped_src_y=0.0, clamped_src_bottom=1000.0,
    )
    assert spec.clipped_top
    assert not spec.clipped_bottom
    assert spec.dest_y_offset == pytest.approx(100.0)
    assert spec.dest_height == pytest.approx(500.0)
    assert spec.has_content


def test_encoded_image_filenames_follow_upload_order():
    images = [EncodedImage(i, b"", 1, 1) for i in range(4)]
    assert [img.filename() for img in images] == ["1.jpg", "2.jpg", "3.jpg", "4.jpg"]
    assert images[2].filename("x-grid-") == "x-grid-3.jpg"
    assert images[0].mime_type == "image/jpeg"
