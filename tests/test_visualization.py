"""Tests for thumbnails, annotation and reports."""

import json

import numpy as np
import pytest

from config import COLOR_HIGH, COLOR_MEDIUM, COLOR_LOW, COLOR_CONTEXT_BG
from models import BoundingBox
from visualization.thumbnails import (
    thumbnail_layout,
    render_mask_thumbnail,
    render_context_thumbnail,
    create_shape_thumbnails,
)
from visualization.draw_shapes import confidence_color, draw_detected_shapes
from visualization.report import format_report, build_summary, DETECTION_TIPS


# --- thumbnails --------------------------------------------------------------

@pytest.mark.parametrize("box", [
    BoundingBox(0, 0, 200, 100),
    BoundingBox(5, 5, 40, 160),
    BoundingBox(0, 0, 60, 60),
])
def test_layout_fits_and_centers(box):
    ox, oy, sw, sh = thumbnail_layout(box)

    assert 0 <= ox and 0 <= oy
    assert ox + sw <= 120 and oy + sh <= 120
    assert abs(2 * ox + sw - 120) <= 1
    assert abs(2 * oy + sh - 120) <= 1
    assert sw / sh == pytest.approx(box.width / box.height, rel=0.05)
    # the longer side fills 85% of the square
    assert max(sw, sh) == pytest.approx(102, abs=1)


def test_mask_thumbnail_draws_roads_black_on_white():
    mask = np.zeros((100, 100), dtype=np.uint8)
    mask[10:90, 10:90] = 255

    thumb = render_mask_thumbnail(BoundingBox(10, 10, 80, 80), mask)

    assert thumb.shape == (120, 120, 3)
    assert tuple(thumb[60, 60]) == (0, 0, 0)
    assert tuple(thumb[0, 0]) == (255, 255, 255)


def test_context_thumbnail_shows_crop_in_green_frame():
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    image[:] = (10, 20, 30)

    thumb = render_context_thumbnail(BoundingBox(10, 10, 80, 40), image)

    assert tuple(thumb[60, 60]) == (10, 20, 30)
    assert tuple(thumb[0, 0]) == COLOR_CONTEXT_BG
    assert np.all(thumb == COLOR_HIGH, axis=-1).any()


def test_context_thumbnail_accepts_grayscale():
    gray = np.full((50, 50), 77, dtype=np.uint8)
    _, context = create_shape_thumbnails(BoundingBox(0, 0, 50, 50), gray, gray)
    assert context.shape == (120, 120, 3)
    assert tuple(context[60, 60]) == (77, 77, 77)


# --- drawing -----------------------------------------------------------------

@pytest.mark.parametrize("confidence, color", [
    (1.0, COLOR_HIGH),
    (0.81, COLOR_HIGH),
    (0.8, COLOR_MEDIUM),
    (0.7, COLOR_MEDIUM),
    (0.6, COLOR_LOW),
    (0.3, COLOR_LOW),
])
def test_confidence_color(confidence, color):
    assert confidence_color(confidence) == color


def test_draw_detected_shapes_leaves_input_untouched(make_shape):
    image = np.full((100, 100, 3), 255, dtype=np.uint8)
    shape = make_shape(confidence=0.9, box=BoundingBox(20, 30, 40, 40))

    out = draw_detected_shapes(image, [shape])

    assert out.shape == image.shape
    assert (image == 255).all()
    assert tuple(out[30, 40]) == COLOR_HIGH    # top edge of the box


def test_draw_detected_shapes_on_grayscale(make_shape):
    gray = np.zeros((60, 60), dtype=np.uint8)
    out = draw_detected_shapes(gray, [make_shape()])
    assert out.shape == (60, 60, 3)


# --- reports -----------------------------------------------------------------

def test_empty_report_gives_tips():
    text = format_report([])
    assert "No significant road shapes detected" in text
    for tip in DETECTION_TIPS:
        assert tip in text


def test_report_lists_each_shape(make_shape):
    shape = make_shape(shape_type="Square-like", confidence=0.95, area=9801, vertices=4)

    text = format_report([shape])

    assert "Found 1 distinctive road shape." in text
    assert "1. Square-like" in text
    assert "Confidence: 95.0%" in text
    assert "Area: 9801 px²" in text
    assert "Complexity: 10%" in text
    assert "Vertices: 4" in text


def test_report_pluralizes(make_shape):
    text = format_report([make_shape("shape_0"), make_shape("shape_1")])
    assert "Found 2 distinctive road shapes." in text
    assert "2. Linear" in text


def test_summary_is_json_serializable(make_shape):
    summary = build_summary("city", [make_shape(box=BoundingBox(1, 2, 30, 40))])
    decoded = json.loads(json.dumps(summary))

    assert decoded["image"] == "city"
    assert decoded["shape_count"] == 1
    entry = decoded["shapes"][0]
    assert entry["bounding_box"] == [1, 2, 30, 40]
    assert entry["geometric_properties"]["vertices"] == 4


def test_context_frame_sits_outside_the_crop():
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    image[:] = (10, 20, 30)
    box = BoundingBox(10, 10, 80, 40)
    ox, oy, sw, sh = thumbnail_layout(box)

    thumb = render_context_thumbnail(box, image)

    # crop corners keep image pixels
    for y, x in [(oy, ox), (oy, ox + sw - 1), (oy + sh - 1, ox), (oy + sh - 1, ox + sw - 1)]:
        assert tuple(thumb[y, x]) == (10, 20, 30)
    # two frame rows/columns just outside
    for y, x in [(oy - 1, ox + 5), (oy - 2, ox + 5), (oy + 5, ox - 1), (oy + 5, ox - 2),
                 (oy + sh, ox + 5), (oy + sh + 1, ox + 5), (oy + 5, ox + sw), (oy + 5, ox + sw + 1)]:
        assert tuple(thumb[y, x]) == COLOR_HIGH
    assert tuple(thumb[oy - 3, ox + 5]) == COLOR_CONTEXT_BG
