"""Tests for road-mask extraction."""

import cv2
import numpy as np
import pytest

from detectors.road_extractor import extract_road_network, to_grayscale
from utils.errors import RoadExtractionError, RoadShapeError


def test_mask_marks_dark_roads(map_image):
    mask = extract_road_network(map_image)

    assert mask.shape == map_image.shape[:2]
    assert mask.dtype == np.uint8
    assert set(np.unique(mask)) <= {0, 255}

    assert mask[150, 50] == 255     # on the horizontal road
    assert mask[250, 320] == 0      # plain background


def test_blank_image_has_no_roads():
    mask = extract_road_network(np.full((120, 160, 3), 255, dtype=np.uint8))
    assert not mask.any()


def test_grayscale_and_bgra_inputs(map_image):
    gray = cv2.cvtColor(map_image, cv2.COLOR_BGR2GRAY)
    bgra = cv2.cvtColor(map_image, cv2.COLOR_BGR2BGRA)

    from_gray = extract_road_network(gray)
    from_bgra = extract_road_network(bgra)

    assert np.array_equal(from_gray, from_bgra)
    assert np.array_equal(from_gray, extract_road_network(map_image))


def test_to_grayscale_does_not_alias_input():
    gray = np.zeros((10, 10), dtype=np.uint8)
    out = to_grayscale(gray)
    out[0, 0] = 9
    assert gray[0, 0] == 0


@pytest.mark.parametrize("image", [None, np.zeros((0, 0, 3), dtype=np.uint8)])
def test_empty_input_raises(image):
    with pytest.raises(RoadExtractionError):
        extract_road_network(image)


def test_extraction_error_is_recoverable_pipeline_error():
    assert issubclass(RoadExtractionError, RoadShapeError)
