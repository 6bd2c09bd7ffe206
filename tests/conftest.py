"""Shared test fixtures."""

import cv2
import numpy as np
import pytest

from models import ShapeGeometry, BoundingBox, Classification, DetectedRoadShape


@pytest.fixture
def shape_mask():
    """
    Road mask holding two filled blobs:
      - a long 200x60 bar at (20, 20)
      - a 100x100 square at (300, 150)
    """
    mask = np.zeros((400, 500), dtype=np.uint8)
    cv2.rectangle(mask, (20, 20), (219, 79), 255, -1)
    cv2.rectangle(mask, (300, 150), (399, 249), 255, -1)
    return mask


@pytest.fixture
def map_image():
    """White BGR 'map' with a few dark road strokes and a roundabout."""
    img = np.full((300, 400, 3), 255, dtype=np.uint8)
    cv2.line(img, (0, 150), (399, 150), (40, 40, 40), 8)
    cv2.line(img, (200, 0), (200, 299), (40, 40, 40), 8)
    cv2.circle(img, (100, 70), 40, (40, 40, 40), 6)
    return img


@pytest.fixture
def make_shape():
    def _make(shape_id="shape_0", shape_type="Linear", confidence=0.9, area=1000.0,
              box=BoundingBox(0, 0, 50, 50), vertices=4):
        geometry = ShapeGeometry(
            area=area,
            aspect_ratio=box.width / box.height,
            solidity=0.9,
            complexity=0.1,
            vertices=vertices,
            bounding_box=box,
        )
        return DetectedRoadShape(
            id=shape_id,
            classification=Classification(shape_type, f"{shape_type} formation", confidence),
            geometry=geometry,
        )
    return _make
