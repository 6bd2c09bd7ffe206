"""
Thumbnail rendering for detected road shapes.

This module provides:
    • create_shape_thumbnails(bounding_box, road_mask, image)
    • thumbnail_layout(bounding_box)

Two square thumbnails are produced per shape:
    - mask thumbnail:    roads in black on white
    - context thumbnail: the original crop on light grey, framed in green
"""

from typing import Tuple

import cv2
import numpy as np

from models.shape_geometry import BoundingBox
from config import (
    get_active_params,
    COLOR_ROAD,
    COLOR_PAPER,
    COLOR_CONTEXT_BG,
    COLOR_HIGH,
)


# ---------------------------------------------------------------------
#  LAYOUT: scale the crop into the square and center it
# ---------------------------------------------------------------------

def thumbnail_layout(bounding_box: BoundingBox) -> Tuple[int, int, int, int]:
    """
    Returns (offset_x, offset_y, scaled_w, scaled_h) for a crop placed
    inside a THUMBNAIL_SIZE square, scaled by
    min(size / w, size / h) * THUMBNAIL_FILL.
    """
    params = get_active_params()
    size = params["THUMBNAIL_SIZE"]

    scale = min(size / bounding_box.width, size / bounding_box.height) * params["THUMBNAIL_FILL"]
    scaled_w = max(1, int(bounding_box.width * scale))
    scaled_h = max(1, int(bounding_box.height * scale))

    return (size - scaled_w) // 2, (size - scaled_h) // 2, scaled_w, scaled_h


def _to_bgr(image):
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
    return image


def _crop(image, box: BoundingBox):
    return image[box.y:box.y + box.height, box.x:box.x + box.width]


# ---------------------------------------------------------------------
#  RENDERING
# ---------------------------------------------------------------------

def render_mask_thumbnail(bounding_box: BoundingBox, road_mask) -> np.ndarray:
    """
    Road pixels of the mask crop drawn in black on a white square.
    """
    size = get_active_params()["THUMBNAIL_SIZE"]
    ox, oy, sw, sh = thumbnail_layout(bounding_box)

    canvas = np.full((size, size, 3), COLOR_PAPER, dtype=np.uint8)

    roi = _crop(road_mask, bounding_box)
    scaled = cv2.resize(roi, (sw, sh), interpolation=cv2.INTER_NEAREST)

    region = canvas[oy:oy + sh, ox:ox + sw]
    region[scaled > 0] = COLOR_ROAD
    return canvas


def render_context_thumbnail(bounding_box: BoundingBox, image) -> np.ndarray:
    """
    Original image crop on a light grey square with a green frame.
    """
    size = get_active_params()["THUMBNAIL_SIZE"]
    ox, oy, sw, sh = thumbnail_layout(bounding_box)

    canvas = np.full((size, size, 3), COLOR_CONTEXT_BG, dtype=np.uint8)

    roi = _to_bgr(_crop(image, bounding_box))
    canvas[oy:oy + sh, ox:ox + sw] = cv2.resize(roi, (sw, sh), interpolation=cv2.INTER_AREA)

    # 2 px frame just outside the crop
    cv2.rectangle(canvas, (ox - 1, oy - 1), (ox + sw, oy + sh), COLOR_HIGH, 1)
    cv2.rectangle(canvas, (ox - 2, oy - 2), (ox + sw + 1, oy + sh + 1), COLOR_HIGH, 1)
    return canvas


def create_shape_thumbnails(bounding_box: BoundingBox, road_mask, image):
    """
    Returns (mask_thumbnail, context_thumbnail) as BGR uint8 arrays.
    """
    return (
        render_mask_thumbnail(bounding_box, road_mask),
        render_context_thumbnail(bounding_box, image),
    )
