"""
Visualization utilities for rendering detected road shapes.

This module provides:
    • confidence_color(confidence)
    • draw_detected_shapes(img, shapes)

Used by:
    - visualization.save_outputs
"""

from typing import List

import cv2

from models.detected_shape import DetectedRoadShape
from config import COLOR_HIGH, COLOR_MEDIUM, COLOR_LOW


# ---------------------------------------------------------------------
#  COLOR by confidence tier
# ---------------------------------------------------------------------

def confidence_color(confidence: float):
    """
    > 0.8 → green, > 0.6 → orange, otherwise grey (BGR).
    """
    if confidence > 0.8:
        return COLOR_HIGH
    if confidence > 0.6:
        return COLOR_MEDIUM
    return COLOR_LOW


# ---------------------------------------------------------------------
#  Draw contours, boxes and labels
# ---------------------------------------------------------------------

def draw_detected_shapes(image, shapes: List[DetectedRoadShape], thickness: int = 2):
    """
    Returns a BGR copy of the image with every shape's contour, bounding
    box and "<rank>. <type> <confidence>%" label drawn in its
    confidence color.
    """
    if image.ndim == 2:
        out = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] == 4:
        out = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
    else:
        out = image.copy()

    for rank, shape in enumerate(shapes, start=1):
        color = confidence_color(shape.confidence)

        if shape.contour is not None:
            cv2.drawContours(out, [shape.contour], -1, color, thickness)

        box = shape.bounding_box
        if box is None:
            continue

        cv2.rectangle(
            out,
            (box.x, box.y),
            (box.x + box.width, box.y + box.height),
            color,
            1
        )

        label = f"{rank}. {shape.shape_type} {shape.confidence * 100:.0f}%"
        cv2.putText(
            out,
            label,
            (box.x, max(box.y - 5, 12)),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.45,
            color,
            1,
            cv2.LINE_AA
        )

    return out
