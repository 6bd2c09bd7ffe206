"""
Centralized output-saving utilities for the road-shape pipeline.

This module provides:
    • save_all_outputs(...)
    • save_road_mask(...)
    • save_annotated_shapes(...)
    • save_thumbnails(...)
    • save_report(...)

Uses the drawing and report modules to render, and utils.image_io for
filesystem handling.
"""

import os
from typing import List

import numpy as np

from models.detected_shape import DetectedRoadShape
from visualization.draw_shapes import draw_detected_shapes
from visualization.report import format_report, build_summary
from utils.image_io import save_image, save_text, save_json, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_road_mask(path: str, road_mask: np.ndarray):
    """
    Saves the binary road mask (uint8).
    """
    if road_mask.dtype != np.uint8:
        road_mask = road_mask.astype(np.uint8)
    save_image(path, road_mask)


def save_annotated_shapes(path: str, base_image: np.ndarray, shapes: List[DetectedRoadShape]):
    """
    Draws the ranked shapes on a copy of the base image and saves it.
    """
    save_image(path, draw_detected_shapes(base_image, shapes))


def save_thumbnails(output_dir: str, image_id: str, shapes: List[DetectedRoadShape]):
    """
    Writes both thumbnails of every shape. Returns the written paths.
    """
    written = []
    for shape in shapes:
        if shape.thumbnail is not None:
            path = os.path.join(output_dir, f"{image_id}_{shape.id}_thumb.png")
            save_image(path, shape.thumbnail)
            written.append(path)
        if shape.context_thumbnail is not None:
            path = os.path.join(output_dir, f"{image_id}_{shape.id}_context.png")
            save_image(path, shape.context_thumbnail)
            written.append(path)
    return written


def save_report(output_dir: str, image_id: str, shapes: List[DetectedRoadShape]):
    save_text(os.path.join(output_dir, f"{image_id}_report.txt"), format_report(shapes))
    save_json(os.path.join(output_dir, f"{image_id}_shapes.json"), build_summary(image_id, shapes))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    road_mask: np.ndarray,
    shapes: List[DetectedRoadShape]
):
    """
    Saves every output artifact for one processed image.

    Example output:
        <id>_mask.png
        <id>_shapes.png
        <id>_report.txt
        <id>_shapes.json
        <id>_<shape id>_thumb.png
        <id>_<shape id>_context.png
    """

    ensure_output_dir(output_dir)

    # 1) Road mask
    save_road_mask(os.path.join(output_dir, f"{image_id}_mask.png"), road_mask)

    # 2) Ranked shapes drawn on the original
    save_annotated_shapes(os.path.join(output_dir, f"{image_id}_shapes.png"), base_image, shapes)

    # 3) Per-shape thumbnails
    save_thumbnails(output_dir, image_id, shapes)

    # 4) Text + JSON report
    save_report(output_dir, image_id, shapes)
