"""
Road-shape finder.

This module provides:
    • find_road_shapes(road_mask, image)
    • rank_shapes(shapes)
    • detect_road_shapes(image)
"""

import logging
from typing import List

import cv2

from models.detected_shape import DetectedRoadShape
from detectors.road_extractor import extract_road_network
from detectors.geometry_analyzer import analyze_shape_geometry
from detectors.shape_classifier import classify_shape
from visualization.thumbnails import create_shape_thumbnails
from utils.errors import ShapeAnalysisError
from config import get_active_params


logger = logging.getLogger(__name__)


# ========================================================================
# 1. CONTOURS -> CLASSIFIED SHAPES
# ========================================================================

def _passes_size_filters(geometry, params) -> bool:
    # avoid tiny segments and whole-map blobs
    if geometry.area < params["MIN_SHAPE_AREA"] or geometry.area > params["MAX_SHAPE_AREA"]:
        return False

    box = geometry.bounding_box
    if box.width < params["MIN_BOX_SIZE"] or box.height < params["MIN_BOX_SIZE"]:
        return False

    return True


def find_road_shapes(road_mask, image) -> List[DetectedRoadShape]:
    """
    Finds external contours in the road mask and keeps the ones that are
    worth showing.

    For each contour:
        - measure geometry (degenerate contours are skipped)
        - filter by area and bounding-box size
        - classify
        - drop classifications below MIN_CONFIDENCE
        - render thumbnails from the mask and the original image

    Returns:
        List[DetectedRoadShape] in contour order (not ranked)
    """
    params = get_active_params()

    contours, _ = cv2.findContours(road_mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    logger.info("Found %d external contours", len(contours))

    shapes = []
    for i, contour in enumerate(contours):
        try:
            geometry = analyze_shape_geometry(contour)
        except cv2.error as exc:
            logger.warning("Contour %d could not be measured: %s", i, exc)
            continue

        if geometry is None:
            logger.debug("Contour %d is degenerate, skipped", i)
            continue

        if not _passes_size_filters(geometry, params):
            logger.debug("Contour %d rejected by size (area=%.0f)", i, geometry.area)
            continue

        classification = classify_shape(geometry)
        if classification.confidence < params["MIN_CONFIDENCE"]:
            logger.debug(
                "Contour %d rejected: %s at %.2f",
                i, classification.type, classification.confidence,
            )
            continue

        thumbnail, context_thumbnail = create_shape_thumbnails(
            geometry.bounding_box, road_mask, image
        )

        shapes.append(DetectedRoadShape(
            id=f"shape_{i}",
            classification=classification,
            geometry=geometry,
            contour=contour,
            thumbnail=thumbnail,
            context_thumbnail=context_thumbnail,
        ))

    return shapes


# ========================================================================
# 2. RANKING
# ========================================================================

def rank_shapes(shapes: List[DetectedRoadShape]) -> List[DetectedRoadShape]:
    """
    Sorts shapes by descending score (confident, larger shapes first).
    The sort is stable, so equal scores keep contour order.
    """
    return sorted(shapes, key=lambda s: s.score, reverse=True)


# ========================================================================
# 3. FULL PIPELINE
# ========================================================================

def detect_road_shapes(image):
    """
    Runs extraction, finding and ranking for one image.

    Returns:
        (shapes, road_mask)

    Raises:
        RoadExtractionError if the road mask cannot be built.
        ShapeAnalysisError if OpenCV fails on the contours or thumbnails.
    """
    road_mask = extract_road_network(image)

    try:
        shapes = rank_shapes(find_road_shapes(road_mask, image))
    except cv2.error as exc:
        raise ShapeAnalysisError(f"Shape analysis failed: {exc}") from exc

    logger.info("Kept %d road shapes", len(shapes))
    return shapes, road_mask
