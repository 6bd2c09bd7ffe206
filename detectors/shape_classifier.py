"""
Geometric shape classifier for measured road contours.

This module provides:
    • classify_shape(geometry)
    • match_rule(geometry)
    • SHAPE_RULES  (ordered decision table)

The rules are evaluated top to bottom and the first one whose guard holds
decides the label. Later rules are never consulted once an earlier one
matched, even if their own conditions also hold.
"""

from models.shape_geometry import ShapeGeometry
from models.classification import (
    Classification,
    LINEAR,
    SQUARE_LIKE,
    RECTANGULAR,
    CIRCULAR,
    ORGANIC,
    STAR_LIKE,
    COMPLEX,
    POLYGON,
    ANGULAR,
    BRANCH_LIKE,
    IRREGULAR,
    FILLED,
    UNKNOWN,
)
from config import get_active_params


UNKNOWN_SHAPE = Classification(UNKNOWN, "Irregular road formation", 0.3)


# ========================================================================
# 1. RULE GUARDS
# ========================================================================

def _is_near_quadrilateral(g: ShapeGeometry) -> bool:
    return g.vertices <= 4 and g.solidity > 0.85


def _is_circular(g: ShapeGeometry) -> bool:
    return g.vertices > 8 and g.solidity > 0.8 and abs(g.aspect_ratio - 1) < 0.4


def _is_complex(g: ShapeGeometry) -> bool:
    return g.complexity > 0.4 and g.vertices > 6


def _is_polygonal(g: ShapeGeometry) -> bool:
    return 5 <= g.vertices <= 8


def _is_very_irregular(g: ShapeGeometry) -> bool:
    return g.complexity > 0.6


def _is_filled(g: ShapeGeometry) -> bool:
    return g.extent > 0.8 and g.solidity > 0.7


# ========================================================================
# 2. RULE RESOLVERS (sub-classification inside a matched rule)
# ========================================================================

def _resolve_quadrilateral(g: ShapeGeometry) -> Classification:
    if g.aspect_ratio > 2.5:
        return Classification(LINEAR, "Long straight road segment", 0.9)
    if abs(g.aspect_ratio - 1) < 0.3:
        return Classification(SQUARE_LIKE, "Square or rectangular block", 0.85)
    return Classification(RECTANGULAR, "Rectangular road formation", 0.8)


def _resolve_circular(g: ShapeGeometry) -> Classification:
    return Classification(CIRCULAR, "Circular or round road pattern", 0.9)


def _resolve_complex(g: ShapeGeometry) -> Classification:
    if 1.5 < g.aspect_ratio < 2.5:
        return Classification(ORGANIC, "Natural, organic road shape", 0.75)
    if 0.6 < g.aspect_ratio < 1.4:
        return Classification(STAR_LIKE, "Star or flower-like intersection", 0.8)
    return Classification(COMPLEX, "Complex multi-branched formation", 0.7)


def _resolve_polygonal(g: ShapeGeometry) -> Classification:
    if g.is_convex:
        return Classification(POLYGON, f"{g.vertices}-sided polygon formation", 0.85)
    return Classification(ANGULAR, "Angular road intersection", 0.75)


def _resolve_very_irregular(g: ShapeGeometry) -> Classification:
    if g.aspect_ratio > 2.0:
        return Classification(BRANCH_LIKE, "Tree or branch-like pattern", 0.8)
    return Classification(IRREGULAR, "Irregular complex shape", 0.6)


def _resolve_filled(g: ShapeGeometry) -> Classification:
    return Classification(FILLED, "Dense filled area formation", 0.7)


# Order is the tie-break: do not reorder.
SHAPE_RULES = (
    ("near_quadrilateral", _is_near_quadrilateral, _resolve_quadrilateral),
    ("circular", _is_circular, _resolve_circular),
    ("complex", _is_complex, _resolve_complex),
    ("polygonal", _is_polygonal, _resolve_polygonal),
    ("very_irregular", _is_very_irregular, _resolve_very_irregular),
    ("filled", _is_filled, _resolve_filled),
)


# ========================================================================
# 3. PUBLIC API
# ========================================================================

def match_rule(geometry: ShapeGeometry):
    """
    Returns the name of the first rule whose guard holds for the geometry,
    or None when the geometry falls through to Unknown.
    """
    for name, applies, _ in SHAPE_RULES:
        if applies(geometry):
            return name
    return None


def classify_shape(geometry: ShapeGeometry) -> Classification:
    """
    Classifies a measured contour into one of the fixed shape labels.

    Steps:
        - walk SHAPE_RULES in order, first matching guard wins
        - fall back to Unknown ("Irregular road formation", 0.3)
        - boost confidence by LARGE_SHAPE_BOOST for shapes larger than
          LARGE_SHAPE_AREA, clamped to 1.0

    Pure and deterministic; never raises for numeric input.
    """
    result = UNKNOWN_SHAPE
    for _, applies, resolve in SHAPE_RULES:
        if applies(geometry):
            result = resolve(geometry)
            break

    params = get_active_params()
    if geometry.area > params["LARGE_SHAPE_AREA"]:
        boosted = min(1.0, result.confidence + params["LARGE_SHAPE_BOOST"])
        result = result.with_confidence(boosted)

    return result
