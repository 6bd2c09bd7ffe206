"""
Detectors Package

Contains the main detection modules used in the road-shape pipeline:
- Road-mask extraction
- Contour geometry analysis
- Geometric shape classification
- Shape finding & ranking
"""

from .road_extractor import extract_road_network
from .geometry_analyzer import analyze_shape_geometry
from .shape_classifier import classify_shape, match_rule, SHAPE_RULES
from .shape_finder import find_road_shapes, rank_shapes, detect_road_shapes

__all__ = [
    "extract_road_network",
    "analyze_shape_geometry",
    "classify_shape",
    "match_rule",
    "SHAPE_RULES",
    "find_road_shapes",
    "rank_shapes",
    "detect_road_shapes",
]
