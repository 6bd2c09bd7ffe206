"""
Data Models

Defines the core data structures:
- ShapeGeometry / BoundingBox
- Classification
- DetectedRoadShape
"""

from .shape_geometry import ShapeGeometry, BoundingBox
from .classification import Classification, SHAPE_TYPES
from .detected_shape import DetectedRoadShape

__all__ = [
    "ShapeGeometry",
    "BoundingBox",
    "Classification",
    "SHAPE_TYPES",
    "DetectedRoadShape",
]
