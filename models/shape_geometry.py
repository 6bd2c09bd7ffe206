from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a contour, in pixels."""

    x: int
    y: int
    width: int
    height: int

    def as_tuple(self):
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class ShapeGeometry:
    """
    Measured geometric features of one closed contour.

    Produced by detectors.geometry_analyzer and consumed by the shape
    classifier. Every field has a neutral default so partial measurements
    can be expressed directly:

        ShapeGeometry(vertices=4, solidity=0.9, aspect_ratio=3.0, area=500)

    Notes:
      • complexity is stored as given (the analyzer sets it to 1 - solidity)
      • aspect_ratio is width / height of the bounding box
      • orientation is the minimum-area rectangle angle in degrees
    """

    area: float = 0.0
    perimeter: float = 0.0
    aspect_ratio: float = 1.0
    solidity: float = 1.0
    extent: float = 0.0
    vertices: int = 0
    is_convex: bool = False
    complexity: float = 0.0

    orientation: float = 0.0
    bounding_box: Optional[BoundingBox] = None
