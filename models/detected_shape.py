from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from models.classification import Classification
from models.shape_geometry import ShapeGeometry, BoundingBox
from config import get_active_params


@dataclass
class DetectedRoadShape:
    """
    One road shape kept by the finder: the contour, its measurements,
    its classification and the two rendered thumbnails.

    Handles:
      • convenience accessors used by the report and drawing code
      • ranking score (confidence weighted against normalized area)
      • JSON-friendly summary without the image arrays
    """

    id: str
    classification: Classification
    geometry: ShapeGeometry
    contour: Optional[np.ndarray] = None
    thumbnail: Optional[np.ndarray] = field(default=None, repr=False)
    context_thumbnail: Optional[np.ndarray] = field(default=None, repr=False)

    # -------------------------------------------------------------
    #   Accessors
    # -------------------------------------------------------------

    @property
    def shape_type(self) -> str:
        return self.classification.type

    @property
    def description(self) -> str:
        return self.classification.description

    @property
    def confidence(self) -> float:
        return self.classification.confidence

    @property
    def area(self) -> float:
        return self.geometry.area

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        return self.geometry.bounding_box

    # -------------------------------------------------------------
    #   Ranking
    # -------------------------------------------------------------

    @property
    def score(self) -> float:
        """
        Confident, larger shapes rank first:

            confidence * 0.7 + (area / 10000) * 0.3
        """
        params = get_active_params()
        return (
            self.confidence * params["RANK_CONFIDENCE_WEIGHT"]
            + (self.area / params["RANK_AREA_NORMALIZER"]) * params["RANK_AREA_WEIGHT"]
        )

    # -------------------------------------------------------------
    #   Serialization
    # -------------------------------------------------------------

    def to_dict(self) -> dict:
        g = self.geometry
        box = g.bounding_box
        return {
            "id": self.id,
            "shape_type": self.shape_type,
            "description": self.description,
            "confidence": round(float(self.confidence), 4),
            "area": float(g.area),
            "complexity": float(g.complexity),
            "aspect_ratio": float(g.aspect_ratio),
            "bounding_box": list(box.as_tuple()) if box is not None else None,
            "geometric_properties": {
                "vertices": int(g.vertices),
                "is_convex": bool(g.is_convex),
                "solidity": float(g.solidity),
                "extent": float(g.extent),
                "orientation": float(g.orientation),
            },
        }
