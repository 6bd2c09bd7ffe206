from dataclasses import dataclass


# Fixed label set produced by the shape classifier
LINEAR = "Linear"
SQUARE_LIKE = "Square-like"
RECTANGULAR = "Rectangular"
CIRCULAR = "Circular"
ORGANIC = "Organic"
STAR_LIKE = "Star-like"
COMPLEX = "Complex"
POLYGON = "Polygon"
ANGULAR = "Angular"
BRANCH_LIKE = "Branch-like"
IRREGULAR = "Irregular"
FILLED = "Filled"
UNKNOWN = "Unknown"

SHAPE_TYPES = (
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


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one shape: label, short description and a
    confidence in [0, 1].
    """

    type: str
    description: str
    confidence: float

    def with_confidence(self, confidence: float) -> "Classification":
        return Classification(self.type, self.description, confidence)
