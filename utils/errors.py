"""
Exceptions raised by the road-shape pipeline.

All of them describe recoverable, per-image conditions: the caller should
report them and move on to the next image.
"""


class RoadShapeError(Exception):
    """Base class for pipeline failures."""


class ImageLoadError(RoadShapeError):
    """An input file could not be read or decoded as an image."""


class RoadExtractionError(RoadShapeError):
    """OpenCV failed while turning an image into a road mask."""


class ShapeAnalysisError(RoadShapeError):
    """OpenCV failed while finding, measuring or rendering shapes."""


class OutputWriteError(RoadShapeError):
    """An output artifact could not be written to disk."""
