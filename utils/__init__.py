"""
Utility Functions

Provides image I/O helpers and the exception types shared across the
pipeline.
"""

from .errors import (
    RoadShapeError,
    ImageLoadError,
    RoadExtractionError,
    ShapeAnalysisError,
    OutputWriteError,
)
from .image_io import (
    image_id_from_path,
    load_image,
    load_images,
    ensure_output_dir,
    save_image,
    save_text,
    save_json,
)

__all__ = [
    "RoadShapeError",
    "ImageLoadError",
    "RoadExtractionError",
    "ShapeAnalysisError",
    "OutputWriteError",
    "image_id_from_path",
    "load_image",
    "load_images",
    "ensure_output_dir",
    "save_image",
    "save_text",
    "save_json",
]
