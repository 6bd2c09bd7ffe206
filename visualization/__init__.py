"""
Visualization Tools

Provides rendering utilities for:
- Shape thumbnails (mask & in-context)
- Annotated overview images
- Text / JSON reports
"""

from .thumbnails import create_shape_thumbnails, thumbnail_layout
from .draw_shapes import draw_detected_shapes, confidence_color
from .report import format_report, build_summary
from .save_outputs import (
    save_all_outputs,
    save_road_mask,
    save_annotated_shapes,
    save_thumbnails,
    save_report,
)

__all__ = [
    "create_shape_thumbnails",
    "thumbnail_layout",
    "draw_detected_shapes",
    "confidence_color",
    "format_report",
    "build_summary",
    "save_all_outputs",
    "save_road_mask",
    "save_annotated_shapes",
    "save_thumbnails",
    "save_report",
]
