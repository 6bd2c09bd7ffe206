"""
Text and JSON reports for one processed image.

This module provides:
    • format_shape(shape)
    • format_report(shapes)
    • build_summary(image_id, shapes)
"""

from typing import List

from models.detected_shape import DetectedRoadShape


NO_SHAPES_MESSAGE = (
    "No significant road shapes detected. Try uploading a map with more "
    "defined road patterns or distinctive formations."
)

DETECTION_TIPS = [
    "Use maps with clear satellite/street view images with visible roads",
    "Choose areas with interesting intersections or unique layouts",
    "Ensure good contrast between roads and background",
    "Medium zoom level works best (showing 4-10 city blocks)",
    "Avoid highway-only or rural road maps",
]


def format_shape(shape: DetectedRoadShape) -> str:
    g = shape.geometry
    return "\n".join([
        f"{shape.shape_type}",
        f"  {shape.description}",
        f"  Confidence: {shape.confidence * 100:.1f}%",
        f"  Area: {g.area:.0f} px²",
        f"  Complexity: {g.complexity * 100:.0f}%",
        f"  Vertices: {g.vertices}",
    ])


def format_report(shapes: List[DetectedRoadShape]) -> str:
    """
    Human-readable result listing, or the no-result message with tips.
    """
    lines = ["Road Shape Detection Results", ""]

    if not shapes:
        lines.append(NO_SHAPES_MESSAGE)
        lines.append("")
        lines.append("Tips for better detection:")
        lines.extend(f"  - {tip}" for tip in DETECTION_TIPS)
        return "\n".join(lines) + "\n"

    plural = "s" if len(shapes) > 1 else ""
    lines.append(f"Found {len(shapes)} distinctive road shape{plural}.")

    for rank, shape in enumerate(shapes, start=1):
        lines.append("")
        lines.append(f"{rank}. {format_shape(shape)}")

    return "\n".join(lines) + "\n"


def build_summary(image_id: str, shapes: List[DetectedRoadShape]) -> dict:
    return {
        "image": image_id,
        "shape_count": len(shapes),
        "shapes": [s.to_dict() for s in shapes],
    }
