import argparse
import logging
import sys

from utils.image_io import load_images, ensure_output_dir
from utils.errors import RoadShapeError
from detectors.shape_finder import detect_road_shapes
from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_IMAGE_PATTERN,
    OUTPUT_FOLDER,
)


logger = logging.getLogger(__name__)


def process_image(image, image_name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one image:
      1. Road extraction (grayscale, blur, adaptive thresholds, morphology)
      2. Contour finding & geometry analysis
      3. Shape classification & confidence filtering
      4. Thumbnail rendering
      5. Ranking by confidence and area
      6. Save all outputs (mask, annotated shapes, thumbnails, report)

    Returns the ranked list of DetectedRoadShape.
    """

    logger.info("=== Processing image with name: %s ===", image_name)

    # ------------------------------
    # STEPS 1-5 - DETECT & RANK
    # ------------------------------
    shapes, road_mask = detect_road_shapes(image)

    if not shapes:
        logger.warning("No significant road shapes detected in %s", image_name)

    for shape in shapes:
        logger.info(
            "  %s: %s (%.1f%%, area %.0f px²)",
            shape.id, shape.shape_type, shape.confidence * 100, shape.area,
        )

    # ------------------------------
    # STEP 6 - SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        image_id=image_name,
        base_image=image,
        road_mask=road_mask,
        shapes=shapes,
    )

    logger.info("Finished %s", image_name)
    return shapes


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Detect and classify distinctive road shapes in map images.",
    )
    parser.add_argument(
        "--input",
        default=INPUT_IMAGE_PATTERN,
        help=f"Glob pattern of map images (default: {INPUT_IMAGE_PATTERN})",
    )
    parser.add_argument(
        "--output",
        default=OUTPUT_FOLDER,
        help=f"Directory for results (default: {OUTPUT_FOLDER})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-contour decisions",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point:
      - Loads images
      - Processes each one independently
      - Saves output files

    Returns a process exit code: 1 when nothing matched or every image
    failed, 0 otherwise.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    ensure_output_dir(args.output)

    images, names = load_images(args.input)
    if not images:
        logger.error("No images matched pattern: %s", args.input)
        return 1

    failed = 0
    for img, name in zip(images, names):
        try:
            process_image(img, name, args.output)
        except RoadShapeError as exc:
            failed += 1
            logger.error(
                "Could not analyze %s (%s). Try a clearer map image with visible road networks.",
                name, exc,
            )

    logger.info("=== All images processed (%d failed) ===", failed)
    if failed == len(images):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
