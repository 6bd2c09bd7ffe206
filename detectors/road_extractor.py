import logging

import cv2
import numpy as np

from utils.errors import RoadExtractionError
from config import get_active_params


logger = logging.getLogger(__name__)


def to_grayscale(image):
    """
    Converts a BGR, BGRA or already single-channel image to grayscale.
    """
    if image.ndim == 2:
        return image.copy()
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)


def _ellipse(size):
    return cv2.getStructuringElement(cv2.MORPH_ELLIPSE, (size, size))


def extract_road_network(image):
    """
    Turns a map image into a binary road mask (roads = 255).

    Steps:
      1. grayscale + Gaussian blur
      2. two inverted adaptive thresholds (Gaussian and mean), OR-ed together
      3. morphological close (bridge gaps), open (drop speckle), dilate
         (strengthen road connections)

    Parameters
    ----------
    image : np.ndarray
        BGR, BGRA or grayscale input image.

    Returns
    -------
    np.ndarray
        uint8 mask with the same height and width as the input.

    Raises
    ------
    RoadExtractionError
        If the image is empty or OpenCV rejects it.
    """
    if image is None or image.size == 0:
        raise RoadExtractionError("Cannot extract roads from an empty image")

    params = get_active_params()

    try:
        gray = to_grayscale(image)
        if gray.dtype != np.uint8:
            gray = cv2.normalize(gray, None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)

        k = params["BLUR_KERNEL_SIZE"]
        blurred = cv2.GaussianBlur(gray, (k, k), 0)

        binary_gauss = cv2.adaptiveThreshold(
            blurred,
            255,
            cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
            cv2.THRESH_BINARY_INV,
            params["GAUSSIAN_BLOCK_SIZE"],
            params["GAUSSIAN_C"],
        )
        binary_mean = cv2.adaptiveThreshold(
            blurred,
            255,
            cv2.ADAPTIVE_THRESH_MEAN_C,
            cv2.THRESH_BINARY_INV,
            params["MEAN_BLOCK_SIZE"],
            params["MEAN_C"],
        )
        binary = cv2.bitwise_or(binary_gauss, binary_mean)

        closed = cv2.morphologyEx(binary, cv2.MORPH_CLOSE, _ellipse(params["CLOSE_KERNEL_SIZE"]))
        opened = cv2.morphologyEx(closed, cv2.MORPH_OPEN, _ellipse(params["OPEN_KERNEL_SIZE"]))
        enhanced = cv2.morphologyEx(opened, cv2.MORPH_DILATE, _ellipse(params["DILATE_KERNEL_SIZE"]))

    except cv2.error as exc:
        raise RoadExtractionError(f"Road extraction failed: {exc}") from exc

    logger.debug(
        "Road mask %dx%d, %.1f%% road pixels",
        enhanced.shape[1],
        enhanced.shape[0],
        100.0 * np.count_nonzero(enhanced) / enhanced.size,
    )
    return enhanced
