"""
Image I/O utilities for the road-shape pipeline.

This module provides:
    • image_id_from_path(filename)
    • load_image(path)
    • load_images(path_pattern)
    • ensure_output_dir(path)
    • save_image(path, image)
    • save_text(path, text) / save_json(path, data)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
import glob
import json
import logging
from typing import List, Tuple

import cv2
import numpy as np

from utils.errors import ImageLoadError, OutputWriteError


logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def image_id_from_path(filename: str) -> str:
    """
    Identifier used to name every output of one image: the file name
    without directory and extension.

    Example:
        'maps/downtown_03.png' → 'downtown_03'
    """
    return os.path.splitext(os.path.basename(filename))[0]


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_image(path: str) -> np.ndarray:
    """
    Reads one image as BGR.

    Raises:
        ImageLoadError if the file is missing or not a decodable image.
    """
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ImageLoadError(f"Could not read image: {path}")
    return img


def load_images(path_pattern: str) -> Tuple[List[np.ndarray], List[str]]:
    """
    Loads all images matching the given glob pattern.
    Unreadable files are logged and skipped.

    Returns:
        images:  list of np.ndarray (BGR)
        names:   list of identifiers derived from the file names

    Example:
        images, names = load_images('maps/*.png')
    """

    file_list = sorted(glob.glob(path_pattern))
    images = []
    names = []

    for fname in file_list:
        try:
            img = load_image(fname)
        except ImageLoadError as exc:
            logger.warning("%s", exc)
            continue
        images.append(img)
        names.append(image_id_from_path(fname))

    return images, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.

    Raises:
        OutputWriteError if OpenCV reports the write failed.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OutputWriteError(f"Could not write image: {path}")


def save_text(path: str, text: str):
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)


def save_json(path: str, data):
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2)
