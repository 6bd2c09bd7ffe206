import cv2

from models.shape_geometry import ShapeGeometry, BoundingBox
from config import get_active_params


def analyze_shape_geometry(contour):
    """
    Measures one contour and wraps the result as a ShapeGeometry.

    Measurements:
      - area / closed perimeter
      - convex hull area -> solidity, complexity (1 - solidity)
      - approxPolyDP with epsilon = POLY_EPSILON_RATIO * perimeter -> vertices
      - bounding rectangle -> aspect ratio, extent
      - minimum-area rectangle angle -> orientation
      - convexity test

    Parameters
    ----------
    contour : np.ndarray
        OpenCV contour (N x 1 x 2 int32 points).

    Returns
    -------
    ShapeGeometry or None
        None for degenerate contours (zero-width or zero-height bounding
        box, or zero hull area); those must never reach the classifier.
    """
    params = get_active_params()

    x, y, w, h = cv2.boundingRect(contour)
    if w == 0 or h == 0:
        return None

    area = cv2.contourArea(contour)
    hull = cv2.convexHull(contour)
    hull_area = cv2.contourArea(hull)
    if hull_area <= 0:
        return None

    perimeter = cv2.arcLength(contour, True)
    approx = cv2.approxPolyDP(contour, params["POLY_EPSILON_RATIO"] * perimeter, True)

    (_, _), (_, _), angle = cv2.minAreaRect(contour)

    solidity = area / hull_area

    return ShapeGeometry(
        area=float(area),
        perimeter=float(perimeter),
        aspect_ratio=w / h,
        solidity=float(solidity),
        extent=float(area / (w * h)),
        vertices=len(approx),
        is_convex=bool(cv2.isContourConvex(contour)),
        complexity=float(1 - solidity),
        orientation=float(angle),
        bounding_box=BoundingBox(int(x), int(y), int(w), int(h)),
    )
