"""
Configuration file for the road-shape detection system.

Contains both STRICT and RELAXED contour-filter presets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# "strict" keeps only large, confident shapes; "relaxed" lets
# smaller and less certain formations through
DETECTION_MODE = "strict"


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_IMAGE_PATTERN = "maps/*.png"
OUTPUT_FOLDER = "output"


# ===============================================================
# STRICT-MODE PARAMETERS
# ===============================================================

STRICT = {
    "MIN_SHAPE_AREA": 800,
    "MAX_SHAPE_AREA": 80000,
    "MIN_BOX_SIZE": 40,
    "MIN_CONFIDENCE": 0.5
}


# ===============================================================
# RELAXED-MODE PARAMETERS
# ===============================================================

RELAXED = {
    "MIN_SHAPE_AREA": 300,
    "MAX_SHAPE_AREA": 120000,
    "MIN_BOX_SIZE": 20,
    "MIN_CONFIDENCE": 0.3
}


# ---------------------------------------------------------------
# ROAD EXTRACTION (used in both modes)
# ---------------------------------------------------------------

BLUR_KERNEL_SIZE = 5

GAUSSIAN_BLOCK_SIZE = 11           # adaptive threshold #1
GAUSSIAN_C = 2
MEAN_BLOCK_SIZE = 15               # adaptive threshold #2
MEAN_C = 3

CLOSE_KERNEL_SIZE = 5              # bridges gaps along roads
OPEN_KERNEL_SIZE = 3               # removes speckle
DILATE_KERNEL_SIZE = 3


# ---------------------------------------------------------------
# GEOMETRY & CLASSIFICATION
# ---------------------------------------------------------------

POLY_EPSILON_RATIO = 0.02          # approxPolyDP epsilon = ratio * perimeter

LARGE_SHAPE_AREA = 2000
LARGE_SHAPE_BOOST = 0.1


# ---------------------------------------------------------------
# RANKING
# ---------------------------------------------------------------

RANK_CONFIDENCE_WEIGHT = 0.7
RANK_AREA_WEIGHT = 0.3
RANK_AREA_NORMALIZER = 10000


# ---------------------------------------------------------------
# THUMBNAILS & VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

THUMBNAIL_SIZE = 120
THUMBNAIL_FILL = 0.85

COLOR_ROAD = (0, 0, 0)
COLOR_PAPER = (255, 255, 255)
COLOR_CONTEXT_BG = (245, 245, 245)     # #f5f5f5
COLOR_HIGH = (80, 175, 76)             # #4CAF50 green
COLOR_MEDIUM = (0, 152, 255)           # #FF9800 orange
COLOR_LOW = (102, 102, 102)            # #666 grey


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by detectors and visualizers so they only import one dictionary.
    """

    base = {
        "BLUR_KERNEL_SIZE": BLUR_KERNEL_SIZE,
        "GAUSSIAN_BLOCK_SIZE": GAUSSIAN_BLOCK_SIZE,
        "GAUSSIAN_C": GAUSSIAN_C,
        "MEAN_BLOCK_SIZE": MEAN_BLOCK_SIZE,
        "MEAN_C": MEAN_C,
        "CLOSE_KERNEL_SIZE": CLOSE_KERNEL_SIZE,
        "OPEN_KERNEL_SIZE": OPEN_KERNEL_SIZE,
        "DILATE_KERNEL_SIZE": DILATE_KERNEL_SIZE,
        "POLY_EPSILON_RATIO": POLY_EPSILON_RATIO,
        "LARGE_SHAPE_AREA": LARGE_SHAPE_AREA,
        "LARGE_SHAPE_BOOST": LARGE_SHAPE_BOOST,
        "RANK_CONFIDENCE_WEIGHT": RANK_CONFIDENCE_WEIGHT,
        "RANK_AREA_WEIGHT": RANK_AREA_WEIGHT,
        "RANK_AREA_NORMALIZER": RANK_AREA_NORMALIZER,
        "THUMBNAIL_SIZE": THUMBNAIL_SIZE,
        "THUMBNAIL_FILL": THUMBNAIL_FILL,
    }

    # Merge in strict or relaxed filter values
    if DETECTION_MODE == "relaxed":
        base.update(RELAXED)
    else:
        base.update(STRICT)

    return base
