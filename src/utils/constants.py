"""
Constants for the Scale Compare application.

This module defines all system-wide constants including:
- Application metadata
- Supported languages
- Resource file names
- Magnitude bucket breakpoints
- Label ids used by the presentation layers
- Number formatting defaults
"""

from typing import Dict, List, Tuple

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Scale Compare"
APP_VERSION = "0.1.0"

# ============================================================================
# Languages
# ============================================================================

# Order matters: the first language is the fallback language
SUPPORTED_LANGUAGES: List[str] = ["EN", "FR"]

# Resource field suffix for each supported language (e.g. "ObjectEn")
LANGUAGE_FIELD_SUFFIXES: Dict[str, str] = {
    "EN": "En",
    "FR": "Fr",
}

# ============================================================================
# Resources
# ============================================================================

UNITS_FILENAME = "units.json"
LABELS_FILENAME = "labels.json"
OBJECTS_FILENAME = "objects.json"

# ============================================================================
# Magnitude Buckets
# ============================================================================

# Bucket names in rank order (smallest to largest)
BUCKET_MICRO = "micro"
BUCKET_HUMAN = "human"
BUCKET_TRAVEL = "travel"
BUCKET_PLANETARY = "planetary"
BUCKET_SOLAR = "solar"
BUCKET_GALACTIC = "galactic"
BUCKET_COSMIC = "cosmic"

BUCKETS: List[str] = [
    BUCKET_MICRO,
    BUCKET_HUMAN,
    BUCKET_TRAVEL,
    BUCKET_PLANETARY,
    BUCKET_SOLAR,
    BUCKET_GALACTIC,
    BUCKET_COSMIC,
]

# (upper bound in meters, bound is inclusive, bucket); sizes above the last
# bound are cosmic
BUCKET_BREAKPOINTS: List[Tuple[float, bool, str]] = [
    (4e-5, True, BUCKET_MICRO),
    (1e3, False, BUCKET_HUMAN),
    (1.2e7, True, BUCKET_TRAVEL),
    (1e10, True, BUCKET_PLANETARY),
    (3e16, True, BUCKET_SOLAR),
    (1.25e21, True, BUCKET_GALACTIC),
]

# ============================================================================
# Lookups
# ============================================================================

# Relative tolerance when looking for an object of about a given size
NEAREST_SIZE_TOLERANCE = 0.1

# ============================================================================
# Number Formatting
# ============================================================================

DEFAULT_SIGNIFICANT_DIGITS = 4

# Values in [NORMAL_NOTATION_MIN, NORMAL_NOTATION_MAX) use fixed notation
NORMAL_NOTATION_MIN = 0.0001
NORMAL_NOTATION_MAX = 10000

RATIO_UP_GLYPH = "↑"
RATIO_DOWN_GLYPH = "↓"

# ============================================================================
# Label Ids
# ============================================================================

LABEL_TITLE = 1
LABEL_FIRST_OBJECT = 2
LABEL_SECOND_OBJECT = 3
LABEL_RATIO = 4
LABEL_LANGUAGE = 5
LABEL_COLUMN_OBJECT = 6
LABEL_COLUMN_SIZE_IN_UNIT = 7
LABEL_COLUMN_SCALED_SIZE = 8
LABEL_COLUMN_SIZE_IN_METER = 9
LABEL_COLUMN_NEAREST_OBJECT = 10

# Label id of each bucket's section heading
BUCKET_LABELS: Dict[str, int] = {
    BUCKET_MICRO: 11,
    BUCKET_HUMAN: 12,
    BUCKET_TRAVEL: 13,
    BUCKET_PLANETARY: 14,
    BUCKET_SOLAR: 15,
    BUCKET_GALACTIC: 16,
    BUCKET_COSMIC: 17,
}

# Comparison table columns, in display order
TABLE_COLUMN_LABELS: List[int] = [
    LABEL_COLUMN_OBJECT,
    LABEL_COLUMN_SIZE_IN_METER,
    LABEL_COLUMN_SIZE_IN_UNIT,
    LABEL_COLUMN_SCALED_SIZE,
    LABEL_COLUMN_NEAREST_OBJECT,
]
