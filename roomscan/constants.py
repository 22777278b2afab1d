"""
Room Scan - Master Constants Reference

All measurements are in meters (lengths), square meters (areas) and
cubic meters (volumes) unless the name says otherwise.
"""

# =============================================================================
# CEILING ESTIMATION CONSTANTS
# =============================================================================

# Ceiling height used when the scan contains no walls
DEFAULT_CEILING_HEIGHT_M = 2.4

# Ceiling area is approximated as total wall area divided by this
# (roughly rectangular room with four walls of comparable size)
CEILING_AREA_WALL_DIVISOR = 4.0

# =============================================================================
# POLYGON CONSTANTS
# =============================================================================

# Fewer corners than this is a degenerate polygon (area 0)
MIN_POLYGON_CORNERS = 3

# Floor polygons lie in the horizontal plane (Y is up)
FLOOR_PLANE = "xz"

# Axis indices spanned by each supported projection plane
PLANE_AXES = {
    "xy": (0, 1),
    "xz": (0, 2),
    "yz": (1, 2),
}

# =============================================================================
# VALIDATION CONSTANTS
# =============================================================================

# Smallest plausible floor area (a small closet)
MIN_FLOOR_AREA_M2 = 0.5

# Largest plausible single-room floor area
MAX_FLOOR_AREA_M2 = 1000.0

# Minimum plausible ceiling height
MIN_CEILING_HEIGHT_M = 1.8

# Maximum plausible ceiling height (halls, lofts)
MAX_CEILING_HEIGHT_M = 10.0

# Warn when wall heights differ by more than this (first wall sets the ceiling)
WALL_HEIGHT_SPREAD_TOLERANCE_M = 0.1

# =============================================================================
# SCAN COMPLETENESS CONSTANTS
# =============================================================================

# Fewer walls than this and the scan is flagged as incomplete
MIN_WALL_COUNT = 3

# =============================================================================
# UNIT CONVERSION CONSTANTS
# =============================================================================

METERS_PER_FOOT = 0.3048
METERS_PER_CENTIMETER = 0.01
METERS_PER_INCH = 0.0254
INCHES_PER_FOOT = 12

# Default number of decimal places for formatted values
DEFAULT_DECIMALS = 2

# Upper bound accepted for the decimals option
MAX_DECIMALS = 6

# Superscripts appended to the unit abbreviation
AREA_SUFFIX = "²"
VOLUME_SUFFIX = "³"

# =============================================================================
# OUTPUT CONSTANTS
# =============================================================================

PIPELINE_VERSION = "1.0.0"

# Rounding applied to values in JSON/CSV exports
EXPORT_DECIMALS = 4

# =============================================================================
# CONFIDENCE LEVELS
# =============================================================================

class Confidence:
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    ALL = (HIGH, MEDIUM, LOW)

# =============================================================================
# SURFACE CATEGORIES
# =============================================================================

class SurfaceCategory:
    WALL = "wall"
    FLOOR = "floor"
    CEILING = "ceiling"
    DOOR = "door"
    WINDOW = "window"
