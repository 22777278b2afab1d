# Scan input and completeness module

from .reader import (
    ScanReadError,
    parse_surface,
    parse_scan,
    load_scan,
)

from .completeness import (
    ScanCompletenessResult,
    check_scan_completeness,
    wall_confidence_distribution,
)

__all__ = [
    # Reader
    "ScanReadError",
    "parse_surface",
    "parse_scan",
    "load_scan",
    # Completeness
    "ScanCompletenessResult",
    "check_scan_completeness",
    "wall_confidence_distribution",
]
