"""
Scan Completeness Module

Decides whether a captured scan is complete enough to trust its
dimensions, and summarizes wall confidence.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..constants import MIN_WALL_COUNT, Confidence
from ..geometry.dimensions import WallDimension
from ..geometry.surface import CapturedScan

logger = logging.getLogger(__name__)


@dataclass
class ScanCompletenessResult:
    """Outcome of a completeness check."""
    is_complete: bool
    wall_count: int
    has_floor: bool
    warnings: List[str] = field(default_factory=list)

    @property
    def warning_message(self) -> str:
        return "\n".join(self.warnings)


def check_scan_completeness(
    scan: CapturedScan,
    min_wall_count: int = MIN_WALL_COUNT
) -> ScanCompletenessResult:
    """
    Check a scan for the minimum data needed for reliable dimensions.

    Args:
        scan: Captured scan
        min_wall_count: Walls required for a complete scan

    Returns:
        ScanCompletenessResult (complete when there are no warnings)
    """
    warnings = []
    wall_count = len(scan.walls)
    has_floor = len(scan.floors) > 0

    if wall_count < min_wall_count:
        wall_text = "wall" if wall_count == 1 else "walls"
        warnings.append(
            f"Only {wall_count} {wall_text} detected "
            f"(minimum {min_wall_count} recommended)"
        )

    if not has_floor:
        warnings.append("No floor surface detected")

    for warning in warnings:
        logger.warning(f"Incomplete scan: {warning}")

    return ScanCompletenessResult(
        is_complete=not warnings,
        wall_count=wall_count,
        has_floor=has_floor,
        warnings=warnings,
    )


def wall_confidence_distribution(walls: Sequence[WallDimension]) -> Dict[str, int]:
    """Count walls per confidence level."""
    distribution = {level: 0 for level in Confidence.ALL}
    for wall in walls:
        if wall.confidence in distribution:
            distribution[wall.confidence] += 1
    return distribution
