"""
Settings Module

Loads optional overrides for the constants from a YAML settings file
(roomscan/data/settings.yaml, shipped with the package, by default).
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .constants import (
    DEFAULT_CEILING_HEIGHT_M,
    DEFAULT_DECIMALS,
    MAX_CEILING_HEIGHT_M,
    MAX_DECIMALS,
    MAX_FLOOR_AREA_M2,
    MIN_CEILING_HEIGHT_M,
    MIN_FLOOR_AREA_M2,
    MIN_WALL_COUNT,
    WALL_HEIGHT_SPREAD_TOLERANCE_M,
)
from .units.converter import MeasurementUnit

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).parent / "data" / "settings.yaml"

# Top-level sections of the settings file
SETTINGS_SECTIONS = ("ceiling", "validation", "completeness", "display")


@dataclass(frozen=True)
class Settings:
    """Tunable thresholds and display defaults."""
    default_ceiling_height_m: float = DEFAULT_CEILING_HEIGHT_M
    min_floor_area_m2: float = MIN_FLOOR_AREA_M2
    max_floor_area_m2: float = MAX_FLOOR_AREA_M2
    min_ceiling_height_m: float = MIN_CEILING_HEIGHT_M
    max_ceiling_height_m: float = MAX_CEILING_HEIGHT_M
    wall_height_spread_tolerance_m: float = WALL_HEIGHT_SPREAD_TOLERANCE_M
    min_wall_count: int = MIN_WALL_COUNT
    units: str = "metric"
    decimals: int = DEFAULT_DECIMALS


def _coerce(key: str, value: Any, default: Any) -> Any:
    """Convert a raw YAML value to the type of the setting's default."""
    if isinstance(default, int) and not isinstance(default, bool):
        if isinstance(value, bool):
            raise ValueError(f"Invalid value for setting '{key}': {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Setting '{key}' must be a whole number: {value!r}")
    try:
        return type(default)(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for setting '{key}': {value!r}") from e


def _check_ranges(settings: Settings) -> None:
    if not 0 <= settings.decimals <= MAX_DECIMALS:
        raise ValueError(
            f"Setting 'decimals' must be between 0 and {MAX_DECIMALS}: {settings.decimals}"
        )
    if settings.min_wall_count < 0:
        raise ValueError(
            f"Setting 'min_wall_count' must not be negative: {settings.min_wall_count}"
        )
    # Raises ValueError for unknown units
    MeasurementUnit.from_string(settings.units)


def settings_from_dict(data: Optional[dict]) -> Settings:
    """
    Build Settings from a parsed mapping.

    Known sections (ceiling, validation, completeness, display) are
    flattened, so both ``{"validation": {"min_floor_area_m2": 1}}`` and
    ``{"min_floor_area_m2": 1}`` are accepted. A section with no entries
    (parsed as None) is treated as empty.

    Raises:
        ValueError: On unknown sections or keys, wrongly typed values or
            values out of range
    """
    if not data:
        return Settings()
    if not isinstance(data, dict):
        raise ValueError(f"Settings must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}

    flat = {}
    for key, value in data.items():
        if key in SETTINGS_SECTIONS:
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(
                    f"Settings section '{key}' must be a mapping, got {type(value).__name__}"
                )
            flat.update(value)
        elif key in known:
            flat[key] = value
        elif isinstance(value, dict):
            raise ValueError(f"Unknown settings section: {key}")
        else:
            flat[key] = value

    unknown = sorted(set(flat) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")

    values = {
        key: _coerce(key, value, getattr(Settings, key))
        for key, value in flat.items()
    }

    settings = Settings(**values)
    _check_ranges(settings)
    return settings


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file; None uses the bundled settings.yaml when present

    Returns:
        Settings (defaults when no file is available)
    """
    if path is None:
        if not DEFAULT_SETTINGS_PATH.exists():
            logger.warning(
                f"Bundled settings file missing ({DEFAULT_SETTINGS_PATH}), using defaults"
            )
            return Settings()
        path = DEFAULT_SETTINGS_PATH

    settings_path = Path(path)
    with open(settings_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    settings = settings_from_dict(data)
    logger.debug(f"Loaded settings from {settings_path}")
    return settings
