"""
Settings Tests

Tests for loading settings overrides from YAML.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from roomscan.config import (
    DEFAULT_SETTINGS_PATH,
    Settings,
    load_settings,
    settings_from_dict,
)
from roomscan.constants import DEFAULT_CEILING_HEIGHT_M, MAX_DECIMALS, MIN_WALL_COUNT


class TestSettings:
    """Tests for settings_from_dict and load_settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.default_ceiling_height_m == DEFAULT_CEILING_HEIGHT_M
        assert settings.min_wall_count == MIN_WALL_COUNT
        assert settings.units == "metric"
        assert settings_from_dict(None) == settings
        assert settings_from_dict({}) == settings
        print("  [PASS] Defaults")

    def test_sections_flattened(self):
        settings = settings_from_dict({
            "ceiling": {"default_ceiling_height_m": 2.7},
            "validation": {"min_floor_area_m2": 1},
            "decimals": "3",
        })
        assert settings.default_ceiling_height_m == 2.7
        assert settings.min_floor_area_m2 == 1.0
        assert isinstance(settings.min_floor_area_m2, float)
        assert settings.decimals == 3
        print("  [PASS] Sections flattened")

    def test_invalid_settings(self):
        with pytest.raises(ValueError, match="Unknown settings"):
            settings_from_dict({"validation": {"max_room_count": 4}})
        with pytest.raises(ValueError, match="min_wall_count"):
            settings_from_dict({"min_wall_count": "three"})
        with pytest.raises(ValueError):
            settings_from_dict(["not", "a", "mapping"])
        print("  [PASS] Invalid settings rejected")

    def test_empty_section(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "validation:\n"
            "  # min_floor_area_m2: 0.5\n"
            "display:\n"
            "  decimals: 3\n",
            encoding="utf-8",
        )

        settings = load_settings(path)
        assert settings.min_floor_area_m2 == Settings().min_floor_area_m2
        assert settings.decimals == 3
        print("  [PASS] Empty section")

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="Unknown settings section: geometry"):
            settings_from_dict({"geometry": {"default_ceiling_height_m": 2.4}})
        with pytest.raises(ValueError, match="must be a mapping"):
            settings_from_dict({"validation": 5})
        print("  [PASS] Unknown section")

    def test_whole_number_settings(self):
        assert settings_from_dict({"decimals": 3.0}).decimals == 3
        with pytest.raises(ValueError, match="whole number"):
            settings_from_dict({"display": {"decimals": 2.9}})
        with pytest.raises(ValueError, match="whole number"):
            settings_from_dict({"min_wall_count": 3.5})
        with pytest.raises(ValueError):
            settings_from_dict({"decimals": True})
        print("  [PASS] Whole-number settings")

    def test_out_of_range_settings(self):
        assert settings_from_dict({"decimals": MAX_DECIMALS}).decimals == MAX_DECIMALS
        with pytest.raises(ValueError, match="between 0 and"):
            settings_from_dict({"decimals": MAX_DECIMALS + 1})
        with pytest.raises(ValueError, match="between 0 and"):
            settings_from_dict({"decimals": -1})
        with pytest.raises(ValueError, match="min_wall_count"):
            settings_from_dict({"min_wall_count": -2})
        with pytest.raises(ValueError, match="Unknown measurement unit"):
            settings_from_dict({"display": {"units": "furlong"}})
        print("  [PASS] Out-of-range settings")

    def test_bundled_file(self):
        # Shipped inside the package so installed copies find it too
        assert DEFAULT_SETTINGS_PATH.exists()
        assert DEFAULT_SETTINGS_PATH.parent.parent.name == "roomscan"
        assert load_settings() == Settings()
        print("  [PASS] Bundled settings file")

    def test_load_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "ceiling:\n"
            "  default_ceiling_height_m: 3.0\n"
            "display:\n"
            "  units: imperial\n",
            encoding="utf-8",
        )

        settings = load_settings(path)
        assert settings.default_ceiling_height_m == 3.0
        assert settings.units == "imperial"
        assert settings.max_ceiling_height_m == Settings().max_ceiling_height_m
        print("  [PASS] Settings file loaded")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == Settings()
        print("  [PASS] Empty settings file")
