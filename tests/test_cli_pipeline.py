"""
CLI and Pipeline Tests

Tests for argument parsing, validation and end-to-end pipeline runs.
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from roomscan.cli import create_parser, parse_args, validate_args
from roomscan.config import Settings
from roomscan.pipeline import (
    PipelineConfig,
    build_formatter,
    generate_payload_filename,
    run_pipeline,
)
from roomscan.units import MeasurementUnit


def write_scan(directory: Path, name: str = "kitchen.json", walls: int = 4) -> Path:
    data = {
        "walls": [
            {"identifier": f"wall_{i}", "dimensions": [3.0, 2.4, 0.0]}
            for i in range(walls)
        ],
        "floors": [
            {
                "identifier": "floor_0",
                "dimensions": [4.0, 0.0, 3.0],
                "polygonCorners": [[0, 0, 0], [4, 0, 0], [4, 0, 3], [0, 0, 3]],
            }
        ],
        "doors": [
            {"identifier": "door_0", "dimensions": [0.9, 2.1, 0.0], "parentIdentifier": "wall_0"}
        ],
        "windows": [],
    }
    path = directory / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# =============================================================================
# CLI
# =============================================================================

class TestParser:
    """Tests for create_parser."""

    def test_required_args(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args([])
        print("  [PASS] Required arguments")

    def test_all_options(self):
        args = create_parser().parse_args([
            "-i", "scan.json", "-o", "out",
            "--units", "ft", "--decimals", "1",
            "--config", "settings.yaml",
            "--no-csv", "--no-payload", "-v",
        ])

        assert args.input == "scan.json"
        assert args.output == "out"
        assert args.units == "ft"
        assert args.decimals == 1
        assert args.config == "settings.yaml"
        assert args.no_csv and args.no_payload and args.verbose
        print("  [PASS] All options")


class TestValidateArgs:
    """Tests for validate_args."""

    def _args(self, tmp_path, *extra):
        scan = write_scan(tmp_path)
        return create_parser().parse_args(["-i", str(scan), "-o", str(tmp_path / "out"), *extra])

    def test_valid(self, tmp_path):
        is_valid, error = validate_args(self._args(tmp_path))
        assert is_valid
        assert error == ""
        assert (tmp_path / "out").is_dir()
        print("  [PASS] Valid arguments")

    def test_missing_input(self, tmp_path):
        args = create_parser().parse_args(["-i", str(tmp_path / "nope.json"), "-o", str(tmp_path)])
        is_valid, error = validate_args(args)
        assert not is_valid
        assert "not found" in error
        print("  [PASS] Missing input")

    def test_wrong_suffix(self, tmp_path):
        other = tmp_path / "scan.txt"
        other.write_text("{}", encoding="utf-8")
        args = create_parser().parse_args(["-i", str(other), "-o", str(tmp_path)])
        assert not validate_args(args)[0]
        print("  [PASS] Wrong suffix")

    def test_bad_units_and_decimals(self, tmp_path):
        assert not validate_args(self._args(tmp_path, "--units", "furlong"))[0]
        assert not validate_args(self._args(tmp_path, "--decimals", "-1"))[0]
        assert not validate_args(self._args(tmp_path, "--decimals", "9"))[0]
        assert validate_args(self._args(tmp_path, "--units", "imperial", "--decimals", "0"))[0]
        print("  [PASS] Units and decimals")

    def test_missing_config(self, tmp_path):
        args = self._args(tmp_path, "--config", str(tmp_path / "missing.yaml"))
        assert not validate_args(args)[0]
        print("  [PASS] Missing config")

    def test_parse_args_exits_on_error(self, tmp_path):
        with pytest.raises(SystemExit):
            parse_args(["-i", str(tmp_path / "nope.json"), "-o", str(tmp_path)])
        print("  [PASS] parse_args exits on error")


# =============================================================================
# PIPELINE
# =============================================================================

class TestPipeline:
    """Tests for run_pipeline."""

    def test_formatter_precedence(self):
        settings = Settings(units="metric", decimals=2)

        default = build_formatter(PipelineConfig("a.json", "out"), settings)
        override = build_formatter(PipelineConfig("a.json", "out", units="ft", decimals=0), settings)

        assert default.unit == MeasurementUnit.METERS
        assert default.decimals == 2
        assert override.unit == MeasurementUnit.FEET
        assert override.decimals == 0
        print("  [PASS] Formatter precedence")

    def test_payload_filename(self):
        path = generate_payload_filename("scans/kitchen.json", "out")
        assert Path(path) == Path("out") / "kitchen_report.json"
        print("  [PASS] Payload filename")

    def test_full_run(self, tmp_path):
        scan = write_scan(tmp_path)
        output_dir = tmp_path / "out"

        result = run_pipeline(PipelineConfig(str(scan), str(output_dir)))

        assert result.completeness.is_complete
        assert result.warnings == []
        assert abs(result.dimensions.room_volume - 28.8) < 1e-9
        assert Path(result.json_path).exists()
        assert Path(result.csv_path).exists()
        assert Path(result.payload_path).exists()

        with open(result.json_path, "r", encoding="utf-8") as f:
            exported = json.load(f)
        assert exported["roomDimensions"]["floorAreaM2"] == 12.0
        assert exported["metadata"]["input_file"] == "kitchen.json"

        with open(result.payload_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        assert payload["wallCount"] == 4
        assert payload["doorCount"] == 1
        print("  [PASS] Full pipeline run")

    def test_skip_outputs_and_warnings(self, tmp_path):
        scan = write_scan(tmp_path, walls=2)
        args = create_parser().parse_args([
            "-i", str(scan), "-o", str(tmp_path / "out"), "--no-csv", "--no-payload",
        ])

        result = run_pipeline(args)

        assert result.csv_path is None
        assert result.payload_path is None
        assert not result.completeness.is_complete
        assert "Only 2 walls detected (minimum 3 recommended)" in result.warnings
        print("  [PASS] Skipped outputs and warnings")

    def test_settings_file(self, tmp_path):
        scan = write_scan(tmp_path, walls=2)
        settings = tmp_path / "settings.yaml"
        settings.write_text("completeness:\n  min_wall_count: 2\n", encoding="utf-8")

        result = run_pipeline(PipelineConfig(str(scan), str(tmp_path / "out"), settings_path=str(settings)))
        assert result.completeness.is_complete
        print("  [PASS] Settings file applied")
