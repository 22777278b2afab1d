"""
Pipeline Orchestration Module

Coordinates the full workflow from scan JSON to output files.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import Settings, load_settings
from .geometry.dimensions import RoomDimensions
from .geometry.processor import extract_scan_dimensions, validate_room_dimensions
from .output.csv_writer import generate_csv_filename, write_surfaces_to_csv
from .output.json_writer import (
    generate_json_filename,
    write_dimensions_to_json,
    write_json,
)
from .output.report_payload import build_report_payload
from .output.summary import format_summary
from .scan.completeness import (
    ScanCompletenessResult,
    check_scan_completeness,
    wall_confidence_distribution,
)
from .scan.reader import load_scan
from .units.converter import MeasurementFormatter


logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for pipeline execution."""
    input_path: str
    output_dir: str
    units: Optional[str] = None
    decimals: Optional[int] = None
    settings_path: Optional[str] = None
    no_csv: bool = False
    no_payload: bool = False
    verbose: bool = False


@dataclass
class PipelineResult:
    """Result from full pipeline execution."""
    input_file: str
    output_dir: str
    dimensions: RoomDimensions
    completeness: ScanCompletenessResult
    warnings: List[str] = field(default_factory=list)
    json_path: Optional[str] = None
    csv_path: Optional[str] = None
    payload_path: Optional[str] = None
    processing_time: float = 0.0


def generate_payload_filename(input_file: str, output_dir: str) -> str:
    """Report payload output path, e.g. out/kitchen_report.json."""
    stem = Path(input_file).stem
    return str(Path(output_dir) / f"{stem}_report.json")


def build_formatter(config: PipelineConfig, settings: Settings) -> MeasurementFormatter:
    """Display formatter: CLI options win over settings."""
    units = config.units or settings.units
    decimals = config.decimals if config.decimals is not None else settings.decimals
    return MeasurementFormatter.from_strings(units, decimals)


def config_from_args(args) -> PipelineConfig:
    return PipelineConfig(
        input_path=args.input,
        output_dir=args.output,
        units=getattr(args, "units", None),
        decimals=getattr(args, "decimals", None),
        settings_path=getattr(args, "config", None),
        no_csv=getattr(args, "no_csv", False),
        no_payload=getattr(args, "no_payload", False),
        verbose=getattr(args, "verbose", False),
    )


def run_pipeline(args) -> PipelineResult:
    """
    Run the full extraction pipeline.

    Args:
        args: Parsed command-line arguments (or a PipelineConfig)

    Returns:
        PipelineResult with all outputs
    """
    start_time = time.time()

    config = args if isinstance(args, PipelineConfig) else config_from_args(args)

    # Setup logging
    log_level = logging.DEBUG if config.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(message)s')

    logger.info(f"Processing: {config.input_path}")

    settings = load_settings(config.settings_path)
    formatter = build_formatter(config, settings)

    # Load and check scan
    scan = load_scan(config.input_path)
    completeness = check_scan_completeness(scan, settings.min_wall_count)

    # Extract and validate
    dimensions = extract_scan_dimensions(scan, settings.default_ceiling_height_m)
    validation_warnings = validate_room_dimensions(dimensions, settings)
    for warning in validation_warnings:
        logger.warning(warning)

    all_warnings = completeness.warnings + validation_warnings

    # Generate outputs
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = write_dimensions_to_json(
        dimensions,
        generate_json_filename(config.input_path, config.output_dir),
        input_file=Path(config.input_path).name,
        warnings=all_warnings,
    )
    logger.info(f"JSON written: {json_path}")

    csv_path = None
    if not config.no_csv:
        csv_path = write_surfaces_to_csv(
            dimensions, generate_csv_filename(config.input_path, config.output_dir)
        )
        logger.info(f"CSV written: {csv_path}")

    payload_path = None
    if not config.no_payload:
        payload = build_report_payload(dimensions)
        payload_path = write_json(
            payload, generate_payload_filename(config.input_path, config.output_dir)
        )
        logger.info(f"Report payload written: {payload_path}")

    processing_time = time.time() - start_time

    # Summary
    logger.info("\nSummary:")
    for line in format_summary(dimensions, formatter):
        logger.info(f"  {line}")
    logger.info(f"  Complete scan: {'yes' if completeness.is_complete else 'no'}")
    logger.info(f"  Processing time: {processing_time:.2f}s")

    if config.verbose:
        distribution = wall_confidence_distribution(dimensions.walls)
        logger.debug(
            "  Wall confidence: "
            + ", ".join(f"{level} {count}" for level, count in distribution.items())
        )

    if all_warnings and config.verbose:
        logger.info(f"\nWarnings ({len(all_warnings)}):")
        for w in all_warnings[:10]:
            logger.info(f"  - {w}")
        if len(all_warnings) > 10:
            logger.info(f"  ... and {len(all_warnings) - 10} more")

    return PipelineResult(
        input_file=config.input_path,
        output_dir=config.output_dir,
        dimensions=dimensions,
        completeness=completeness,
        warnings=all_warnings,
        json_path=json_path,
        csv_path=csv_path,
        payload_path=payload_path,
        processing_time=processing_time,
    )
