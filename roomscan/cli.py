"""
Command Line Interface Module

Parses command-line arguments for the room scan pipeline.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import MAX_DECIMALS
from .units.converter import MeasurementUnit


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the pipeline."""
    parser = argparse.ArgumentParser(
        prog="roomscan",
        description="Extract room dimensions from a 3D room scan export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m roomscan.cli -i kitchen.json -o ./output
  python -m roomscan.cli -i kitchen.json -o ./output --units ft --decimals 1
  python -m roomscan.cli -i kitchen.json -o ./output --config settings.yaml --verbose
        """
    )

    # Required arguments
    parser.add_argument(
        "-i", "--input",
        required=True,
        help="Input scan JSON file path"
    )

    parser.add_argument(
        "-o", "--output",
        required=True,
        help="Output directory path"
    )

    # Optional arguments
    parser.add_argument(
        "--units",
        help="Display units: m, ft, cm, in, metric or imperial (default: from settings)"
    )

    parser.add_argument(
        "--decimals",
        type=int,
        help="Decimal places in the summary (default: from settings)"
    )

    parser.add_argument(
        "--config",
        help="Settings YAML file (default: bundled roomscan/data/settings.yaml)"
    )

    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Skip per-surface CSV output"
    )

    parser.add_argument(
        "--no-payload",
        action="store_true",
        help="Skip report payload output"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    return parser


def validate_args(args: argparse.Namespace) -> Tuple[bool, str]:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments

    Returns:
        Tuple of (is_valid, error_message)
    """
    # Check input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        return False, f"Input file not found: {args.input}"

    if not input_path.suffix.lower() == ".json":
        return False, f"Input file must be a JSON scan export: {args.input}"

    # Check settings file
    if args.config and not Path(args.config).exists():
        return False, f"Settings file not found: {args.config}"

    # Check/create output directory
    output_path = Path(args.output)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return False, f"Cannot create output directory: {e}"

    # Validate units
    if args.units:
        try:
            MeasurementUnit.from_string(args.units)
        except ValueError as e:
            return False, str(e)

    # Validate decimals
    if args.decimals is not None and not 0 <= args.decimals <= MAX_DECIMALS:
        return False, f"Decimals must be between 0 and {MAX_DECIMALS}: {args.decimals}"

    return True, ""


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    Args:
        args: Optional list of arguments (uses sys.argv if None)

    Returns:
        Parsed and validated arguments
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    is_valid, error_msg = validate_args(parsed)
    if not is_valid:
        parser.error(error_msg)

    return parsed


def main():
    """Main entry point for CLI."""
    args = parse_args()

    # Import pipeline and run
    from .pipeline import run_pipeline

    try:
        run_pipeline(args)
    except KeyboardInterrupt:
        print("\nProcessing cancelled by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
