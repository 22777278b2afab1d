# Output generation module

from ..constants import PIPELINE_VERSION

from .report_payload import (
    generate_wall_names,
    format_scan_date,
    build_opening_payload,
    build_report_payload,
)

from .json_writer import (
    generate_json_filename,
    build_export_json,
    write_json,
    write_dimensions_to_json,
)

from .csv_writer import (
    csv_header,
    generate_csv_filename,
    write_surfaces_to_csv,
)

from .summary import (
    format_summary,
)

__all__ = [
    "PIPELINE_VERSION",
    # Report payload
    "generate_wall_names",
    "format_scan_date",
    "build_opening_payload",
    "build_report_payload",
    # JSON
    "generate_json_filename",
    "build_export_json",
    "write_json",
    "write_dimensions_to_json",
    # CSV
    "csv_header",
    "generate_csv_filename",
    "write_surfaces_to_csv",
    # Summary
    "format_summary",
]
