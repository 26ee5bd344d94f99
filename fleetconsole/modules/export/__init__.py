"""
Export module.

Public API:
- to_csv, export_to_csv, export_to_json: Writers
- SHAPERS and shape_*: Per-resource column layouts
- filter_records, export_records, ExportFilters: Filtered exports
- build_fleet_report, export_fleet_report: Fleet summary report
- ExportError
"""

from .exceptions import ExportError
from .reports import (
    ExportFilters,
    filter_records,
    export_records,
    build_fleet_report,
    export_fleet_report,
    dated_filename,
)
from .shapers import (
    SHAPERS,
    shape_vehicle,
    shape_driver,
    shape_trip,
    shape_fuel_log,
    shape_maintenance_record,
)
from .writers import to_csv, export_to_csv, export_to_json

__all__ = [
    "ExportError",
    "to_csv",
    "export_to_csv",
    "export_to_json",
    "SHAPERS",
    "shape_vehicle",
    "shape_driver",
    "shape_trip",
    "shape_fuel_log",
    "shape_maintenance_record",
    "ExportFilters",
    "filter_records",
    "export_records",
    "dated_filename",
    "build_fleet_report",
    "export_fleet_report",
]
