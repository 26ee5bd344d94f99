"""
Filtered exports and the fleet summary report.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel, Field

from .shapers import SHAPERS, parse_date
from .writers import export_to_csv, export_to_json

logger = logging.getLogger(__name__)


class ExportFilters(BaseModel):
    """Filters applied before a filtered export."""

    start_date: Optional[str] = Field(None, description="Inclusive lower bound")
    end_date: Optional[str] = Field(None, description="Inclusive upper bound")
    status: Optional[str] = Field(None, description="Exact status, 'all' for any")
    search: Optional[str] = Field(None, description="Case-insensitive substring")


def _record_date(record: dict[str, Any]) -> Any:
    return record.get("createdAt") or record.get("date") or record.get("scheduledDate")


def filter_records(
    records: Sequence[dict[str, Any]],
    filters: Optional[ExportFilters] = None,
) -> list[dict[str, Any]]:
    """
    Apply date-range, status and search filters.

    The date range only applies when both bounds are given; records whose
    date can't be parsed are dropped by it.
    """
    filters = filters or ExportFilters()
    result = list(records)

    if filters.start_date and filters.end_date:
        start = parse_date(filters.start_date)
        end = parse_date(filters.end_date)
        if start and end:
            kept = []
            for record in result:
                when = parse_date(_record_date(record))
                if when is not None and start <= when <= end:
                    kept.append(record)
            result = kept

    if filters.status and filters.status != "all":
        result = [r for r in result if r.get("status") == filters.status]

    if filters.search:
        term = filters.search.lower()
        result = [
            r for r in result
            if any(term in str(value).lower() for value in r.values())
        ]

    return result


def dated_filename(prefix: str, extension: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{prefix}_{today.isoformat()}.{extension}"


def export_records(
    records: Sequence[dict[str, Any]],
    kind: str,
    directory: Union[str, Path] = ".",
    filters: Optional[ExportFilters] = None,
) -> Path:
    """
    Filter, shape and write one resource's records as CSV.

    Known kinds (vehicles, drivers, trips, fuel, maintenance) get their
    column layout; anything else is written with raw keys.

    Returns:
        Path of the written file
    """
    filtered = filter_records(records, filters)
    shaper = SHAPERS.get(kind)
    if shaper is not None:
        rows = [shaper(r) for r in filtered]
        filename = dated_filename(kind, "csv")
    else:
        rows = filtered
        filename = dated_filename(f"{kind}_export", "csv")
    return export_to_csv(rows, Path(directory) / filename)


def _fuel_cost(log: dict[str, Any]) -> float:
    cost = log.get("cost")
    if isinstance(cost, dict):
        cost = cost.get("totalAmount")
    try:
        return float(cost or 0)
    except (TypeError, ValueError):
        return 0.0


def build_fleet_report(
    vehicles: Optional[Sequence[dict[str, Any]]] = None,
    drivers: Optional[Sequence[dict[str, Any]]] = None,
    trips: Optional[Sequence[dict[str, Any]]] = None,
    fuel_logs: Optional[Sequence[dict[str, Any]]] = None,
    maintenance: Optional[Sequence[dict[str, Any]]] = None,
) -> dict[str, Any]:
    vehicles = list(vehicles or [])
    drivers = list(drivers or [])
    trips = list(trips or [])
    fuel_logs = list(fuel_logs or [])
    maintenance = list(maintenance or [])

    def count(items: list[dict[str, Any]], status: str) -> int:
        return sum(1 for item in items if item.get("status") == status)

    return {
        "summary": {
            "totalVehicles": len(vehicles),
            "activeVehicles": count(vehicles, "active"),
            "totalDrivers": len(drivers),
            "activeDrivers": count(drivers, "active"),
            "totalTrips": len(trips),
            "completedTrips": count(trips, "completed"),
            "totalFuelCost": round(sum(_fuel_cost(log) for log in fuel_logs), 2),
            "pendingMaintenance": count(maintenance, "pending"),
        },
        "vehicles": vehicles,
        "drivers": drivers,
        "trips": trips,
        "fuelLogs": fuel_logs,
        "maintenance": maintenance,
    }


def export_fleet_report(report: dict[str, Any], directory: Union[str, Path] = ".") -> Path:
    return export_to_json(report, Path(directory) / dated_filename("fleet_report", "json"))
