"""
Per-resource column layouts for exports.

Each shaper turns raw records into rows keyed by human-readable column
titles. Missing values read "N/A"; dates are rendered as ISO dates.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from dateutil import parser as date_parser

from .writers import format_cell

NA = "N/A"

Shaper = Callable[[dict[str, Any]], dict[str, Any]]


def parse_date(value: Any) -> Optional[datetime]:
    """Parse an ISO-ish date string; None when absent or unparseable."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = date_parser.isoparse(value)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None) - parsed.utcoffset()
    return parsed


def format_date(value: Any) -> str:
    parsed = parse_date(value)
    return parsed.date().isoformat() if parsed else NA


def format_datetime(value: Any) -> str:
    parsed = parse_date(value)
    return parsed.isoformat(sep=" ", timespec="minutes") if parsed else NA


def _person(value: Any) -> str:
    if isinstance(value, dict) and (value.get("firstName") or value.get("lastName")):
        return f"{value.get('firstName', '')} {value.get('lastName', '')}".strip()
    return NA


def _plate(value: Any) -> str:
    if isinstance(value, dict) and value.get("plateNumber"):
        return value["plateNumber"]
    return NA


def _amount(value: Any, key: str) -> Any:
    """Unwrap ``{"amount": 45.5, "unit": ...}`` style values."""
    if isinstance(value, dict):
        return value.get(key)
    return value


def _money(value: Any) -> str:
    if value is None or value == "":
        return NA
    return f"${format_cell(value)}"


def _or_na(value: Any) -> Any:
    return NA if value is None or value == "" else value


def shape_vehicle(vehicle: dict[str, Any]) -> dict[str, Any]:
    return {
        "Plate Number": vehicle.get("plateNumber"),
        "Make": vehicle.get("make"),
        "Model": vehicle.get("model"),
        "Year": vehicle.get("year"),
        "Status": vehicle.get("status"),
        "Mileage": vehicle.get("mileage"),
        "Fuel Type": vehicle.get("fuelType"),
        "Last Maintenance": format_date(vehicle.get("lastMaintenance")),
        "Driver": vehicle.get("currentDriver") or "Unassigned",
    }


def shape_driver(driver: dict[str, Any]) -> dict[str, Any]:
    return {
        "Employee ID": driver.get("employeeId"),
        "First Name": driver.get("firstName"),
        "Last Name": driver.get("lastName"),
        "Email": driver.get("email"),
        "Phone": _or_na(driver.get("phone")),
        "Status": driver.get("status"),
        "Availability": driver.get("availability"),
        "License Number": _or_na(driver.get("licenseNumber")),
        "Hire Date": format_date(driver.get("hireDate")),
    }


def shape_trip(trip: dict[str, Any]) -> dict[str, Any]:
    return {
        "Trip ID": trip.get("_id", trip.get("id")),
        "Vehicle": _plate(trip.get("vehicle")),
        "Driver": _person(trip.get("driver")),
        "Start Location": trip.get("startLocation"),
        "End Location": trip.get("endLocation"),
        "Start Time": format_datetime(trip.get("startTime")),
        "End Time": format_datetime(trip.get("endTime")),
        "Distance (km)": _or_na(trip.get("distance")),
        "Status": trip.get("status"),
        "Purpose": _or_na(trip.get("purpose")),
    }


def shape_fuel_log(log: dict[str, Any]) -> dict[str, Any]:
    location = log.get("location")
    station = location.get("stationName") if isinstance(location, dict) else log.get("station")
    return {
        "Date": format_date(log.get("date")),
        "Vehicle": _plate(log.get("vehicle")),
        "Driver": _person(log.get("driver")),
        "Fuel Type": log.get("fuelType"),
        "Quantity (L)": _amount(log.get("quantity"), "amount"),
        "Cost": _money(_amount(log.get("cost"), "totalAmount")),
        "Odometer": _amount(log.get("odometer"), "reading"),
        "Station": _or_na(station),
        "Efficiency (L/100km)": _or_na(log.get("efficiency")),
    }


def shape_maintenance_record(record: dict[str, Any]) -> dict[str, Any]:
    return {
        "Date": format_date(record.get("scheduledDate")),
        "Vehicle": _plate(record.get("vehicle")),
        "Type": record.get("type"),
        "Category": record.get("category"),
        "Title": record.get("title"),
        "Description": _or_na(record.get("description")),
        "Priority": record.get("priority"),
        "Status": record.get("status"),
        "Estimated Cost": _money(record.get("estimatedCost") or None),
        "Actual Cost": _money(record.get("actualCost") or None),
        "Service Provider": _or_na(record.get("serviceProvider")),
    }


SHAPERS: dict[str, Shaper] = {
    "vehicles": shape_vehicle,
    "drivers": shape_driver,
    "trips": shape_trip,
    "fuel": shape_fuel_log,
    "maintenance": shape_maintenance_record,
}
