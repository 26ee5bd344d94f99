"""Prebuilt schemas for the console's forms."""

from datetime import date
from typing import Any, Optional

from .schema import ValidationResult, ValidationSchema
from .validators import EMPLOYEE_ID_RE, PLATE_RE


def build_schemas(today: Optional[date] = None) -> dict[str, ValidationSchema]:
    """Build the form schemas; the vehicle year cap tracks ``today``."""
    today = today or date.today()
    return {
        "user": (
            ValidationSchema()
            .field("name").required().min_length(2).max_length(50)
            .field("email").required().email()
            .field("role").required()
        ),
        "vehicle": (
            ValidationSchema()
            .field("plateNumber").required()
            .pattern(PLATE_RE, "Invalid plate number format (e.g., ABC-123)")
            .field("make").required().min_length(2).max_length(30)
            .field("model").required().min_length(2).max_length(30)
            .field("year").required().number().min(1900).max(today.year + 1)
        ),
        "driver": (
            ValidationSchema()
            .field("firstName").required().min_length(2).max_length(30)
            .field("lastName").required().min_length(2).max_length(30)
            .field("email").required().email()
            .field("employeeId").required()
            .pattern(EMPLOYEE_ID_RE, "Employee ID must be in format EMP001")
        ),
        "trip": (
            ValidationSchema()
            .field("startLocation").required().min_length(3).max_length(100)
            .field("endLocation").required().min_length(3).max_length(100)
            .field("scheduledDate").required()
        ),
        "maintenance": (
            ValidationSchema()
            .field("title").required().min_length(3).max_length(100)
            .field("vehicle").required()
            .field("scheduledDate").required()
            .field("estimatedCost").number().min(0)
        ),
        "fuel_log": (
            ValidationSchema()
            .field("vehicle").required()
            .field("quantity").required().number().min(0.1).max(1000)
            .field("cost").required().number().min(0.01)
            .field("odometer").required().number().min(0)
        ),
    }


SCHEMAS = build_schemas()


def validate_field(value: Any, field_name: str, schema: ValidationSchema) -> Optional[str]:
    """Validate one field in isolation, for as-you-type feedback."""
    result = schema.validate({field_name: value})
    return result.errors.get(field_name)


def validate_form(data: dict[str, Any], schema: ValidationSchema) -> ValidationResult:
    return schema.validate(data)
