"""
Form validation module.

Public API:
- validators: Individual field validators
- ValidationSchema, ValidationResult: Fluent schema builder
- SCHEMAS, build_schemas: Prebuilt form schemas
- validate_field, validate_form: Helpers
"""

from . import validators
from .schema import ValidationSchema, ValidationResult
from .schemas import SCHEMAS, build_schemas, validate_field, validate_form

__all__ = [
    "validators",
    "ValidationSchema",
    "ValidationResult",
    "SCHEMAS",
    "build_schemas",
    "validate_field",
    "validate_form",
]
