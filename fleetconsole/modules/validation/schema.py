"""
Fluent validation schema builder.

    schema = (
        ValidationSchema()
        .field("email").required().email()
        .field("name").required().min_length(2)
    )
    result = schema.validate({"email": "x"})
    result.errors  # {"email": "Please enter a valid email address", "name": ...}
"""

from functools import partial
from typing import Any, Optional, Pattern, Union

from pydantic import BaseModel, Field

from . import validators
from .validators import Validator


class ValidationResult(BaseModel):
    is_valid: bool = Field(..., description="True when no field failed")
    errors: dict[str, str] = Field(default_factory=dict, description="First error per field")


class ValidationSchema:
    def __init__(self):
        self.rules: dict[str, list[Validator]] = {}
        self._current: Optional[str] = None

    def field(self, name: str) -> "ValidationSchema":
        self._current = name
        self.rules[name] = []
        return self

    def _add(self, validator: Validator) -> "ValidationSchema":
        if self._current is None:
            raise ValueError("Call field() before adding rules")
        self.rules[self._current].append(validator)
        return self

    def required(self, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(partial(validators.required, message=message))

    def email(self, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(partial(validators.email, message=message))

    def min_length(self, minimum: int, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(validators.min_length(minimum, message))

    def max_length(self, maximum: int, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(validators.max_length(maximum, message))

    def pattern(
        self, regex: Union[str, Pattern[str]], message: Optional[str] = None
    ) -> "ValidationSchema":
        return self._add(validators.pattern(regex, message))

    def number(self, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(partial(validators.number, message=message))

    def min(self, minimum: float, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(validators.min_value(minimum, message))

    def max(self, maximum: float, message: Optional[str] = None) -> "ValidationSchema":
        return self._add(validators.max_value(maximum, message))

    def custom(self, validator: Validator) -> "ValidationSchema":
        return self._add(validator)

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        errors: dict[str, str] = {}
        for name, rules in self.rules.items():
            value = data.get(name)
            for rule in rules:
                error = rule(value)
                if error:
                    errors[name] = error
                    break
        return ValidationResult(is_valid=not errors, errors=errors)
