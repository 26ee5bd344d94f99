"""
Field validators.

Each validator takes a value and returns None when it passes or the error
message when it fails. Empty values pass everything except ``required``,
so optional fields are only checked when filled in.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Pattern, Union

from dateutil import parser as date_parser

Validator = Callable[[Any], Optional[str]]

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")
PHONE_STRIP_RE = re.compile(r"[\s\-()]")
PLATE_RE = re.compile(r"^[A-Z0-9]{2,3}-[A-Z0-9]{2,4}$", re.IGNORECASE)
EMPLOYEE_ID_RE = re.compile(r"^EMP\d{3,6}$", re.IGNORECASE)


def is_empty(value: Any) -> bool:
    return value is None or value == ""


def _sized(value: Any) -> Any:
    return value if isinstance(value, (str, list, tuple, dict)) else str(value)


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    try:
        return date_parser.parse(str(value))
    except (ValueError, OverflowError):
        return None


def _now_like(moment: datetime) -> datetime:
    return datetime.now(timezone.utc) if moment.tzinfo else datetime.now()


def required(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value) or (isinstance(value, str) and not value.strip()):
        return message or "This field is required"
    return None


def email(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    if not EMAIL_RE.match(str(value)):
        return message or "Please enter a valid email address"
    return None


def min_length(minimum: int, message: Optional[str] = None) -> Validator:
    def check(value: Any) -> Optional[str]:
        if is_empty(value):
            return None
        if len(_sized(value)) < minimum:
            return message or f"Must be at least {minimum} characters long"
        return None
    return check


def max_length(maximum: int, message: Optional[str] = None) -> Validator:
    def check(value: Any) -> Optional[str]:
        if is_empty(value):
            return None
        if len(_sized(value)) > maximum:
            return message or f"Must be no more than {maximum} characters long"
        return None
    return check


def pattern(regex: Union[str, Pattern[str]], message: Optional[str] = None) -> Validator:
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def check(value: Any) -> Optional[str]:
        if is_empty(value):
            return None
        if not compiled.search(str(value)):
            return message or "Invalid format"
        return None
    return check


def number(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    if _to_number(value) is None:
        return message or "Must be a valid number"
    return None


def min_value(minimum: float, message: Optional[str] = None) -> Validator:
    def check(value: Any) -> Optional[str]:
        if is_empty(value):
            return None
        parsed = _to_number(value)
        if parsed is None or parsed < minimum:
            return message or f"Must be at least {minimum:g}"
        return None
    return check


def max_value(maximum: float, message: Optional[str] = None) -> Validator:
    def check(value: Any) -> Optional[str]:
        if is_empty(value):
            return None
        parsed = _to_number(value)
        if parsed is None or parsed > maximum:
            return message or f"Must be no more than {maximum:g}"
        return None
    return check


def phone_number(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    if not PHONE_RE.match(PHONE_STRIP_RE.sub("", str(value))):
        return message or "Please enter a valid phone number"
    return None


def plate_number(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    if not PLATE_RE.match(str(value)):
        return message or "Please enter a valid plate number"
    return None


def employee_id(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    if not EMPLOYEE_ID_RE.match(str(value)):
        return message or "Please enter a valid employee ID"
    return None


def date(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    if _to_datetime(value) is None:
        return message or "Please enter a valid date"
    return None


def future_date(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    moment = _to_datetime(value)
    if moment is None or moment <= _now_like(moment):
        return message or "Date must be in the future"
    return None


def past_date(value: Any, message: Optional[str] = None) -> Optional[str]:
    if is_empty(value):
        return None
    moment = _to_datetime(value)
    if moment is None or moment >= _now_like(moment):
        return message or "Date must be in the past"
    return None
