from __future__ import annotations

import math
import re
from datetime import date

from ..core.enums import DayType, Person
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_month_id

_MONTH_ID_RE = re.compile(r"^\d{4}-\d{2}$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def require_month_id(value: str) -> str:
    if not isinstance(value, str) or not _MONTH_ID_RE.match(value):
        raise ValidationError(f"Invalid month id: {value!r} (expected YYYY-MM)")
    try:
        parse_month_id(value)
    except ValueError as e:
        raise ValidationError(f"Invalid month id: {value!r}") from e
    return value


def require_iso_date(value: str) -> date:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    try:
        return parse_iso_date(value)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def require_person(value) -> Person:
    try:
        return Person(value)
    except ValueError as e:
        raise ValidationError(f"Unknown person: {value!r}") from e


def require_day_type(value) -> DayType:
    try:
        return DayType(value)
    except ValueError as e:
        raise ValidationError(f"Unknown day type: {value!r}") from e


def require_number(value, field_name: str) -> float:
    # bool is an int subclass; a JSON true/false is never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    try:
        finite = math.isfinite(float(value))
    except OverflowError:
        finite = False
    if not finite:
        raise ValidationError(f"{field_name} must be finite")
    return value


def require_non_negative(value, field_name: str) -> float:
    value = require_number(value, field_name)
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_positive(value, field_name: str) -> float:
    value = require_number(value, field_name)
    if value <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return value


def require_non_negative_int(value, field_name: str) -> int:
    value = require_non_negative(value, field_name)
    if int(value) != value:
        raise ValidationError(f"{field_name} must be a whole number")
    return int(value)
