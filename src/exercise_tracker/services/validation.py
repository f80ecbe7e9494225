"""Validation of raw request fields.

Every function here is pure: it takes values as they arrive from a request
body or query string and returns a normalized value or raises a
``TrackerError`` subclass. Nothing touches the store.
"""

import math
import re
from collections.abc import Mapping
from datetime import date, datetime

from dateutil import parser as date_parser

from exercise_tracker.domain.errors import (
    InvalidDateError,
    InvalidNumberError,
    MissingFieldError,
)
from exercise_tracker.domain.models import NewExercise

MIN_DURATION = 1
_LEADING_INTEGER = re.compile(r"[+-]?\d+")


def clean_text(value: object) -> str | None:
    """Return stripped text for a raw field, or None when it is empty."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        value = str(value)
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None


def require_username(fields: Mapping[str, object]) -> str:
    """Return the username from a registration payload."""
    username = clean_text(fields.get("username"))
    if username is None:
        raise MissingFieldError("Username is required")
    return username


def parse_integer(raw: str) -> int | None:
    """Return the leading integer of the text, ignoring anything after it."""
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return None
    return int(match.group())


def is_numeric(raw: str) -> bool:
    """Return True when the whole text is a finite number."""
    try:
        return math.isfinite(float(raw))
    except ValueError:
        return False


def parse_duration(raw: str) -> int:
    """Parse a duration; decimal or exponent text keeps only its leading integer."""
    duration = parse_integer(raw) if is_numeric(raw) else None
    if duration is None:
        raise InvalidNumberError("Duration must be a number")
    if duration < MIN_DURATION:
        raise InvalidNumberError("Duration must be a positive number")
    return duration


def parse_limit(value: object) -> int:
    """Parse the log limit; absent means zero, which is unbounded."""
    raw = clean_text(value)
    if raw is None:
        return 0
    limit = parse_integer(raw)
    if limit is None or limit < 0:
        raise InvalidNumberError("Limit must be a number")
    return limit


def parse_calendar_date(raw: str) -> date | None:
    """Parse date text into a calendar date.

    ISO-8601 dates and date-times are tried first; other common forms such as
    ``2023/01/05``, ``January 5, 2023`` or ``Thu Jan 05 2023`` go through
    dateutil.
    """
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    try:
        return date_parser.parse(raw).date()
    except (ValueError, OverflowError):
        return None


def parse_optional_date(value: object, message: str) -> date | None:
    raw = clean_text(value)
    if raw is None:
        return None
    parsed = parse_calendar_date(raw)
    if parsed is None:
        raise InvalidDateError(message)
    return parsed


def validate_new_exercise(fields: Mapping[str, object], today: date) -> NewExercise:
    """Validate an add-exercise payload.

    ``today`` is used when the payload carries no date.
    """
    description = clean_text(fields.get("description"))
    raw_duration = clean_text(fields.get("duration"))
    if description is None or raw_duration is None:
        raise MissingFieldError("_id, description, and duration are required")
    duration = parse_duration(raw_duration)
    entry_date = parse_optional_date(fields.get("date"), "Invalid date format")
    return NewExercise(
        description=description,
        duration=duration,
        date=entry_date or today,
    )
