"""Tests for request field validation."""

from datetime import date

import pytest

from exercise_tracker.domain.errors import (
    InvalidDateError,
    InvalidNumberError,
    MissingFieldError,
)
from exercise_tracker.services.validation import (
    clean_text,
    parse_calendar_date,
    parse_limit,
    require_username,
    validate_new_exercise,
)

TODAY = date(2024, 3, 1)


def test_clean_text_normalizes_values() -> None:
    assert clean_text("  run ") == "run"
    assert clean_text("   ") is None
    assert clean_text(None) is None
    assert clean_text(30) == "30"
    assert clean_text(True) is None
    assert clean_text(["x"]) is None


def test_require_username() -> None:
    assert require_username({"username": " alice "}) == "alice"
    with pytest.raises(MissingFieldError, match="Username is required"):
        require_username({"username": ""})


def test_validate_new_exercise_uses_supplied_date() -> None:
    exercise = validate_new_exercise(
        {"description": "run", "duration": "30", "date": "2023-01-05"}, today=TODAY
    )

    assert exercise.description == "run"
    assert exercise.duration == 30
    assert exercise.date == date(2023, 1, 5)


def test_validate_new_exercise_defaults_to_today() -> None:
    exercise = validate_new_exercise(
        {"description": "swim", "duration": 45, "date": ""}, today=TODAY
    )

    assert exercise.date == TODAY


def test_validate_new_exercise_requires_fields() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        validate_new_exercise({"description": "run"}, today=TODAY)

    assert excinfo.value.message == "_id, description, and duration are required"


@pytest.mark.parametrize("duration", ["abc", "nan", "inf", "12minutes"])
def test_validate_new_exercise_rejects_non_numeric_duration(duration: str) -> None:
    with pytest.raises(InvalidNumberError, match="Duration must be a number"):
        validate_new_exercise({"description": "run", "duration": duration}, TODAY)


def test_validate_new_exercise_rejects_non_positive_duration() -> None:
    with pytest.raises(InvalidNumberError, match="positive"):
        validate_new_exercise({"description": "run", "duration": "0"}, TODAY)


def test_validate_new_exercise_truncates_decimal_duration() -> None:
    exercise = validate_new_exercise({"description": "run", "duration": "30.9"}, TODAY)

    assert exercise.duration == 30


def test_validate_new_exercise_rejects_bad_date() -> None:
    with pytest.raises(InvalidDateError, match="Invalid date format"):
        validate_new_exercise(
            {"description": "run", "duration": "30", "date": "2023-02-30"}, TODAY
        )


def test_parse_calendar_date_accepts_datetimes() -> None:
    assert parse_calendar_date("2023-01-05T18:30:00") == date(2023, 1, 5)
    assert parse_calendar_date("2023-01-05T18:30:00+02:00") == date(2023, 1, 5)
    assert parse_calendar_date("yesterday") is None


def test_parse_limit() -> None:
    assert parse_limit(None) == 0
    assert parse_limit("") == 0
    assert parse_limit("3") == 3
    with pytest.raises(InvalidNumberError, match="Limit must be a number"):
        parse_limit("many")
    with pytest.raises(InvalidNumberError):
        parse_limit("-1")


@pytest.mark.parametrize(
    "raw", ["2023/01/05", "January 5, 2023", "Thu Jan 05 2023", "Jan 5 2023"]
)
def test_validate_new_exercise_accepts_common_date_forms(raw: str) -> None:
    exercise = validate_new_exercise(
        {"description": "run", "duration": "30", "date": raw}, today=TODAY
    )

    assert exercise.date == date(2023, 1, 5)


def test_validate_new_exercise_keeps_leading_integer_of_exponent() -> None:
    exercise = validate_new_exercise({"description": "run", "duration": "1e3"}, TODAY)

    assert exercise.duration == 1


def test_parse_limit_keeps_leading_integer() -> None:
    assert parse_limit("1e2") == 1
    assert parse_limit("2.9") == 2
    assert parse_limit("5 entries") == 5
