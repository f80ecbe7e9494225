"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

CALENDAR_DATE_FORMAT = "%a %b %d %Y"


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


@dataclass(frozen=True)
class NewExercise:
    """Validated input for a new exercise entry."""

    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class ExerciseRecord:
    """Represents an exercise entry stored in the database."""

    id: UUID
    user_id: UUID
    description: str
    duration: int
    date: date


def format_calendar_date(value: date) -> str:
    """Render a date like ``Thu Jan 05 2023``."""
    return value.strftime(CALENDAR_DATE_FORMAT)
