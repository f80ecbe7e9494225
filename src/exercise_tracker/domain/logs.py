"""Domain models for exercise log queries."""

from dataclasses import dataclass
from datetime import date

from exercise_tracker.domain.models import ExerciseRecord, UserRecord


@dataclass(frozen=True)
class LogQuery:
    """Range and size restrictions for a user's exercise log.

    Both bounds are inclusive. A ``limit`` of zero means the result set is
    unbounded. Results are always ordered by ascending date.
    """

    date_from: date | None = None
    date_to: date | None = None
    limit: int = 0


@dataclass(frozen=True)
class ExerciseLog:
    """A user together with the entries matched by a log query."""

    user: UserRecord
    entries: list[ExerciseRecord]

    @property
    def count(self) -> int:
        return len(self.entries)
