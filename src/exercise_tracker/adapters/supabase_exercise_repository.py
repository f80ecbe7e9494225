"""Supabase repository for exercise entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from exercise_tracker.domain.logs import LogQuery
from exercise_tracker.domain.models import ExerciseRecord, NewExercise
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise entries."""

    client: Client

    def create_exercise(self, user_id: UUID, exercise: NewExercise) -> ExerciseRecord:
        """Create an exercise row and return it."""
        response = (
            self.client.table("exercises")
            .insert(
                {
                    "user_id": str(user_id),
                    "description": exercise.description,
                    "duration": exercise.duration,
                    "date": exercise.date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise")
        return _parse_row(response.data[0])

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        """Return the user's exercises in the query range, oldest first."""
        request = (
            self.client.table("exercises").select(_COLUMNS).eq("user_id", str(user_id))
        )
        if query.date_from is not None:
            request = request.gte("date", query.date_from.isoformat())
        if query.date_to is not None:
            request = request.lte("date", query.date_to.isoformat())
        request = request.order("date", desc=False).order("created_at", desc=False)
        if query.limit > 0:
            request = request.limit(query.limit)
        response = request.execute()
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> ExerciseRecord:
    return ExerciseRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row["description"]),
        duration=int(row["duration"]),
        date=date.fromisoformat(str(row["date"])[:10]),
    )
