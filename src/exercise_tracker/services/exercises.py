"""Exercise entry and log business logic."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from exercise_tracker.domain.logs import ExerciseLog, LogQuery
from exercise_tracker.domain.models import ExerciseRecord, NewExercise, UserRecord
from exercise_tracker.services.queries import build_log_query
from exercise_tracker.services.users import UserService
from exercise_tracker.services.validation import validate_new_exercise

_logger = logging.getLogger(__name__)


class ExerciseRepository(Protocol):
    """Persistence interface for exercise entries."""

    def create_exercise(self, user_id: UUID, exercise: NewExercise) -> ExerciseRecord:
        """Insert an exercise entry and return it."""

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        """Return a user's entries matching the query, oldest first."""


@dataclass
class ExerciseService:
    """Service for adding exercise entries and reading logs."""

    user_service: UserService
    repository: ExerciseRepository
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def add_exercise(
        self, raw_user_id: str, fields: Mapping[str, object]
    ) -> tuple[UserRecord, ExerciseRecord]:
        """Validate and store an exercise entry for an existing user."""
        exercise = validate_new_exercise(fields, today=self.today())
        user = self.user_service.get_user(raw_user_id)
        record = self.repository.create_exercise(user.id, exercise)
        _logger.info(
            "Added exercise: user_id=%s duration=%s date=%s",
            user.id,
            record.duration,
            record.date.isoformat(),
        )
        return user, record

    def get_log(self, raw_user_id: str, params: Mapping[str, object]) -> ExerciseLog:
        """Return the user's entries filtered by range and limit."""
        query = build_log_query(params)
        user = self.user_service.get_user(raw_user_id)
        entries = self.repository.list_exercises(user.id, query)
        return ExerciseLog(user=user, entries=entries)
