"""Pydantic response models and request body helpers."""

from fastapi import Request
from pydantic import BaseModel

from exercise_tracker.domain.logs import ExerciseLog
from exercise_tracker.domain.models import (
    ExerciseRecord,
    UserRecord,
    format_calendar_date,
)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class UserOut(BaseModel):
    """Registered user payload."""

    id: str
    username: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserOut":
        return cls(id=str(user.id), username=user.username)


class ExerciseOut(BaseModel):
    """Payload returned after adding an exercise."""

    id: str
    username: str
    description: str
    duration: int
    date: str

    @classmethod
    def from_records(cls, user: UserRecord, exercise: ExerciseRecord) -> "ExerciseOut":
        return cls(
            id=str(user.id),
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_calendar_date(exercise.date),
        )


class LogEntryOut(BaseModel):
    """Single entry of an exercise log."""

    description: str
    duration: int
    date: str


class ExerciseLogOut(BaseModel):
    """Exercise log payload."""

    id: str
    username: str
    count: int
    log: list[LogEntryOut]

    @classmethod
    def from_log(cls, log: ExerciseLog) -> "ExerciseLogOut":
        return cls(
            id=str(log.user.id),
            username=log.user.username,
            count=log.count,
            log=[
                LogEntryOut(
                    description=entry.description,
                    duration=entry.duration,
                    date=format_calendar_date(entry.date),
                )
                for entry in log.entries
            ],
        )


async def read_body_fields(request: Request) -> dict[str, object]:
    """Return the request body as a flat mapping.

    JSON objects and form bodies are accepted; anything else reads as empty.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
