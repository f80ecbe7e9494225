"""User-related business logic."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.errors import DuplicateUsernameError, UserNotFoundError
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.validation import require_username

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str) -> UserRecord | None:
        """Insert a user, returning None when the username is already taken."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in registration order."""


def parse_user_id(raw: str) -> UUID | None:
    """Parse a user id from a request path."""
    try:
        return UUID(raw.strip())
    except ValueError:
        return None


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository

    def register(self, fields: Mapping[str, object]) -> UserRecord:
        """Create a user from a registration payload.

        Uniqueness is decided by the store in the same insert, so two
        concurrent registrations cannot both succeed.
        """
        username = require_username(fields)
        created = self.repository.create_user(username)
        if created is None:
            raise DuplicateUsernameError()
        _logger.info("Registered user: id=%s username=%s", created.id, username)
        return created

    def list_users(self) -> list[UserRecord]:
        return self.repository.list_users()

    def get_user(self, raw_user_id: str) -> UserRecord:
        """Return the user for a path id or raise ``UserNotFoundError``."""
        user_id = parse_user_id(raw_user_id)
        if user_id is None:
            raise UserNotFoundError()
        user = self.repository.get_user(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
