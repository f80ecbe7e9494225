"""Errors surfaced to API clients."""


class TrackerError(Exception):
    """Base class for errors reported back to the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingFieldError(TrackerError):
    """A required field was absent or empty."""


class InvalidNumberError(TrackerError):
    """A numeric field could not be parsed."""


class InvalidDateError(TrackerError):
    """A date field could not be parsed."""


class UserNotFoundError(TrackerError):
    """The referenced user does not exist."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class DuplicateUsernameError(TrackerError):
    """The username is already registered."""

    def __init__(self, message: str = "Username already exists") -> None:
        super().__init__(message)


class StoreFailureError(TrackerError):
    """The store raised while serving the request."""
