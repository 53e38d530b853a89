"""Custom exception hierarchy for the lexcards application."""

from collections.abc import Sequence

from lexcards.domain.common.validation import FieldError, first_message_per_field


class LexcardsError(Exception):
    """Base exception for all lexcards errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LexcardsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(LexcardsError):
    """One or more request fields failed validation."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(error) for error in self.errors), status_code=422)

    @property
    def field_messages(self) -> dict[str, str]:
        """Ordered field -> message mapping for the response body."""
        return first_message_per_field(self.errors)


class ServiceError(LexcardsError):
    """Service layer error."""


class PersistenceError(ServiceError):
    """The store failed: connectivity, constraint violation, or similar."""

    def __init__(self, message: str = "the store could not complete the operation") -> None:
        super().__init__(message, status_code=500)


class StoreTimeoutError(PersistenceError):
    """A store operation exceeded its time budget and was aborted."""

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__("the store operation timed out")
        self.status_code = 503
