"""
Errors raised by pure domain code.

Nothing here knows about status codes or transports; the application
layer decides how each failure reaches a caller.
"""

from collections.abc import Mapping


class DomainError(Exception):
    """Root of every domain failure; ``details`` holds structured context."""

    def __init__(self, message: str, details: Mapping[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class InvariantViolationError(DomainError):
    """An entity was asked to hold a state its rules forbid."""

    def __init__(
        self, entity: str, invariant: str, details: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(f"{entity}: {invariant}", details)
        self.entity = entity
        self.invariant = invariant
