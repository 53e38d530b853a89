"""
Query base class.

Queries represent requests for information without side effects.
They are named descriptively: ListFlashcards, GetFlashcard, etc.

Example:
    @dataclass(frozen=True)
    class ListFlashcardsQuery(Query):
        user_id: int
        page: int = 1

        def validate(self) -> list[FieldError]:
            if self.page < 1:
                return [FieldError("page", "must be greater than zero")]
            return []
"""

from dataclasses import dataclass

from lexcards.domain.common.validation import FieldError


@dataclass(frozen=True)
class Query:
    """
    Base class for Queries.

    Queries are:
    - Immutable (frozen dataclass)
    - Named descriptively (ListFlashcards)
    - Carry filter/pagination parameters
    - Have no side effects (read-only)

    Raw caller input is carried as-is; ``validate`` reports every problem
    before anything touches the store.
    """

    def validate(self) -> list[FieldError]:
        """Return every field error in this query (empty when valid)."""
        return []
