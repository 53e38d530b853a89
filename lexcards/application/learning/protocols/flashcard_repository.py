"""Protocol for Flashcard repository in learning context."""

from dataclasses import dataclass
from typing import Protocol

from lexcards.application.common.pagination import PaginatedResult
from lexcards.application.learning.queries.flashcard_filters import FlashcardFilters
from lexcards.application.learning.use_cases.dtos import (
    CategoryCount,
    FilterOptions,
    FlashcardStats,
    FlashcardWithProgress,
)
from lexcards.domain.common.result import Result
from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.flashcard import Flashcard


@dataclass(frozen=True)
class EditConflict:
    """Signal from a conditional update whose expected version was stale."""

    flashcard_id: FlashcardId
    expected_version: int


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def insert(self, flashcard: Flashcard, owner_id: UserId) -> Flashcard:
        """
        Store a new card together with its owner's initial progress.

        Returns:
            The stored card with ID, creation time and version 1
        """
        ...

    def get(self, flashcard_id: FlashcardId, user_id: UserId) -> FlashcardWithProgress | None:
        """
        Find a card joined with the user's progress (zero state if none).

        Returns:
            The joined card, or None if no card has this ID
        """
        ...

    def update(self, flashcard: Flashcard) -> Result[int, EditConflict]:
        """
        Write the card only if the stored version equals ``flashcard.version``.

        Returns:
            Success with the new version, or Failure with the conflict
        """
        ...

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete the card and all progress on it.

        Returns:
            True if deleted, False if not found
        """
        ...

    def list_filtered(self, filters: FlashcardFilters) -> PaginatedResult[FlashcardWithProgress]:
        """Filter, sort and page the corpus for one user (filters already validated)."""
        ...

    def user_stats(self, user_id: UserId) -> FlashcardStats:
        """Count the user's progress records by status."""
        ...

    def category_counts(self, user_id: UserId) -> list[CategoryCount]:
        """Count cards per category label among cards the user has progress on."""
        ...

    def filter_options(self) -> FilterOptions:
        """Distinct source files and section types across the corpus."""
        ...
