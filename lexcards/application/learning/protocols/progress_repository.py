"""Protocol for the progress tracker's store."""

from typing import Protocol

from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.progress_record import ProgressRecord


class ProgressRepositoryProtocol(Protocol):
    """Atomic per-(user, card) mastery transitions."""

    def record_correct(self, user_id: UserId, flashcard_id: FlashcardId) -> ProgressRecord:
        """
        Register a correct review.

        Creates the record at count 1 if missing; otherwise increments the
        count while it is below the mastery threshold. Always refreshes
        last_reviewed_at.

        Raises:
            FlashcardNotFoundError: If the card (or user) does not exist
        """
        ...

    def reset(self, user_id: UserId, flashcard_id: FlashcardId) -> ProgressRecord:
        """
        Put the record back to count 0 / not_started, creating it if missing.

        Raises:
            FlashcardNotFoundError: If the card (or user) does not exist
        """
        ...
