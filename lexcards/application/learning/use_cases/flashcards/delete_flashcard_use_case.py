"""Use case for deleting flashcards."""

import structlog

from lexcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lexcards.application.learning.use_cases.exceptions import FlashcardNotFoundError
from lexcards.domain.common.value_objects import FlashcardId

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def delete_flashcard(self, flashcard_id: int) -> None:
        """
        Delete a flashcard and every user's progress on it.

        Args:
            flashcard_id: ID of the flashcard to delete

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        if flashcard_id < 1:
            raise FlashcardNotFoundError(flashcard_id)

        if not self.flashcard_repository.delete(FlashcardId(flashcard_id)):
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("flashcard_deleted", flashcard_id=flashcard_id)
