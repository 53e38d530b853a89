"""Use case for reading a single flashcard."""

from lexcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lexcards.application.learning.use_cases.dtos import FlashcardWithProgress
from lexcards.application.learning.use_cases.exceptions import FlashcardNotFoundError
from lexcards.domain.common.value_objects import FlashcardId, UserId


class GetFlashcardUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def get_flashcard(self, flashcard_id: int, user_id: int) -> FlashcardWithProgress:
        """
        Get a flashcard with the requesting user's progress on it.

        Raises:
            FlashcardNotFoundError: If no such flashcard exists
        """
        if flashcard_id < 1:
            raise FlashcardNotFoundError(flashcard_id)

        found = self.flashcard_repository.get(FlashcardId(flashcard_id), UserId(user_id))
        if found is None:
            raise FlashcardNotFoundError(flashcard_id)
        return found
