"""Use case for recording review outcomes on a flashcard."""

import structlog

from lexcards.application.learning.protocols.progress_repository import (
    ProgressRepositoryProtocol,
)
from lexcards.application.learning.use_cases.exceptions import FlashcardNotFoundError
from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.progress_record import ProgressRecord

logger = structlog.get_logger(__name__)


class ReviewFlashcardUseCase:
    """Drives the per-user mastery state machine."""

    def __init__(self, progress_repository: ProgressRepositoryProtocol) -> None:
        self.progress_repository = progress_repository

    def record_correct(self, flashcard_id: int, user_id: int) -> ProgressRecord:
        """
        Count one correct review of the card by the user.

        Raises:
            FlashcardNotFoundError: If the flashcard does not exist
        """
        if flashcard_id < 1:
            raise FlashcardNotFoundError(flashcard_id)

        record = self.progress_repository.record_correct(UserId(user_id), FlashcardId(flashcard_id))

        logger.info(
            "flashcard_reviewed",
            flashcard_id=flashcard_id,
            user_id=user_id,
            correct_count=record.correct_count,
            status=record.status.value,
        )
        return record

    def reset(self, flashcard_id: int, user_id: int) -> ProgressRecord:
        """
        Start the user's progress on the card over.

        Raises:
            FlashcardNotFoundError: If the flashcard does not exist
        """
        if flashcard_id < 1:
            raise FlashcardNotFoundError(flashcard_id)

        record = self.progress_repository.reset(UserId(user_id), FlashcardId(flashcard_id))

        logger.info("flashcard_progress_reset", flashcard_id=flashcard_id, user_id=user_id)
        return record
