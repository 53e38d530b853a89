"""Use case for updating flashcards."""

from typing import Any

import structlog

from lexcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lexcards.application.learning.use_cases.dtos import FlashcardWithProgress
from lexcards.application.learning.use_cases.exceptions import (
    EditConflictError,
    FlashcardNotFoundError,
)
from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.flashcard import Flashcard, FlashcardFields
from lexcards.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for updating flashcards."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def update_flashcard(
        self,
        flashcard_id: int,
        user_id: int,
        fields: FlashcardFields,
        raw_content: Any,  # noqa: ANN401
        version: int,
    ) -> FlashcardWithProgress:
        """
        Replace a flashcard's editable attributes.

        The write only applies if the card is still at ``version``, the
        version the caller last read. Conflicts are never retried here.

        Args:
            flashcard_id: ID of the flashcard to update
            user_id: ID of the requesting user
            fields: New field values
            raw_content: New content payload
            version: Version the caller's edit is based on

        Returns:
            The updated flashcard with its new version

        Raises:
            FlashcardNotFoundError: If the flashcard is not found
            ValidationError: If the new values are invalid; nothing is written
            EditConflictError: If the card changed or vanished since ``version``
        """
        if flashcard_id < 1:
            raise FlashcardNotFoundError(flashcard_id)

        flashcard_id_vo = FlashcardId(flashcard_id)
        current = self.flashcard_repository.get(flashcard_id_vo, UserId(user_id))
        if current is None:
            raise FlashcardNotFoundError(flashcard_id)

        result = Flashcard.build(fields, raw_content)
        if result.is_failure:
            raise ValidationError(result.unwrap_error())

        flashcard = current.flashcard
        flashcard.apply_revision(result.unwrap(), expected_version=version)

        outcome = self.flashcard_repository.update(flashcard)
        if outcome.is_failure:
            logger.warning(
                "flashcard_edit_conflict", flashcard_id=flashcard_id, expected_version=version
            )
            raise EditConflictError(flashcard_id, version)

        flashcard.version = outcome.unwrap()

        logger.info("flashcard_updated", flashcard_id=flashcard_id, version=flashcard.version)
        return current
