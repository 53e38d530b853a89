"""Use case for creating flashcards."""

from typing import Any

import structlog

from lexcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lexcards.domain.common.value_objects import UserId
from lexcards.domain.learning.entities.flashcard import Flashcard, FlashcardFields
from lexcards.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating flashcards."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def create_flashcard(
        self,
        user_id: int,
        fields: FlashcardFields,
        raw_content: Any,  # noqa: ANN401
    ) -> Flashcard:
        """
        Validate and store a new flashcard for a user.

        The creating user starts with a not_started progress record on it.

        Args:
            user_id: ID of the creating user
            fields: Decoded request fields
            raw_content: Content payload matching ``fields.flashcard_type``

        Returns:
            The stored flashcard (ID, creation time and version 1 assigned)

        Raises:
            ValidationError: If any field or the content is invalid; nothing is written
        """
        result = Flashcard.build(fields, raw_content)
        if result.is_failure:
            raise ValidationError(result.unwrap_error())

        flashcard = self.flashcard_repository.insert(result.unwrap(), UserId(user_id))

        logger.info(
            "flashcard_created",
            flashcard_id=flashcard.id.value,
            flashcard_type=flashcard.type.value,
            user_id=user_id,
        )
        return flashcard
