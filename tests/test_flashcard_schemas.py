"""Tests for response schemas."""

from lexcards import models
from lexcards.application.learning.queries import FlashcardFilters
from lexcards.domain.common.validation import FieldError
from lexcards.domain.common.value_objects import UserId
from lexcards.exceptions import ValidationError
from lexcards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from lexcards.infrastructure.learning.schemas import (
    FlashcardListResponse,
    FlashcardResponse,
    FlashcardStatsResponse,
    ValidationErrorResponse,
)
from tests.factories import MCQ_CONTENT, build_flashcard


class TestFlashcardResponse:
    def test_from_domain(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        saved = flashcard_repository.insert(
            build_flashcard(MCQ_CONTENT, flashcard_type="mcq"), UserId(test_user.id)
        )
        found = flashcard_repository.get(saved.id, UserId(test_user.id))
        assert found is not None

        response = FlashcardResponse.from_domain(found)

        assert response.id == saved.id.value
        assert response.flashcard_type == "mcq"
        assert response.flashcard_content == MCQ_CONTENT
        assert response.categories == ["python"]
        assert response.version == 1
        assert response.status == "not_started"
        assert response.correct_count == 0

    def test_list_response(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        for _ in range(3):
            flashcard_repository.insert(build_flashcard(), UserId(test_user.id))
        result = flashcard_repository.list_filtered(
            FlashcardFilters(user_id=UserId(test_user.id), page=2, page_size=2)
        )

        response = FlashcardListResponse.from_domain(result)

        assert len(response.flashcards) == 1
        assert response.metadata.model_dump() == {
            "current_page": 2,
            "page_size": 2,
            "first_page": 1,
            "last_page": 2,
            "total_records": 3,
        }

    def test_stats_response(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        flashcard_repository.insert(build_flashcard(), UserId(test_user.id))

        response = FlashcardStatsResponse.from_domain(
            flashcard_repository.user_stats(UserId(test_user.id))
        )

        assert response.model_dump() == {
            "total": 1,
            "mastered": 0,
            "in_progress": 0,
            "not_started": 1,
        }


class TestValidationErrorResponse:
    def test_keeps_first_message_per_field(self) -> None:
        error = ValidationError(
            [
                FieldError("question", "question must be provided"),
                FieldError("flashcard_content.options", "at least 2 options required"),
                FieldError("flashcard_content.options", "options must be unique"),
            ]
        )

        response = ValidationErrorResponse.from_exception(error)

        assert list(response.errors.items()) == [
            ("question", "question must be provided"),
            ("flashcard_content.options", "at least 2 options required"),
        ]
