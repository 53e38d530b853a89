"""Use case for listing flashcards with filters and pagination."""

from dataclasses import replace

from lexcards.application.common.pagination import DEFAULT_PAGE_SIZE, PaginatedResult
from lexcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lexcards.application.learning.queries.flashcard_filters import FlashcardFilters
from lexcards.application.learning.use_cases.dtos import FlashcardWithProgress
from lexcards.exceptions import ValidationError


class ListFlashcardsUseCase:
    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.default_page_size = default_page_size

    def list_flashcards(self, filters: FlashcardFilters) -> PaginatedResult[FlashcardWithProgress]:
        """
        List one page of the corpus as seen by ``filters.user_id``.

        Without a caller-supplied page size the configured default applies.

        Raises:
            ValidationError: If paging or sort values are out of range; the
                store is not queried in that case
        """
        errors = filters.validate()
        if errors:
            raise ValidationError(errors)

        if filters.page_size is None:
            filters = replace(filters, page_size=self.default_page_size)

        return self.flashcard_repository.list_filtered(filters)
