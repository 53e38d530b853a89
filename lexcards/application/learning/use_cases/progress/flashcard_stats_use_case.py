"""Use case for aggregate reads over a user's progress."""

from lexcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from lexcards.application.learning.use_cases.dtos import (
    CategoryCount,
    FilterOptions,
    FlashcardStats,
)
from lexcards.domain.common.value_objects import UserId


class FlashcardStatsUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def get_user_stats(self, user_id: int) -> FlashcardStats:
        return self.flashcard_repository.user_stats(UserId(user_id))

    def get_category_counts(self, user_id: int) -> list[CategoryCount]:
        return self.flashcard_repository.category_counts(UserId(user_id))

    def get_filter_options(self) -> FilterOptions:
        return self.flashcard_repository.filter_options()
