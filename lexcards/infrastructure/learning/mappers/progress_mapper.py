"""Mapper for UserFlashcard ORM → ProgressRecord conversion."""

from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.progress_record import ProgressRecord, ProgressStatus
from lexcards.models import UserFlashcard as UserFlashcardORM


class ProgressMapper:
    def to_domain(self, orm_model: UserFlashcardORM) -> ProgressRecord:
        return ProgressRecord(
            user_id=UserId(orm_model.user_id),
            flashcard_id=FlashcardId(orm_model.flashcard_id),
            correct_count=orm_model.correct_count,
            status=ProgressStatus(orm_model.status),
            last_reviewed_at=orm_model.last_reviewed_at,
        )

    def to_domain_or_initial(
        self,
        orm_model: UserFlashcardORM | None,
        user_id: UserId,
        flashcard_id: FlashcardId,
    ) -> ProgressRecord:
        """Missing progress is the zero state, not an error."""
        if orm_model is None:
            return ProgressRecord.initial(user_id, flashcard_id)
        return self.to_domain(orm_model)
