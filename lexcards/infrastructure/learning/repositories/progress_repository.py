"""Repository for per-user flashcard progress."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import case
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexcards.application.learning.use_cases.exceptions import FlashcardNotFoundError
from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.progress_record import (
    MASTERY_THRESHOLD,
    ProgressRecord,
    ProgressStatus,
)
from lexcards.infrastructure.common.transaction import atomic, is_postgresql
from lexcards.infrastructure.learning.mappers.progress_mapper import ProgressMapper
from lexcards.models import UserFlashcard as UserFlashcardORM

logger = logging.getLogger(__name__)

PROGRESS_KEY = ["user_id", "flashcard_id"]


class ProgressRepository:
    """
    Mastery state machine backed by single-statement upserts.

    Every transition is one ``INSERT ... ON CONFLICT DO UPDATE``, so two
    concurrent reviews of the same card by the same user cannot lose an
    increment.
    """

    def __init__(self, db: Session, statement_timeout: float) -> None:
        self.db = db
        self.statement_timeout = statement_timeout
        self.mapper = ProgressMapper()

    def record_correct(self, user_id: UserId, flashcard_id: FlashcardId) -> ProgressRecord:
        """
        Count one correct review.

        The count grows only while below MASTERY_THRESHOLD; the status
        becomes mastered once it reaches it. The review time is refreshed
        either way.

        Raises:
            FlashcardNotFoundError: If the flashcard does not exist
        """
        count = UserFlashcardORM.correct_count
        return self._upsert(
            user_id,
            flashcard_id,
            inserted={"correct_count": 1, "status": ProgressStatus.IN_PROGRESS.value},
            on_conflict={
                "correct_count": case((count < MASTERY_THRESHOLD, count + 1), else_=count),
                "status": case(
                    (count + 1 >= MASTERY_THRESHOLD, ProgressStatus.MASTERED.value),
                    else_=ProgressStatus.IN_PROGRESS.value,
                ),
            },
        )

    def reset(self, user_id: UserId, flashcard_id: FlashcardId) -> ProgressRecord:
        """
        Return the pair to the not_started state.

        Raises:
            FlashcardNotFoundError: If the flashcard does not exist
        """
        values = {"correct_count": 0, "status": ProgressStatus.NOT_STARTED.value}
        return self._upsert(user_id, flashcard_id, inserted=values, on_conflict=values)

    def _upsert(
        self,
        user_id: UserId,
        flashcard_id: FlashcardId,
        inserted: dict[str, Any],
        on_conflict: dict[str, Any],
    ) -> ProgressRecord:
        reviewed_at = datetime.now(UTC)
        insert = postgresql.insert if is_postgresql(self.db) else sqlite.insert

        stmt = insert(UserFlashcardORM).values(
            user_id=user_id.value,
            flashcard_id=flashcard_id.value,
            last_reviewed_at=reviewed_at,
            **inserted,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=PROGRESS_KEY,
            set_={**on_conflict, "last_reviewed_at": stmt.excluded.last_reviewed_at},
        ).returning(
            UserFlashcardORM.correct_count,
            UserFlashcardORM.status,
            UserFlashcardORM.last_reviewed_at,
        )

        with atomic(self.db, self.statement_timeout):
            try:
                correct_count, status, last_reviewed_at = self.db.execute(stmt).one()
            except IntegrityError as e:
                # Foreign key violation: the flashcard (or user) is gone
                logger.debug(f"Progress upsert rejected for flashcard {flashcard_id.value}: {e}")
                raise FlashcardNotFoundError(flashcard_id.value) from e

        return ProgressRecord(
            user_id=user_id,
            flashcard_id=flashcard_id,
            correct_count=correct_count,
            status=ProgressStatus(status),
            last_reviewed_at=last_reviewed_at,
        )
