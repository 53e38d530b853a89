"""
Per-user mastery progress on a single flashcard.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from lexcards.domain.common.value_objects import FlashcardId, UserId

# Correct reviews needed before a card counts as mastered
MASTERY_THRESHOLD = 5


class ProgressStatus(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    MASTERED = "mastered"


@dataclass(frozen=True)
class ProgressRecord:
    """
    Mastery state of one user on one card.

    Identity is the (user_id, flashcard_id) pair; at most one record
    exists per pair. Transitions:

        not_started --correct--> in_progress --correct (count hits 5)--> mastered
        any --reset--> not_started

    Once the count reaches MASTERY_THRESHOLD further correct reviews only
    refresh ``last_reviewed_at``.
    """

    user_id: UserId
    flashcard_id: FlashcardId
    correct_count: int = 0
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    last_reviewed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.correct_count < 0:
            raise ValueError("correct_count must be non-negative")

    @property
    def is_mastered(self) -> bool:
        return self.status == ProgressStatus.MASTERED

    @property
    def reviews_until_mastered(self) -> int:
        return max(MASTERY_THRESHOLD - self.correct_count, 0)

    @classmethod
    def initial(cls, user_id: UserId, flashcard_id: FlashcardId) -> "ProgressRecord":
        """Zero state, used when no progress row exists for the pair."""
        return cls(user_id=user_id, flashcard_id=flashcard_id)
