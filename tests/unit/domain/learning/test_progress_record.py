"""Tests for the ProgressRecord read model."""

import pytest

from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities import MASTERY_THRESHOLD, ProgressRecord, ProgressStatus


class TestProgressRecord:
    def test_initial_is_zero_state(self) -> None:
        record = ProgressRecord.initial(UserId(1), FlashcardId(2))

        assert record.correct_count == 0
        assert record.status == ProgressStatus.NOT_STARTED
        assert record.last_reviewed_at is None
        assert record.reviews_until_mastered == MASTERY_THRESHOLD

    def test_mastered(self) -> None:
        record = ProgressRecord(
            UserId(1), FlashcardId(2), correct_count=5, status=ProgressStatus.MASTERED
        )

        assert record.is_mastered
        assert record.reviews_until_mastered == 0

    def test_rejects_negative_count(self) -> None:
        with pytest.raises(ValueError):
            ProgressRecord(UserId(1), FlashcardId(2), correct_count=-1)

    def test_threshold_is_five(self) -> None:
        assert MASTERY_THRESHOLD == 5
