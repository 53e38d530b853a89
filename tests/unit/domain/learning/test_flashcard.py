"""Tests for building and validating Flashcard entities."""

import pytest

from lexcards.domain.common.exceptions import InvariantViolationError
from lexcards.domain.common.value_objects import FlashcardId
from lexcards.domain.learning.entities import Flashcard
from lexcards.domain.learning.value_objects import FlashcardType, MCQContent, QAContent
from tests.factories import MCQ_CONTENT, QA_CONTENT, build_flashcard, qa_fields


def _fields_and_messages(result: object) -> list[tuple[str, str]]:
    return [(e.field, e.message) for e in result.unwrap_error()]  # type: ignore[attr-defined]


class TestFlashcardBuild:
    """Flashcard.build accumulates every problem before failing."""

    def test_valid_card_has_no_id_and_initial_version(self) -> None:
        result = Flashcard.build(qa_fields(), QA_CONTENT)

        assert result.is_success
        flashcard = result.unwrap()
        assert flashcard.id == FlashcardId(0)
        assert not flashcard.id.is_assigned
        assert flashcard.version == 0
        assert flashcard.created_at is None
        assert flashcard.type == FlashcardType.QA
        assert flashcard.categories == ("python",)

    def test_strips_question_and_text(self) -> None:
        flashcard = build_flashcard(question="  Why?  ", text="\tBecause.\n")

        assert flashcard.question == "Why?"
        assert flashcard.text == "Because."

    def test_valid_mcq(self) -> None:
        flashcard = build_flashcard(MCQ_CONTENT, flashcard_type="mcq")

        assert flashcard.content == MCQContent(options=("list", "tuple", "dict"), correct_index=1)

    @pytest.mark.parametrize(
        ("content", "field", "message"),
        [
            (
                {"options": ["only"], "correct_index": 0},
                "flashcard_content.options",
                "at least 2 options required",
            ),
            (
                {"options": ["a", "b"], "correct_index": 2},
                "flashcard_content.correct_index",
                "correct index out of bounds",
            ),
            (
                {"options": ["a", "a"], "correct_index": 0},
                "flashcard_content.options",
                "options must be unique",
            ),
        ],
    )
    def test_invalid_mcq_names_the_field(self, content: dict, field: str, message: str) -> None:
        result = Flashcard.build(qa_fields(flashcard_type="mcq"), content)

        assert result.is_failure
        assert (field, message) in _fields_and_messages(result)

    def test_malformed_content_is_a_field_error(self) -> None:
        result = Flashcard.build(qa_fields(flashcard_type="yes_no"), {"correct": "maybe"})

        assert result.is_failure
        errors = _fields_and_messages(result)
        assert errors == [
            ("flashcard_content", "Invalid yes_no content: field 'correct' has the wrong type")
        ]

    def test_unknown_type_is_reported_once(self) -> None:
        result = Flashcard.build(qa_fields(flashcard_type="essay"), QA_CONTENT)

        assert _fields_and_messages(result) == [("flashcard_type", "invalid flashcard type")]

    def test_errors_accumulate_in_order(self) -> None:
        result = Flashcard.build(
            qa_fields(
                flashcard_type="mcq",
                question=" ",
                text="",
                categories=("go", "go"),
            ),
            {"options": ["a"], "correct_index": 4},
        )

        assert [field for field, _ in _fields_and_messages(result)] == [
            "flashcard_content.options",
            "flashcard_content.correct_index",
            "question",
            "text",
            "categories",
        ]

    def test_malformed_content_does_not_hide_entity_errors(self) -> None:
        result = Flashcard.build(qa_fields(question=""), {"wrong": "shape"})

        assert [field for field, _ in _fields_and_messages(result)] == [
            "flashcard_content",
            "question",
        ]


class TestFlashcardInvariants:
    """The entity refuses to exist in an invalid state."""

    def test_rejects_empty_question(self) -> None:
        with pytest.raises(InvariantViolationError, match="question cannot be empty"):
            Flashcard(id=FlashcardId(1), question="", text="body", content=QAContent(answer="a"))

    def test_rejects_invalid_content(self) -> None:
        with pytest.raises(InvariantViolationError, match="mcq content is invalid"):
            Flashcard(
                id=FlashcardId(1),
                question="q",
                text="body",
                content=MCQContent(options=("a",), correct_index=0),
            )

    def test_rejects_duplicate_categories(self) -> None:
        with pytest.raises(InvariantViolationError, match="categories must be unique"):
            Flashcard(
                id=FlashcardId(1),
                question="q",
                text="body",
                content=QAContent(answer="a"),
                categories=("x", "x"),
            )

    def test_apply_revision_keeps_identity(self) -> None:
        original = build_flashcard()
        original.id = FlashcardId(7)
        revision = build_flashcard(MCQ_CONTENT, flashcard_type="mcq", question="New?")

        original.apply_revision(revision, expected_version=3)

        assert original.id == FlashcardId(7)
        assert original.question == "New?"
        assert original.type == FlashcardType.MCQ
        assert original.version == 3
