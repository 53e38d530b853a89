"""
Flashcard entity: a study card carrying one of several content shapes.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from lexcards.domain.common.entity import Entity
from lexcards.domain.common.exceptions import InvariantViolationError
from lexcards.domain.common.result import Failure, Result, Success
from lexcards.domain.common.validation import FieldError
from lexcards.domain.common.value_objects import FlashcardId
from lexcards.domain.learning.exceptions import (
    MalformedContentError,
    UnsupportedContentTypeError,
)
from lexcards.domain.learning.services.content_codec import ContentCodec
from lexcards.domain.learning.value_objects.flashcard_content import (
    CONTENT_FIELD,
    FlashcardContent,
    FlashcardType,
)

TYPE_FIELD = "flashcard_type"


@dataclass(frozen=True)
class FlashcardFields:
    """
    Already-decoded request fields for a card, minus its content payload.

    ``flashcard_type`` stays raw here; the builder resolves it.
    """

    question: str = ""
    text: str = ""
    flashcard_type: str = ""
    section: str | None = None
    section_type: str | None = None
    source_file: str | None = None
    categories: Sequence[str] = ()


def _entity_errors(fields: FlashcardFields) -> list[FieldError]:
    errors: list[FieldError] = []
    if not fields.question or not fields.question.strip():
        errors.append(FieldError("question", "question must be provided"))
    if not fields.text or not fields.text.strip():
        errors.append(FieldError("text", "text must be provided"))
    categories = list(fields.categories or ())
    if len(set(categories)) != len(categories):
        errors.append(FieldError("categories", "categories must be unique"))
    try:
        ContentCodec.parse_type(fields.flashcard_type)
    except UnsupportedContentTypeError:
        errors.append(FieldError(TYPE_FIELD, "invalid flashcard type"))
    return errors


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    A study card.

    Business Rules:
    - Question and body text cannot be empty
    - Category labels are unique within one card
    - The content variant satisfies its own structural rules; the card's
      type is always the content's discriminant, so the two cannot disagree
    - Version starts at 1 once stored and grows by exactly 1 per update
    """

    id: FlashcardId
    question: str
    text: str
    content: FlashcardContent
    categories: tuple[str, ...] = ()
    section: str | None = None
    section_type: str | None = None
    source_file: str | None = None
    version: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.question or not self.question.strip():
            raise InvariantViolationError("Flashcard", "question cannot be empty")
        if not self.text or not self.text.strip():
            raise InvariantViolationError("Flashcard", "text cannot be empty")
        if len(set(self.categories)) != len(self.categories):
            raise InvariantViolationError("Flashcard", "categories must be unique")
        content_errors = self.content.validate()
        if content_errors:
            raise InvariantViolationError(
                "Flashcard",
                f"{self.content.type} content is invalid",
                {error.field: error.message for error in content_errors},
            )

    @property
    def type(self) -> FlashcardType:
        return self.content.type

    def encoded_content(self) -> dict[str, object]:
        return ContentCodec.encode(self.content)

    def apply_revision(self, revision: "Flashcard", expected_version: int) -> None:
        """
        Take over the editable attributes of a freshly built card.

        Identity and creation time stay; ``expected_version`` becomes the
        version the store must still hold for the update to apply.
        """
        self.question = revision.question
        self.text = revision.text
        self.content = revision.content
        self.categories = revision.categories
        self.section = revision.section
        self.section_type = revision.section_type
        self.source_file = revision.source_file
        self.version = expected_version

    @classmethod
    def build(
        cls,
        fields: FlashcardFields,
        raw_content: Any,  # noqa: ANN401
    ) -> Result["Flashcard", list[FieldError]]:
        """
        Validate raw fields and content and build an unsaved card.

        Decoding happens first; a payload that cannot be decoded is
        reported against the content field. The variant's structural rules
        and the entity rules are then checked together, so every problem
        is reported at once rather than only the first.

        Args:
            fields: Decoded request fields
            raw_content: Content payload, not yet typed

        Returns:
            Success with a card that has no ID and version 0, or
            Failure with the ordered list of field errors
        """
        errors: list[FieldError] = []
        content: FlashcardContent | None = None

        try:
            content = ContentCodec.decode(fields.flashcard_type, raw_content)
        except UnsupportedContentTypeError:
            # Reported once, by the entity-level type check below
            pass
        except MalformedContentError as e:
            errors.append(FieldError(CONTENT_FIELD, e.message))

        if content is not None:
            errors.extend(content.validate())

        errors.extend(_entity_errors(fields))

        if errors or content is None:
            return Failure(errors)

        return Success(
            cls(
                id=FlashcardId.generate(),
                question=fields.question.strip(),
                text=fields.text.strip(),
                content=content,
                categories=tuple(fields.categories or ()),
                section=fields.section,
                section_type=fields.section_type,
                source_file=fields.source_file,
            )
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        question: str,
        text: str,
        content: FlashcardContent,
        categories: Sequence[str],
        version: int,
        created_at: datetime,
        section: str | None = None,
        section_type: str | None = None,
        source_file: str | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            question=question,
            text=text,
            content=content,
            categories=tuple(categories),
            section=section,
            section_type=section_type,
            source_file=source_file,
            version=version,
            created_at=created_at,
        )
