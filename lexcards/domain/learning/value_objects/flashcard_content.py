"""Content variants a flashcard can carry.

The set is closed: a card is open-answer (``qa``), multiple choice
(``mcq``) or yes/no (``yes_no``). Each variant knows its own discriminant,
how to read itself from a JSON-compatible dict, how to write itself back,
and which structural rules it must satisfy.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from lexcards.domain.common.validation import FieldError
from lexcards.domain.common.value_object import ValueObject
from lexcards.domain.learning.exceptions import MalformedContentError

if TYPE_CHECKING:
    from typing import Self

CONTENT_FIELD = "flashcard_content"
MIN_MCQ_OPTIONS = 2


class FlashcardType(StrEnum):
    """Discriminant selecting which content variant a card uses."""

    QA = "qa"
    MCQ = "mcq"
    YES_NO = "yes_no"


def _field(
    data: Mapping[str, object],
    key: str,
    expected: type,
    flashcard_type: FlashcardType,
    *,
    required: bool = True,
) -> Any:  # noqa: ANN401
    if data.get(key) is None:
        if required:
            raise MalformedContentError(flashcard_type, f"missing field '{key}'")
        return None
    value = data[key]
    # bool is an int subclass, so True must not pass as an index
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise MalformedContentError(flashcard_type, f"field '{key}' has the wrong type")
    return value


def _justification(data: Mapping[str, object], flashcard_type: FlashcardType) -> str | None:
    justification: str | None = _field(
        data, "justification", str, flashcard_type, required=False
    )
    return justification


def _with_justification(payload: dict[str, object], justification: str | None) -> dict[str, object]:
    if justification is not None:
        payload["justification"] = justification
    return payload


@dataclass(frozen=True)
class QAContent(ValueObject):
    """Open question with a free-text answer."""

    type: ClassVar[FlashcardType] = FlashcardType.QA

    answer: str
    justification: str | None = None

    def validate(self) -> list[FieldError]:
        if not self.answer.strip():
            return [FieldError(f"{CONTENT_FIELD}.answer", "answer must not be empty")]
        return []

    def to_json(self) -> dict[str, object]:
        """Serialize to JSON-compatible dict."""
        return _with_justification({"answer": self.answer}, self.justification)

    @classmethod
    def from_json(cls, data: Mapping[str, object]) -> Self:
        """Deserialize from JSON dict."""
        return cls(
            answer=_field(data, "answer", str, cls.type),
            justification=_justification(data, cls.type),
        )


@dataclass(frozen=True)
class MCQContent(ValueObject):
    """Multiple choice question; ``correct_index`` points into ``options``."""

    type: ClassVar[FlashcardType] = FlashcardType.MCQ

    options: tuple[str, ...]
    correct_index: int
    justification: str | None = None

    def validate(self) -> list[FieldError]:
        """
        Check the structural rules of a multiple choice card.

        All violations are reported, not just the first one.
        """
        errors: list[FieldError] = []
        if len(self.options) < MIN_MCQ_OPTIONS:
            errors.append(
                FieldError(f"{CONTENT_FIELD}.options", "at least 2 options required")
            )
        if not 0 <= self.correct_index < len(self.options):
            errors.append(
                FieldError(f"{CONTENT_FIELD}.correct_index", "correct index out of bounds")
            )
        if len(set(self.options)) != len(self.options):
            errors.append(FieldError(f"{CONTENT_FIELD}.options", "options must be unique"))
        return errors

    @property
    def correct_option(self) -> str | None:
        if 0 <= self.correct_index < len(self.options):
            return self.options[self.correct_index]
        return None

    def to_json(self) -> dict[str, object]:
        """Serialize to JSON-compatible dict."""
        return _with_justification(
            {"options": list(self.options), "correct_index": self.correct_index},
            self.justification,
        )

    @classmethod
    def from_json(cls, data: Mapping[str, object]) -> Self:
        """Deserialize from JSON dict."""
        options = _field(data, "options", list, cls.type)
        if not all(isinstance(option, str) for option in options):
            raise MalformedContentError(cls.type, "every option must be a string")
        return cls(
            options=tuple(options),
            correct_index=_field(data, "correct_index", int, cls.type),
            justification=_justification(data, cls.type),
        )


@dataclass(frozen=True)
class YesNoContent(ValueObject):
    """Statement the learner judges as correct or not."""

    type: ClassVar[FlashcardType] = FlashcardType.YES_NO

    correct: bool
    justification: str | None = None

    def validate(self) -> list[FieldError]:
        return []

    def to_json(self) -> dict[str, object]:
        """Serialize to JSON-compatible dict."""
        return _with_justification({"correct": self.correct}, self.justification)

    @classmethod
    def from_json(cls, data: Mapping[str, object]) -> Self:
        """Deserialize from JSON dict."""
        return cls(
            correct=_field(data, "correct", bool, cls.type),
            justification=_justification(data, cls.type),
        )


FlashcardContent = QAContent | MCQContent | YesNoContent
