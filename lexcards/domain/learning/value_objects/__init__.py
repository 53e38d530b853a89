from .flashcard_content import (
    FlashcardContent,
    FlashcardType,
    MCQContent,
    QAContent,
    YesNoContent,
)

__all__ = [
    "FlashcardContent",
    "FlashcardType",
    "MCQContent",
    "QAContent",
    "YesNoContent",
]
