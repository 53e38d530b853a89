from .flashcard import Flashcard, FlashcardFields
from .progress_record import MASTERY_THRESHOLD, ProgressRecord, ProgressStatus

__all__ = [
    "MASTERY_THRESHOLD",
    "Flashcard",
    "FlashcardFields",
    "ProgressRecord",
    "ProgressStatus",
]
