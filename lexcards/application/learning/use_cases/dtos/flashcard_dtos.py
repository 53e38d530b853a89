"""DTOs for flashcard use cases."""

from dataclasses import dataclass

from lexcards.domain.learning.entities.flashcard import Flashcard
from lexcards.domain.learning.entities.progress_record import ProgressRecord


@dataclass
class FlashcardWithProgress:
    """DTO for a flashcard joined with the requesting user's progress."""

    flashcard: Flashcard
    progress: ProgressRecord


@dataclass(frozen=True)
class FlashcardStats:
    """Progress record counts for one user, by status."""

    total: int = 0
    mastered: int = 0
    in_progress: int = 0
    not_started: int = 0


@dataclass(frozen=True)
class CategoryCount:
    name: str
    count: int


@dataclass(frozen=True)
class FilterOptions:
    """Distinct values a listing can be filtered on."""

    source_files: list[str]
    section_types: list[str]
