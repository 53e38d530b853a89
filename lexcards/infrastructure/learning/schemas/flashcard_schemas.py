"""Pydantic schemas for flashcard responses handed to the HTTP layer."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from lexcards.application.common.pagination import PaginatedResult, PaginationMetadata
from lexcards.application.learning.use_cases.dtos import (
    CategoryCount,
    FilterOptions,
    FlashcardStats,
    FlashcardWithProgress,
)
from lexcards.domain.learning.entities.progress_record import ProgressRecord
from lexcards.exceptions import ValidationError


class ProgressResponse(BaseModel):
    """Schema for one user's progress on a flashcard."""

    correct_count: int = Field(..., ge=0, description="Correct reviews so far")
    status: str = Field(..., description="not_started, in_progress or mastered")
    last_reviewed_at: datetime | None = Field(None, description="Time of the last review")

    @classmethod
    def from_domain(cls, progress: ProgressRecord) -> "ProgressResponse":
        return cls(
            correct_count=progress.correct_count,
            status=progress.status.value,
            last_reviewed_at=progress.last_reviewed_at,
        )


class FlashcardResponse(BaseModel):
    """Schema for a flashcard joined with the requesting user's progress."""

    id: int
    section: str | None = None
    section_type: str | None = None
    source_file: str | None = None
    text: str
    question: str
    flashcard_type: str
    flashcard_content: dict[str, Any]
    categories: list[str] = Field(default_factory=list)
    version: int
    created_at: datetime | None = None
    correct_count: int = 0
    status: str = "not_started"
    last_reviewed_at: datetime | None = None

    @classmethod
    def from_domain(cls, item: FlashcardWithProgress) -> "FlashcardResponse":
        flashcard = item.flashcard
        return cls(
            id=flashcard.id.value,
            section=flashcard.section,
            section_type=flashcard.section_type,
            source_file=flashcard.source_file,
            text=flashcard.text,
            question=flashcard.question,
            flashcard_type=flashcard.type.value,
            flashcard_content=flashcard.encoded_content(),
            categories=list(flashcard.categories),
            version=flashcard.version,
            created_at=flashcard.created_at,
            correct_count=item.progress.correct_count,
            status=item.progress.status.value,
            last_reviewed_at=item.progress.last_reviewed_at,
        )


class PaginationMetadataResponse(BaseModel):
    """Schema for paging metadata; all zeros when nothing matched."""

    current_page: int = 0
    page_size: int = 0
    first_page: int = 0
    last_page: int = 0
    total_records: int = 0

    @classmethod
    def from_domain(cls, metadata: PaginationMetadata) -> "PaginationMetadataResponse":
        return cls(
            current_page=metadata.current_page,
            page_size=metadata.page_size,
            first_page=metadata.first_page,
            last_page=metadata.last_page,
            total_records=metadata.total_records,
        )


class FlashcardListResponse(BaseModel):
    """Schema for one page of flashcards."""

    flashcards: list[FlashcardResponse] = Field(..., description="Flashcards on this page")
    metadata: PaginationMetadataResponse

    @classmethod
    def from_domain(
        cls, result: PaginatedResult[FlashcardWithProgress]
    ) -> "FlashcardListResponse":
        return cls(
            flashcards=[FlashcardResponse.from_domain(item) for item in result.items],
            metadata=PaginationMetadataResponse.from_domain(result.metadata),
        )


class FlashcardStatsResponse(BaseModel):
    """Schema for a user's progress counts."""

    total: int
    mastered: int
    in_progress: int
    not_started: int

    @classmethod
    def from_domain(cls, stats: FlashcardStats) -> "FlashcardStatsResponse":
        return cls(
            total=stats.total,
            mastered=stats.mastered,
            in_progress=stats.in_progress,
            not_started=stats.not_started,
        )


class CategoryCountResponse(BaseModel):
    name: str
    count: int

    @classmethod
    def from_domain(cls, category: CategoryCount) -> "CategoryCountResponse":
        return cls(name=category.name, count=category.count)


class FilterOptionsResponse(BaseModel):
    source_files: list[str]
    section_types: list[str]

    @classmethod
    def from_domain(cls, options: FilterOptions) -> "FilterOptionsResponse":
        return cls(source_files=options.source_files, section_types=options.section_types)


class ValidationErrorResponse(BaseModel):
    """Schema for a failed validation: one message per offending field."""

    errors: dict[str, str] = Field(..., description="Field name to error message")

    @classmethod
    def from_exception(cls, error: ValidationError) -> "ValidationErrorResponse":
        return cls(errors=error.field_messages)
