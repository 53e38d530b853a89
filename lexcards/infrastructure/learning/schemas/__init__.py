from lexcards.infrastructure.learning.schemas.flashcard_schemas import (
    CategoryCountResponse,
    FilterOptionsResponse,
    FlashcardListResponse,
    FlashcardResponse,
    FlashcardStatsResponse,
    PaginationMetadataResponse,
    ProgressResponse,
    ValidationErrorResponse,
)

__all__ = [
    "CategoryCountResponse",
    "FilterOptionsResponse",
    "FlashcardListResponse",
    "FlashcardResponse",
    "FlashcardStatsResponse",
    "PaginationMetadataResponse",
    "ProgressResponse",
    "ValidationErrorResponse",
]
