from .flashcard_dtos import CategoryCount, FilterOptions, FlashcardStats, FlashcardWithProgress

__all__ = [
    "CategoryCount",
    "FilterOptions",
    "FlashcardStats",
    "FlashcardWithProgress",
]
