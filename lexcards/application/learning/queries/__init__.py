from .flashcard_filters import SORT_SAFELIST, FlashcardFilters

__all__ = ["SORT_SAFELIST", "FlashcardFilters"]
