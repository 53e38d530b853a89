"""Request-scoped filters for listing flashcards."""

from collections.abc import Sequence
from dataclasses import dataclass

from lexcards.application.common.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    Pagination,
)
from lexcards.application.common.query import Query
from lexcards.domain.common.validation import FieldError
from lexcards.domain.common.value_objects import UserId

RANDOM_SORT = "random"

# Only these sort keys ever reach the store
SORT_SAFELIST: tuple[str, ...] = ("id", "section", "file", "-id", "-section", "-file", RANDOM_SORT)


@dataclass(frozen=True)
class FlashcardFilters(Query):
    """
    Listing parameters as received from the caller.

    Values arrive already coerced to primitive types; range and allow-list
    checks happen in ``validate``. Empty strings and an empty category set
    mean "match all". A ``page_size`` of None leaves the choice to the
    listing use case.
    """

    user_id: UserId
    page: int = 1
    page_size: int | None = None
    sort: str = "id"
    section: str = ""
    section_type: str = ""
    source_file: str = ""
    categories: Sequence[str] = ()
    hide_mastered: bool = False

    def validate(self) -> list[FieldError]:
        errors: list[FieldError] = []
        if self.page <= 0:
            errors.append(FieldError("page", "must be greater than zero"))
        if self.page > MAX_PAGE:
            errors.append(FieldError("page", "must be a maximum of 10 million"))
        if self.page_size is not None and self.page_size <= 0:
            errors.append(FieldError("page_size", "must be greater than zero"))
        if self.page_size is not None and self.page_size > MAX_PAGE_SIZE:
            errors.append(FieldError("page_size", f"must be a maximum of {MAX_PAGE_SIZE}"))
        if self.sort not in SORT_SAFELIST:
            errors.append(FieldError("sort", "invalid sort value"))
        return errors

    @property
    def pagination(self) -> Pagination:
        """Only valid after ``validate`` came back empty."""
        page_size = DEFAULT_PAGE_SIZE if self.page_size is None else self.page_size
        return Pagination(page=self.page, page_size=page_size)

    @property
    def sort_column(self) -> str:
        """Sort key without its direction prefix."""
        return self.sort.removeprefix("-")

    @property
    def sort_descending(self) -> bool:
        return self.sort.startswith("-")

    @property
    def is_random(self) -> bool:
        return self.sort == RANDOM_SORT
