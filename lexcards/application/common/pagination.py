"""
Paging of list reads.

``Pagination`` is the validated window a caller asked for,
``PaginatedResult`` one page of matches plus the total match count, and
``PaginationMetadata`` the summary a client needs to page further.

Example:
    result = repository.list_filtered(filters)
    result.metadata.last_page  # ceil(total / page_size), 0 when nothing matched
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Bounds for caller-supplied paging values
MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100
# Page size when neither the caller nor the settings choose one
DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page > MAX_PAGE:
            raise ValueError(f"Page cannot exceed {MAX_PAGE}")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size


@dataclass(frozen=True)
class PaginationMetadata:
    """Paging summary returned alongside a page of results."""

    current_page: int = 0
    page_size: int = 0
    first_page: int = 0
    last_page: int = 0
    total_records: int = 0

    @classmethod
    def calculate(cls, total_records: int, page: int, page_size: int) -> "PaginationMetadata":
        """All-zero metadata when nothing matched."""
        if total_records == 0:
            return cls()
        return cls(
            current_page=page,
            page_size=page_size,
            first_page=1,
            last_page=(total_records + page_size - 1) // page_size,
            total_records=total_records,
        )


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: List of items for the current page
        total: Total number of items across all pages
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def metadata(self) -> PaginationMetadata:
        return PaginationMetadata.calculate(
            self.total, self.pagination.page, self.pagination.page_size
        )

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        return self.metadata.last_page

    @property
    def has_next(self) -> bool:
        """Check if there is a next page."""
        return self.pagination.page < self.total_pages
