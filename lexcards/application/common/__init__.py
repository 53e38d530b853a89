"""
Application common module.

Contains base classes for the application layer:
- Query: Base class for read operations
- Pagination / PaginatedResult / PaginationMetadata: paging of list reads
- Result: re-exported from the domain for use case outcomes
"""

from lexcards.domain.common.result import Failure, Result, Success

from .pagination import PaginatedResult, Pagination, PaginationMetadata
from .query import Query

__all__ = [
    "Failure",
    "PaginatedResult",
    "Pagination",
    "PaginationMetadata",
    "Query",
    "Result",
    "Success",
]
