"""Tests for pagination parameters and metadata."""

import pytest

from lexcards.application.common.pagination import (
    PaginatedResult,
    Pagination,
    PaginationMetadata,
)


class TestPagination:
    def test_offset_and_limit(self) -> None:
        pagination = Pagination(page=3, page_size=10)

        assert pagination.offset == 20
        assert pagination.limit == 10

    @pytest.mark.parametrize(
        ("page", "page_size"), [(0, 10), (10_000_001, 10), (1, 0), (1, 101)]
    )
    def test_rejects_out_of_range_values(self, page: int, page_size: int) -> None:
        with pytest.raises(ValueError):
            Pagination(page=page, page_size=page_size)


class TestPaginationMetadata:
    def test_last_page_rounds_up(self) -> None:
        metadata = PaginationMetadata.calculate(total_records=23, page=3, page_size=10)

        assert metadata == PaginationMetadata(
            current_page=3, page_size=10, first_page=1, last_page=3, total_records=23
        )

    def test_exact_multiple(self) -> None:
        assert PaginationMetadata.calculate(20, 1, 10).last_page == 2

    def test_no_records_gives_zero_metadata(self) -> None:
        assert PaginationMetadata.calculate(0, 4, 10) == PaginationMetadata()

    def test_page_past_the_end_keeps_totals(self) -> None:
        result = PaginatedResult(items=[], total=23, pagination=Pagination(page=4, page_size=10))

        assert result.metadata.current_page == 4
        assert result.metadata.last_page == 3
        assert result.total_pages == 3
        assert not result.has_next
