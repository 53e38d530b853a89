"""Tests for listing filter validation."""

import pytest

from lexcards.application.learning.queries import SORT_SAFELIST, FlashcardFilters
from lexcards.domain.common.value_objects import UserId


def _filters(**overrides: object) -> FlashcardFilters:
    return FlashcardFilters(user_id=UserId(1), **overrides)  # type: ignore[arg-type]


class TestFlashcardFiltersValidation:
    def test_defaults_are_valid(self) -> None:
        assert _filters().validate() == []

    @pytest.mark.parametrize("sort", SORT_SAFELIST)
    def test_every_allowed_sort_is_valid(self, sort: str) -> None:
        assert _filters(sort=sort).validate() == []

    @pytest.mark.parametrize("sort", ["created_at", "ID", "-random", "", "id; DROP TABLE"])
    def test_unknown_sort_is_rejected(self, sort: str) -> None:
        errors = _filters(sort=sort).validate()

        assert [(e.field, e.message) for e in errors] == [("sort", "invalid sort value")]

    def test_page_bounds(self) -> None:
        assert [e.message for e in _filters(page=0).validate()] == ["must be greater than zero"]
        assert [e.message for e in _filters(page=10_000_001).validate()] == [
            "must be a maximum of 10 million"
        ]

    def test_page_size_bounds(self) -> None:
        assert [e.message for e in _filters(page_size=0).validate()] == [
            "must be greater than zero"
        ]
        assert [e.message for e in _filters(page_size=101).validate()] == [
            "must be a maximum of 100"
        ]

    def test_missing_page_size_uses_default_window(self) -> None:
        filters = _filters()

        assert filters.page_size is None
        assert filters.pagination.page_size == 20

    def test_reports_every_invalid_field(self) -> None:
        errors = _filters(page=-1, page_size=500, sort="nope").validate()

        assert [e.field for e in errors] == ["page", "page_size", "sort"]


class TestSortKey:
    def test_descending_prefix(self) -> None:
        filters = _filters(sort="-section")

        assert filters.sort_column == "section"
        assert filters.sort_descending
        assert not filters.is_random

    def test_random(self) -> None:
        assert _filters(sort="random").is_random
