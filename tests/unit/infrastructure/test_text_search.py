"""Tests for section search tokenization."""

import pytest

from lexcards.infrastructure.common.text_search import search_text, search_tokens


class TestSearchTokens:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("Concurrency basics", ["concurrency", "basics"]),
            ("THREADS, concurrency", ["threads", "concurrency"]),
            ("Éire", ["éire"]),
            ("snake_case-word", ["snake_case", "word"]),
            ("?!...", []),
        ],
    )
    def test_tokens(self, query: str, expected: list[str]) -> None:
        assert search_tokens(query) == expected


class TestSearchText:
    def test_pads_and_joins_tokens(self) -> None:
        assert search_text("Advanced concurrency: threads") == " advanced concurrency threads "

    def test_separators_only(self) -> None:
        assert search_text("--") == "  "

    def test_null_stays_null(self) -> None:
        assert search_text(None) is None
