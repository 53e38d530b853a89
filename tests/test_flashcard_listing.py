"""Tests for filtered, sorted and paginated flashcard listings."""

import pytest

from lexcards import models
from lexcards.application.learning.queries import FlashcardFilters
from lexcards.domain.common.value_objects import UserId
from lexcards.domain.learning.entities import Flashcard
from lexcards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from lexcards.infrastructure.learning.repositories.progress_repository import (
    ProgressRepository,
)
from tests.factories import build_flashcard


def _insert(
    repository: FlashcardRepository, user: models.User, **overrides: object
) -> Flashcard:
    return repository.insert(build_flashcard(**overrides), UserId(user.id))


def _ids(repository: FlashcardRepository, user: models.User, **filters: object) -> list[int]:
    result = repository.list_filtered(FlashcardFilters(user_id=UserId(user.id), **filters))  # type: ignore[arg-type]
    return [item.flashcard.id.value for item in result.items]


class TestPagination:
    """23 matching cards, 10 per page."""

    @pytest.fixture(autouse=True)
    def cards(self, flashcard_repository: FlashcardRepository, test_user: models.User) -> None:
        for i in range(23):
            _insert(flashcard_repository, test_user, question=f"Question {i}?")

    def test_first_page(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        result = flashcard_repository.list_filtered(
            FlashcardFilters(user_id=UserId(test_user.id), page=1, page_size=10)
        )

        assert len(result.items) == 10
        assert result.total == 23

    def test_last_page_has_remainder(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        result = flashcard_repository.list_filtered(
            FlashcardFilters(user_id=UserId(test_user.id), page=3, page_size=10)
        )

        assert len(result.items) == 3
        assert result.metadata.last_page == 3
        assert result.metadata.current_page == 3
        assert result.metadata.total_records == 23

    def test_page_past_the_end_is_empty_with_totals(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        result = flashcard_repository.list_filtered(
            FlashcardFilters(user_id=UserId(test_user.id), page=4, page_size=10)
        )

        assert result.items == []
        assert result.metadata.total_records == 23
        assert result.metadata.last_page == 3

    def test_pages_do_not_overlap(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        seen: list[int] = []
        for page in (1, 2, 3):
            seen.extend(_ids(flashcard_repository, test_user, page=page, page_size=10))

        assert len(seen) == 23
        assert seen == sorted(seen)


class TestFilters:
    def test_no_matches_gives_zero_metadata(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        _insert(flashcard_repository, test_user)

        result = flashcard_repository.list_filtered(
            FlashcardFilters(user_id=UserId(test_user.id), source_file="missing.md")
        )

        assert result.items == []
        assert result.metadata.total_records == 0
        assert result.metadata.last_page == 0
        assert result.metadata.current_page == 0

    def test_categories_match_all_requested_labels(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        tagged = _insert(flashcard_repository, test_user, categories=("A", "B"))
        _insert(flashcard_repository, test_user, categories=("A",))
        _insert(flashcard_repository, test_user, categories=())

        assert _ids(flashcard_repository, test_user, categories=("A", "B")) == [tagged.id.value]
        assert len(_ids(flashcard_repository, test_user, categories=("A",))) == 2
        assert _ids(flashcard_repository, test_user, categories=("A", "C")) == []
        assert len(_ids(flashcard_repository, test_user, categories=())) == 3

    def test_section_matches_whole_tokens(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        basics = _insert(flashcard_repository, test_user, section="Concurrency basics")
        types = _insert(flashcard_repository, test_user, section="Basic types")
        threads = _insert(flashcard_repository, test_user, section="Advanced concurrency: threads")
        _insert(flashcard_repository, test_user, section=None)

        assert _ids(flashcard_repository, test_user, section="concurrency") == [
            basics.id.value,
            threads.id.value,
        ]
        assert _ids(flashcard_repository, test_user, section="basic") == [types.id.value]
        assert _ids(flashcard_repository, test_user, section="THREADS, concurrency") == [
            threads.id.value
        ]
        assert _ids(flashcard_repository, test_user, section="concur") == []
        assert len(_ids(flashcard_repository, test_user, section="")) == 4

    def test_section_search_folds_non_ascii_case(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        land = _insert(flashcard_repository, test_user, section="Land law")
        eire = _insert(flashcard_repository, test_user, section="Éire: Constitution")

        assert _ids(flashcard_repository, test_user, section="land") == [land.id.value]
        assert _ids(flashcard_repository, test_user, section="éire") == [eire.id.value]
        assert _ids(flashcard_repository, test_user, section="ÉIRE constitution") == [
            eire.id.value
        ]

    def test_section_type_and_source_file_ignore_case(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        chapter = _insert(
            flashcard_repository, test_user, section_type="Chapter", source_file="Intro.md"
        )
        _insert(flashcard_repository, test_user, section_type="appendix", source_file="intro.md")

        assert _ids(flashcard_repository, test_user, section_type="chapter") == [chapter.id.value]
        assert len(_ids(flashcard_repository, test_user, source_file="INTRO.MD")) == 2
        assert _ids(
            flashcard_repository, test_user, section_type="CHAPTER", source_file="intro.md"
        ) == [chapter.id.value]

    def test_hide_mastered_is_per_user(
        self,
        flashcard_repository: FlashcardRepository,
        progress_repository: ProgressRepository,
        test_user: models.User,
        other_user: models.User,
    ) -> None:
        mastered = _insert(flashcard_repository, test_user)
        learning = _insert(flashcard_repository, test_user)
        for _ in range(5):
            progress_repository.record_correct(UserId(test_user.id), mastered.id)
        progress_repository.record_correct(UserId(test_user.id), learning.id)

        assert _ids(flashcard_repository, test_user, hide_mastered=True) == [learning.id.value]
        assert len(_ids(flashcard_repository, other_user, hide_mastered=True)) == 2
        assert len(_ids(flashcard_repository, test_user, hide_mastered=False)) == 2

    def test_rows_carry_joined_progress(
        self,
        flashcard_repository: FlashcardRepository,
        progress_repository: ProgressRepository,
        test_user: models.User,
    ) -> None:
        card = _insert(flashcard_repository, test_user)
        progress_repository.record_correct(UserId(test_user.id), card.id)

        result = flashcard_repository.list_filtered(FlashcardFilters(user_id=UserId(test_user.id)))

        assert result.items[0].progress.correct_count == 1


class TestSorting:
    @pytest.fixture
    def cards(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> list[Flashcard]:
        return [
            _insert(flashcard_repository, test_user, section="b", source_file="z.md"),
            _insert(flashcard_repository, test_user, section="a", source_file="y.md"),
            _insert(flashcard_repository, test_user, section="b", source_file="x.md"),
            _insert(flashcard_repository, test_user, section=None, source_file=None),
        ]

    def test_default_sort_is_id(
        self,
        flashcard_repository: FlashcardRepository,
        test_user: models.User,
        cards: list[Flashcard],
    ) -> None:
        assert _ids(flashcard_repository, test_user) == [c.id.value for c in cards]

    def test_descending_id(
        self,
        flashcard_repository: FlashcardRepository,
        test_user: models.User,
        cards: list[Flashcard],
    ) -> None:
        assert _ids(flashcard_repository, test_user, sort="-id") == [
            c.id.value for c in reversed(cards)
        ]

    def test_ties_break_by_id(
        self,
        flashcard_repository: FlashcardRepository,
        test_user: models.User,
        cards: list[Flashcard],
    ) -> None:
        first, second, third, unsectioned = (c.id.value for c in cards)

        assert _ids(flashcard_repository, test_user, sort="section") == [
            second,
            first,
            third,
            unsectioned,
        ]
        assert _ids(flashcard_repository, test_user, sort="-section") == [
            first,
            third,
            second,
            unsectioned,
        ]

    def test_sort_by_file(
        self,
        flashcard_repository: FlashcardRepository,
        test_user: models.User,
        cards: list[Flashcard],
    ) -> None:
        first, second, third, unfiled = (c.id.value for c in cards)

        assert _ids(flashcard_repository, test_user, sort="file") == [
            third,
            second,
            first,
            unfiled,
        ]

    def test_random_returns_every_match(
        self,
        flashcard_repository: FlashcardRepository,
        test_user: models.User,
        cards: list[Flashcard],
    ) -> None:
        assert sorted(_ids(flashcard_repository, test_user, sort="random")) == [
            c.id.value for c in cards
        ]


class TestAggregates:
    def test_user_stats(
        self,
        flashcard_repository: FlashcardRepository,
        progress_repository: ProgressRepository,
        test_user: models.User,
    ) -> None:
        cards = [_insert(flashcard_repository, test_user) for _ in range(4)]
        for _ in range(5):
            progress_repository.record_correct(UserId(test_user.id), cards[0].id)
        progress_repository.record_correct(UserId(test_user.id), cards[1].id)

        stats = flashcard_repository.user_stats(UserId(test_user.id))

        assert (stats.total, stats.mastered, stats.in_progress, stats.not_started) == (4, 1, 1, 2)

    def test_user_without_progress(
        self, flashcard_repository: FlashcardRepository, other_user: models.User
    ) -> None:
        stats = flashcard_repository.user_stats(UserId(other_user.id))

        assert (stats.total, stats.mastered, stats.in_progress, stats.not_started) == (0, 0, 0, 0)

    def test_category_counts_cover_cards_with_progress(
        self,
        flashcard_repository: FlashcardRepository,
        progress_repository: ProgressRepository,
        test_user: models.User,
        other_user: models.User,
    ) -> None:
        reviewed = _insert(flashcard_repository, test_user, categories=("sql", "python"))
        _insert(flashcard_repository, test_user, categories=("python",))
        progress_repository.record_correct(UserId(other_user.id), reviewed.id)

        owner_counts = flashcard_repository.category_counts(UserId(test_user.id))
        other_counts = flashcard_repository.category_counts(UserId(other_user.id))

        assert [(c.name, c.count) for c in owner_counts] == [("python", 2), ("sql", 1)]
        assert [(c.name, c.count) for c in other_counts] == [("python", 1), ("sql", 1)]

    @pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
    def test_filter_options(
        self, flashcard_repository: FlashcardRepository, test_user: models.User
    ) -> None:
        _insert(flashcard_repository, test_user, source_file="b.md", section_type="chapter")
        _insert(flashcard_repository, test_user, source_file="a.md", section_type="chapter")
        _insert(flashcard_repository, test_user, source_file=None, section_type=None)

        options = flashcard_repository.filter_options()

        assert options.source_files == ["a.md", "b.md"]
        assert options.section_types == ["chapter"]
