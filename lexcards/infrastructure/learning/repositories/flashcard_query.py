"""Dialect-aware filtering and ordering for flashcard listings."""

from sqlalchemy import (
    ColumnElement,
    Select,
    Text,
    and_,
    false,
    func,
    literal,
    select,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.sql.selectable import TableValuedAlias

from lexcards.application.learning.queries.flashcard_filters import FlashcardFilters
from lexcards.domain.common.value_objects import UserId
from lexcards.domain.learning.entities.progress_record import ProgressStatus
from lexcards.infrastructure.common.text_search import SEARCH_TEXT_FUNCTION, search_tokens
from lexcards.models import Flashcard as FlashcardORM
from lexcards.models import UserFlashcard as UserFlashcardORM

# Text search configuration: lowercase word tokens, no stemming or stop words
SEARCH_CONFIG = "simple"

SORT_COLUMNS: dict[str, ColumnElement[object]] = {
    "id": FlashcardORM.id,
    "section": FlashcardORM.section,
    "file": FlashcardORM.source_file,
}


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class FlashcardQueryBuilder:
    """
    Builds listing statements for one SQL dialect.

    PostgreSQL gets full-text search and array containment; other
    dialects (SQLite) get equivalent LIKE and ``json_each`` predicates.
    """

    def __init__(self, is_postgresql: bool) -> None:
        self.is_postgresql = is_postgresql

    def joined_progress(self, user_id: UserId) -> Select[tuple[FlashcardORM, UserFlashcardORM]]:
        """Every card, left-joined with the user's progress row on it."""
        return select(FlashcardORM, UserFlashcardORM).outerjoin(
            UserFlashcardORM,
            and_(
                UserFlashcardORM.flashcard_id == FlashcardORM.id,
                UserFlashcardORM.user_id == user_id.value,
            ),
        )

    def category_elements(self) -> TableValuedAlias:
        """One row per category label of the current card, column ``value``."""
        if self.is_postgresql:
            return func.unnest(FlashcardORM.categories).table_valued("value").render_derived()
        return func.json_each(FlashcardORM.categories).table_valued("value")

    def conditions(self, filters: FlashcardFilters) -> list[ColumnElement[bool]]:
        """WHERE clauses for the filters; an empty filter value matches everything."""
        clauses: list[ColumnElement[bool]] = []

        if filters.section:
            clauses.append(self._section_matches(filters.section))
        if filters.section_type:
            clauses.append(func.lower(FlashcardORM.section_type) == filters.section_type.lower())
        if filters.source_file:
            clauses.append(func.lower(FlashcardORM.source_file) == filters.source_file.lower())
        if filters.categories:
            clauses.append(self._has_all_categories(list(filters.categories)))
        if filters.hide_mastered:
            clauses.append(
                func.coalesce(UserFlashcardORM.status, ProgressStatus.NOT_STARTED.value)
                != ProgressStatus.MASTERED.value
            )

        return clauses

    def order_by(self, filters: FlashcardFilters) -> list[ColumnElement[object]]:
        """ORDER BY terms; every non-random order ends with id ascending."""
        if filters.is_random:
            return [func.random()]

        column = SORT_COLUMNS[filters.sort_column]
        primary = column.desc() if filters.sort_descending else column.asc()
        return [primary.nulls_last(), FlashcardORM.id.asc()]

    def _section_matches(self, query: str) -> ColumnElement[bool]:
        if self.is_postgresql:
            return func.to_tsvector(SEARCH_CONFIG, FlashcardORM.section).op("@@")(
                func.plainto_tsquery(SEARCH_CONFIG, query)
            )

        tokens = search_tokens(query)
        if not tokens:
            # plainto_tsquery of a token-free string matches nothing
            return false()

        # Registered on every SQLite connection by lexcards.database
        section_text = getattr(func, SEARCH_TEXT_FUNCTION)(FlashcardORM.section)
        return and_(
            *(section_text.like(f"% {_escape_like(token)} %", escape="\\") for token in tokens)
        )

    def _has_all_categories(self, categories: list[str]) -> ColumnElement[bool]:
        if self.is_postgresql:
            return FlashcardORM.categories.op("@>", is_comparison=True)(
                literal(categories, ARRAY(Text))
            )

        clauses = []
        for category in categories:
            elements = self.category_elements()
            clauses.append(select(elements.c.value).where(elements.c.value == category).exists())
        return and_(*clauses)
