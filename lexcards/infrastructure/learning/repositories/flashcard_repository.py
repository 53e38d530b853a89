"""Repository for Flashcard domain entities."""

import logging
from datetime import UTC, datetime

from sqlalchemy import delete, func, select, true, update
from sqlalchemy.orm import Session

from lexcards.application.common.pagination import PaginatedResult
from lexcards.application.learning.protocols.flashcard_repository import EditConflict
from lexcards.application.learning.queries.flashcard_filters import FlashcardFilters
from lexcards.application.learning.use_cases.dtos import (
    CategoryCount,
    FilterOptions,
    FlashcardStats,
    FlashcardWithProgress,
)
from lexcards.domain.common.result import Failure, Result, Success
from lexcards.domain.common.value_objects import FlashcardId, UserId
from lexcards.domain.learning.entities.flashcard import Flashcard
from lexcards.domain.learning.entities.progress_record import ProgressStatus
from lexcards.infrastructure.common.transaction import atomic, is_postgresql
from lexcards.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from lexcards.infrastructure.learning.mappers.progress_mapper import ProgressMapper
from lexcards.infrastructure.learning.repositories.flashcard_query import FlashcardQueryBuilder
from lexcards.models import Flashcard as FlashcardORM
from lexcards.models import UserFlashcard as UserFlashcardORM

logger = logging.getLogger(__name__)


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session, statement_timeout: float) -> None:
        self.db = db
        self.statement_timeout = statement_timeout
        self.mapper = FlashcardMapper()
        self.progress_mapper = ProgressMapper()

    @property
    def query_builder(self) -> FlashcardQueryBuilder:
        return FlashcardQueryBuilder(is_postgresql(self.db))

    def insert(self, flashcard: Flashcard, owner_id: UserId) -> Flashcard:
        """
        Insert a flashcard and seed its owner's progress in one transaction.

        Args:
            flashcard: Unsaved flashcard entity
            owner_id: The creating user

        Returns:
            Saved flashcard entity with database-generated values
        """
        with atomic(self.db, self.statement_timeout):
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
            self.db.flush()
            self.db.add(
                UserFlashcardORM(
                    user_id=owner_id.value,
                    flashcard_id=orm_model.id,
                    last_reviewed_at=datetime.now(UTC),
                )
            )
            self.db.flush()
            self.db.refresh(orm_model)
            saved = self.mapper.to_domain(orm_model)

        logger.debug(f"Inserted flashcard {saved.id.value} for user {owner_id.value}")
        return saved

    def get(self, flashcard_id: FlashcardId, user_id: UserId) -> FlashcardWithProgress | None:
        """
        Find a flashcard by ID, joined with the user's progress on it.

        Args:
            flashcard_id: The flashcard ID
            user_id: The user whose progress is joined

        Returns:
            Flashcard with progress if found, None otherwise
        """
        stmt = self.query_builder.joined_progress(user_id).where(
            FlashcardORM.id == flashcard_id.value
        )
        with atomic(self.db, self.statement_timeout):
            row = self.db.execute(stmt).one_or_none()
            if row is None:
                return None
            return self._with_progress(row[0], row[1], user_id)

    def update(self, flashcard: Flashcard) -> Result[int, EditConflict]:
        """
        Conditionally write a flashcard.

        The row is only touched if its stored version still equals
        ``flashcard.version``; the version then grows by exactly one.

        Args:
            flashcard: Flashcard entity carrying the version the edit is based on

        Returns:
            Success with the new version, or Failure if the row changed or vanished
        """
        stmt = (
            update(FlashcardORM)
            .where(
                FlashcardORM.id == flashcard.id.value,
                FlashcardORM.version == flashcard.version,
            )
            .values(
                question=flashcard.question,
                text=flashcard.text,
                flashcard_type=flashcard.type.value,
                flashcard_content=flashcard.encoded_content(),
                categories=list(flashcard.categories),
                section=flashcard.section,
                section_type=flashcard.section_type,
                source_file=flashcard.source_file,
                version=FlashcardORM.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        with atomic(self.db, self.statement_timeout):
            result = self.db.execute(stmt)

        if result.rowcount == 0:
            logger.debug(
                f"Edit conflict on flashcard {flashcard.id.value} at version {flashcard.version}"
            )
            return Failure(EditConflict(flashcard.id, flashcard.version))
        return Success(flashcard.version + 1)

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard and every user's progress on it.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            True if deleted, False if not found
        """
        with atomic(self.db, self.statement_timeout):
            self.db.execute(
                delete(UserFlashcardORM).where(UserFlashcardORM.flashcard_id == flashcard_id.value)
            )
            result = self.db.execute(
                delete(FlashcardORM).where(FlashcardORM.id == flashcard_id.value)
            )
        return result.rowcount > 0

    def list_filtered(self, filters: FlashcardFilters) -> PaginatedResult[FlashcardWithProgress]:
        """
        Get one page of flashcards matching the filters.

        Filters must already be validated; the sort key is looked up in
        the allow-list without further checks.

        Args:
            filters: Validated listing filters

        Returns:
            PaginatedResult with joined flashcards and the total match count
        """
        builder = self.query_builder
        pagination = filters.pagination
        conditions = builder.conditions(filters)

        page_stmt = (
            builder.joined_progress(filters.user_id)
            .where(*conditions)
            .order_by(*builder.order_by(filters))
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        # Counted separately so a page past the end still reports the total
        count_stmt = (
            select(func.count(FlashcardORM.id))
            .select_from(FlashcardORM)
            .outerjoin(
                UserFlashcardORM,
                (UserFlashcardORM.flashcard_id == FlashcardORM.id)
                & (UserFlashcardORM.user_id == filters.user_id.value),
            )
            .where(*conditions)
        )

        with atomic(self.db, self.statement_timeout):
            total = self.db.execute(count_stmt).scalar() or 0
            rows = self.db.execute(page_stmt).all()
            items = [self._with_progress(row[0], row[1], filters.user_id) for row in rows]

        return PaginatedResult(items=items, total=total, pagination=pagination)

    def user_stats(self, user_id: UserId) -> FlashcardStats:
        """
        Count a user's progress records by status in a single query.

        Args:
            user_id: The user ID

        Returns:
            Total and per-status counts
        """
        status = UserFlashcardORM.status
        stmt = select(
            func.count(),
            func.count().filter(status == ProgressStatus.MASTERED.value),
            func.count().filter(status == ProgressStatus.IN_PROGRESS.value),
            func.count().filter(status == ProgressStatus.NOT_STARTED.value),
        ).where(UserFlashcardORM.user_id == user_id.value)

        with atomic(self.db, self.statement_timeout):
            total, mastered, in_progress, not_started = self.db.execute(stmt).one()

        return FlashcardStats(
            total=total or 0,
            mastered=mastered or 0,
            in_progress=in_progress or 0,
            not_started=not_started or 0,
        )

    def category_counts(self, user_id: UserId) -> list[CategoryCount]:
        """
        Count cards per category label among cards the user has progress on.

        Args:
            user_id: The user ID

        Returns:
            Category counts ordered by label
        """
        elements = self.query_builder.category_elements()
        label = elements.c.value
        stmt = (
            select(label, func.count(FlashcardORM.id))
            .select_from(FlashcardORM)
            .join(
                UserFlashcardORM,
                (UserFlashcardORM.flashcard_id == FlashcardORM.id)
                & (UserFlashcardORM.user_id == user_id.value),
            )
            .join(elements, true())
            .group_by(label)
            .order_by(label)
        )

        with atomic(self.db, self.statement_timeout):
            rows = self.db.execute(stmt).all()

        return [CategoryCount(name=name, count=count) for name, count in rows]

    def filter_options(self) -> FilterOptions:
        """
        Get the distinct source files and section types in use.

        Returns:
            Sorted, non-null values of each column
        """
        files_stmt = (
            select(FlashcardORM.source_file).distinct()
            .where(FlashcardORM.source_file.is_not(None))
            .order_by(FlashcardORM.source_file)
        )
        types_stmt = (
            select(FlashcardORM.section_type).distinct()
            .where(FlashcardORM.section_type.is_not(None))
            .order_by(FlashcardORM.section_type)
        )

        with atomic(self.db, self.statement_timeout):
            source_files = list(self.db.execute(files_stmt).scalars().all())
            section_types = list(self.db.execute(types_stmt).scalars().all())

        return FilterOptions(source_files=source_files, section_types=section_types)

    def _with_progress(
        self,
        flashcard_orm: FlashcardORM,
        progress_orm: UserFlashcardORM | None,
        user_id: UserId,
    ) -> FlashcardWithProgress:
        flashcard = self.mapper.to_domain(flashcard_orm)
        return FlashcardWithProgress(
            flashcard=flashcard,
            progress=self.progress_mapper.to_domain_or_initial(progress_orm, user_id, flashcard.id),
        )
