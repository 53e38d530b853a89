"""Tests for the shared transaction boundary."""

import sqlite3

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.orm import Session

from lexcards import models
from lexcards.exceptions import PersistenceError, StoreTimeoutError
from lexcards.infrastructure.common.transaction import atomic


class _QueryCanceled(Exception):
    pgcode = "57014"


def _user_count(db_session: Session) -> int:
    return db_session.execute(select(func.count()).select_from(models.User)).scalar_one()


class TestAtomic:
    def test_commits_on_success(self, db_session: Session) -> None:
        with atomic(db_session, 1.0):
            db_session.add(models.User(email="a@example.com"))

        db_session.rollback()
        assert _user_count(db_session) == 1

    def test_rolls_back_on_error(self, db_session: Session) -> None:
        with pytest.raises(RuntimeError), atomic(db_session, 1.0):
            db_session.add(models.User(email="a@example.com"))
            db_session.flush()
            raise RuntimeError("boom")

        assert _user_count(db_session) == 0

    def test_store_errors_become_persistence_errors(self, db_session: Session) -> None:
        with pytest.raises(PersistenceError) as exc_info, atomic(db_session, 1.0):
            db_session.execute(text("SELECT * FROM no_such_table"))

        assert not isinstance(exc_info.value, StoreTimeoutError)
        assert exc_info.value.status_code == 500

    def test_locked_database_is_a_timeout(self, db_session: Session) -> None:
        with pytest.raises(StoreTimeoutError) as exc_info, atomic(db_session, 2.5):
            raise OperationalError("UPDATE", {}, sqlite3.OperationalError("database is locked"))

        assert exc_info.value.timeout_seconds == 2.5
        assert exc_info.value.status_code == 503

    def test_cancelled_statement_is_a_timeout(self, db_session: Session) -> None:
        with pytest.raises(StoreTimeoutError), atomic(db_session, 1.0):
            raise DBAPIError("SELECT", {}, _QueryCanceled())
