"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lexcards import models
from lexcards.core import Container
from lexcards.core import container as app_container
from lexcards.database import Base
from lexcards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from lexcards.infrastructure.learning.repositories.progress_repository import (
    ProgressRepository,
)

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"
TEST_STATEMENT_TIMEOUT = 3.0

# Create test engine; StaticPool keeps the single in-memory database alive
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a test user."""
    user = models.User(email="learner@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """Create a second user to check per-user isolation."""
    user = models.User(email="other@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def flashcard_repository(db_session: Session) -> FlashcardRepository:
    return FlashcardRepository(db_session, statement_timeout=TEST_STATEMENT_TIMEOUT)


@pytest.fixture
def progress_repository(db_session: Session) -> ProgressRepository:
    return ProgressRepository(db_session, statement_timeout=TEST_STATEMENT_TIMEOUT)


@pytest.fixture
def container(db_session: Session) -> Generator[Container, None, None]:
    """The application container, resolving against the test session."""
    app_container.db.override(db_session)
    try:
        yield app_container
    finally:
        app_container.db.reset_override()
