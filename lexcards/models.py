"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexcards.database import Base

# JSON everywhere, native types on PostgreSQL
ContentType = JSON().with_variant(JSONB(), "postgresql")
CategoriesType = JSON().with_variant(ARRAY(Text), "postgresql")


class User(Base):
    """Minimal user row; identity itself is managed elsewhere."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    progress: Mapped[list["UserFlashcard"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}')>"


class Flashcard(Base):
    """Flashcard model; content shape depends on ``flashcard_type``."""

    __tablename__ = "flashcards"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    section: Mapped[str | None] = mapped_column(String(500), nullable=True)
    section_type: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    source_file: Mapped[str | None] = mapped_column(String(500), nullable=True, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    flashcard_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    flashcard_content: Mapped[dict[str, Any]] = mapped_column(ContentType, nullable=False)
    categories: Mapped[list[str]] = mapped_column(CategoriesType, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    progress: Mapped[list["UserFlashcard"]] = relationship(
        back_populates="flashcard", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, type='{self.flashcard_type}', version={self.version})>"


class UserFlashcard(Base):
    """Progress of one user on one flashcard."""

    __tablename__ = "user_flashcards"
    __table_args__ = (Index("ix_user_flashcards_user_id_status", "user_id", "status"),)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    flashcard_id: Mapped[int] = mapped_column(
        ForeignKey("flashcards.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    correct_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default="not_started"
    )
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    user: Mapped["User"] = relationship(back_populates="progress")
    flashcard: Mapped["Flashcard"] = relationship(back_populates="progress")

    def __repr__(self) -> str:
        """String representation of UserFlashcard."""
        return (
            f"<UserFlashcard(user_id={self.user_id}, flashcard_id={self.flashcard_id}, "
            f"status='{self.status}')>"
        )
