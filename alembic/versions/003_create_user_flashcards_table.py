"""Create user_flashcards progress table.

Revision ID: 003
Revises: 002
Create Date: 2026-09-29

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: str | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create user_flashcards table."""
    op.create_table(
        "user_flashcards",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("flashcard_id", sa.Integer(), nullable=False),
        sa.Column("correct_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(20), server_default="not_started", nullable=False),
        sa.Column("last_reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["flashcard_id"], ["flashcards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "flashcard_id"),
    )
    op.create_index(
        op.f("ix_user_flashcards_flashcard_id"), "user_flashcards", ["flashcard_id"], unique=False
    )
    op.create_index(
        "ix_user_flashcards_user_id_status", "user_flashcards", ["user_id", "status"], unique=False
    )


def downgrade() -> None:
    """Drop user_flashcards table."""
    op.drop_index("ix_user_flashcards_user_id_status", table_name="user_flashcards")
    op.drop_index(op.f("ix_user_flashcards_flashcard_id"), table_name="user_flashcards")
    op.drop_table("user_flashcards")
