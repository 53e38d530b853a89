"""Create flashcards table.

Revision ID: 002
Revises: 001
Create Date: 2026-09-28

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create flashcards table."""
    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("section", sa.String(500), nullable=True),
        sa.Column("section_type", sa.String(100), nullable=True),
        sa.Column("source_file", sa.String(500), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("flashcard_type", sa.String(20), nullable=False),
        sa.Column(
            "flashcard_content",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column(
            "categories",
            sa.JSON().with_variant(postgresql.ARRAY(sa.Text()), "postgresql"),
            nullable=False,
        ),
        sa.Column("version", sa.Integer(), server_default="1", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcards_id"), "flashcards", ["id"], unique=False)
    op.create_index(
        op.f("ix_flashcards_section_type"), "flashcards", ["section_type"], unique=False
    )
    op.create_index(op.f("ix_flashcards_source_file"), "flashcards", ["source_file"], unique=False)
    op.create_index(
        op.f("ix_flashcards_flashcard_type"), "flashcards", ["flashcard_type"], unique=False
    )


def downgrade() -> None:
    """Drop flashcards table."""
    op.drop_index(op.f("ix_flashcards_flashcard_type"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_source_file"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_section_type"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_id"), table_name="flashcards")
    op.drop_table("flashcards")
