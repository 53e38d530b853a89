"""Add full-text and category indexes to flashcards (PostgreSQL only).

Revision ID: 004
Revises: 003
Create Date: 2026-10-02

"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: str | None = "003"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create GIN indexes for section search and category containment."""
    if op.get_bind().dialect.name != "postgresql":
        return

    # Expression must match the listing query for the planner to use it
    op.execute(
        "CREATE INDEX ix_flashcards_section_search ON flashcards "
        "USING GIN (to_tsvector('simple', section))"
    )
    op.create_index(
        "ix_flashcards_categories",
        "flashcards",
        ["categories"],
        unique=False,
        postgresql_using="gin",
    )


def downgrade() -> None:
    """Drop GIN indexes."""
    if op.get_bind().dialect.name != "postgresql":
        return

    op.drop_index("ix_flashcards_categories", table_name="flashcards")
    op.execute("DROP INDEX IF EXISTS ix_flashcards_section_search")
