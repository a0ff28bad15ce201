"""add is_favorite to ponies

Revision ID: c47e91b2a5f3
Revises: 8f3a2d6c4e10
Create Date: 2026-02-11 20:07:32.553000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c47e91b2a5f3"
down_revision: str | None = "8f3a2d6c4e10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _has_column(table: str, column: str) -> bool:
    columns = sa.inspect(op.get_bind()).get_columns(table)
    return any(c["name"] == column for c in columns)


def upgrade() -> None:
    if _has_column("ponies", "is_favorite"):
        return

    # On SQLite batch mode copies into a temporary table and renames it back,
    # carrying over indexes and constraints. Existing rows get the server default.
    with op.batch_alter_table("ponies", recreate="always") as batch_op:
        batch_op.add_column(
            sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false())
        )


def downgrade() -> None:
    if not _has_column("ponies", "is_favorite"):
        return

    with op.batch_alter_table("ponies", recreate="always") as batch_op:
        batch_op.drop_column("is_favorite")
