"""create ponies table

Revision ID: 8f3a2d6c4e10
Revises: 5b1e0c7a9d21
Create Date: 2026-02-10 18:04:44.826000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8f3a2d6c4e10"
down_revision: str | None = "5b1e0c7a9d21"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    if sa.inspect(op.get_bind()).has_table("ponies"):
        return

    op.create_table(
        "ponies",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("element", sa.String(255), nullable=False),
        sa.Column("personality", sa.String(255), nullable=False),
        sa.Column("talent", sa.String(255), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(2048), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(op.f("ix_ponies_name"), "ponies", ["name"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_ponies_name"), table_name="ponies")
    op.drop_table("ponies")
