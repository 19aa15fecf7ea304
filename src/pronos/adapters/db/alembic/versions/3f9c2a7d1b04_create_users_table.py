"""create users table

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-18 10:12:41.530117

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1b04"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Identity id."),
        sa.Column(
            "username", sa.String(length=255), nullable=False, comment="Login name."
        ),
        sa.Column(
            "username_key",
            sa.String(length=765),
            nullable=False,
            comment="Case-folded username.",
        ),
        sa.Column("email", sa.String(length=320), nullable=True, comment="Contact email."),
        sa.CheckConstraint(
            "length(username) > 0", name=op.f("ck_users_username_not_empty")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("username", name=op.f("uq_users_username")),
    )
    op.create_index(
        op.f("ix_users_username_key"), "users", ["username_key"], unique=True
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_users_username_key"), table_name="users")
    op.drop_table("users")
