"""Tables for the user directory.

All tables attach to `metadata`. Its naming convention gives constraints
stable names, so Alembic migrations can refer to them.

``users``:

| Constraint                    | Purpose                               |
|-------------------------------|---------------------------------------|
| PRIMARY KEY(id)               | identity id (UUID string)             |
| UNIQUE(username)              | exact-case uniqueness                 |
| UNIQUE INDEX(username_key)    | case-insensitive uniqueness + lookups |
| CHECK(length(username) > 0)   | usernames are non-empty               |
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)

__all__ = ["metadata", "users"]

metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
    }
)

USERNAME_KEY_INDEX = "ix_users_username_key"

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True, comment="Identity id."),
    Column("username", String(255), nullable=False, comment="Login name."),
    Column(
        "username_key",
        String(765),
        nullable=False,
        comment="Case-folded username.",
    ),
    Column("email", String(320), nullable=True, comment="Contact email."),
    UniqueConstraint("username"),
    CheckConstraint("length(username) > 0", name="username_not_empty"),
)

Index(USERNAME_KEY_INDEX, users.c.username_key, unique=True)
