"""Implementation of UserDirectory using SQLAlchemy Core."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from pronos.adapters.db.schema import users
from pronos.domain.model import Identity, username_key
from pronos.interfaces.user_directory import UserDirectory

from .errors import DuplicateUsernameError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine, Row


class SqlAlchemyUserDirectory(UserDirectory):
    """UserDirectory backed by the ``users`` table.

    Each call opens its own short-lived connection from the engine; lookups
    are read-only and `add` runs in its own transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @staticmethod
    def _to_identity(row: Row) -> Identity:
        return Identity(id=row.id, username=row.username, email=row.email)

    @staticmethod
    def _select_by_username(conn: Connection, username: str) -> Row | None:
        stmt = select(users.c.id, users.c.username, users.c.email).where(
            users.c.username_key == username_key(username)
        )
        return conn.execute(stmt).first()

    def find_by_username_ignore_case(self, username: str) -> Identity | None:
        with self.engine.connect() as conn:
            if (row := self._select_by_username(conn, username)) is None:
                return None
        return self._to_identity(row)

    def add(self, identity: Identity) -> None:
        """Insert a new identity.

        Raises:
            DuplicateUsernameError: If the username is taken, ignoring case.
        """
        try:
            with self.engine.begin() as conn:
                if self._select_by_username(conn, identity.username) is not None:
                    raise DuplicateUsernameError(identity.username)
                conn.execute(
                    insert(users).values(
                        id=identity.id,
                        username=identity.username,
                        username_key=username_key(identity.username),
                        email=identity.email,
                    )
                )
        except IntegrityError as e:
            # lost a race against a concurrent insert of the same username
            raise DuplicateUsernameError(identity.username) from e
