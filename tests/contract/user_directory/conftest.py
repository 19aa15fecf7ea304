"""Fixtures for UserDirectory contract tests."""

from collections.abc import Iterable

import pytest

from pronos.adapters.user_directory import (
    InMemoryUserDirectory,
    SqlAlchemyUserDirectory,
)


@pytest.fixture(params=["memory", "sqlite"])
def user_directory(
    request: pytest.FixtureRequest,
) -> Iterable[InMemoryUserDirectory | SqlAlchemyUserDirectory]:
    """Return a fresh, empty writable UserDirectory for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUserDirectory
      - `"sqlite"` → SqlAlchemyUserDirectory on an Alembic-migrated SQLite file

    Extend by adding new identifiers to `params` and branching below.
    """

    match request.param:
        case "memory":
            yield InMemoryUserDirectory()
        case "sqlite":
            yield SqlAlchemyUserDirectory(request.getfixturevalue("sqlite_engine_file"))
        case _:
            raise ValueError(f"unknown user directory type: {request.param}")
