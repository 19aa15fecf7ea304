"""Settings read from the environment, and Alembic's programmatic config.

| Variable        | Meaning                                          |
|-----------------|--------------------------------------------------|
| PRONOS_DB_URL   | SQLAlchemy URL of the user directory database    |
| PRONOS_USER     | username acting as the ambient caller in the CLI |
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "PRONOS_DB_URL"
AMBIENT_USER_ENV_VAR = "PRONOS_USER"

MIGRATIONS_PACKAGE = "pronos.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """``PRONOS_DB_URL`` is unset or empty."""


def _env(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


def get_db_url() -> str:
    """Return the database URL.

    Raises:
        DatabaseUrlNotSetError: ``PRONOS_DB_URL`` is unset or blank.
    """
    url = _env(DB_URL_ENV_VAR)
    if url is None:
        raise DatabaseUrlNotSetError
    return url


def normalize_ambient_user(username: str | None) -> str | None:
    """Strip an ambient username; blank or missing names become None."""
    return (username or "").strip() or None


def get_ambient_user() -> str | None:
    """Return ``PRONOS_USER``, normalized like any other ambient username."""
    return normalize_ambient_user(os.environ.get(AMBIENT_USER_ENV_VAR))


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic config for the migrations shipped with PRONOS.

    No ini file is involved. Only ``script_location`` and, when given,
    ``sqlalchemy.url`` are set.

    Args:
        db_url: Database to migrate. Leave it out for commands that only read
            the migration scripts, such as ``heads``.
        stdout: Where Alembic prints its status lines.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg
