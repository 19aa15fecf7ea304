"""Engine construction.

Build every `Engine` through `make_engine` so connections share one setup.
SQLite connections get the PRAGMAs in `SQLITE_PRAGMAS` as they are opened.
Other backends are left as SQLAlchemy configures them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

SQLITE_PRAGMAS = {
    "foreign_keys": "ON",
    "journal_mode": "WAL",
    "synchronous": "NORMAL",
    "temp_store": "MEMORY",
}


def is_sqlite(url: str | URL) -> bool:
    """Tell whether `url` points at SQLite, whatever the driver."""
    return make_url(str(url)).get_backend_name() == "sqlite"


def _set_sqlite_pragmas(dbapi_conn: Any, _record: Any) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for name, value in SQLITE_PRAGMAS.items():
            cursor.execute(f"PRAGMA {name}={value}")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Return an engine for `url`.

    Args:
        url: SQLAlchemy database URL.
        echo: Log every statement through ``sqlalchemy.engine``.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine
