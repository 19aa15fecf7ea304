"""``pronos db``: inspect and upgrade the schema with Alembic.

Only forward operations are offered; there is no ``downgrade`` or ``stamp``.
Alembic writes to stdout, while notices from this module go to stderr.

Every command except ``heads`` needs ``PRONOS_DB_URL`` and a reachable
database; otherwise it stops with a `click.ClickException` saying what to fix.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from pronos import config
from pronos.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

MISSING_DB_URL_MSG = (
    "PRONOS_DB_URL is not set.\n\n"
    "Point it at the database first, for example:\n"
    "  export PRONOS_DB_URL='sqlite:///pronos.db'\n"
    "or, in PowerShell:\n"
    "  $env:PRONOS_DB_URL='sqlite:///pronos.db'"
)

INVALID_URL_FORMAT_MSG = "PRONOS_DB_URL does not parse as a SQLAlchemy URL."

CANNOT_CONNECT_MSG = (
    "Could not open a connection using PRONOS_DB_URL.\n"
    "Check that the database server is up and that the URL is right."
)

UPGRADE_SCHEMA_WARNING = (
    "The schema is about to be migrated to the newest revision.\n"
    "Back up the database if it holds data you care about."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'pronos db upgrade' to update the schema."


def get_checked_url() -> str:
    """Return ``PRONOS_DB_URL`` once a ``SELECT 1`` has gone through.

    Raises:
        click.ClickException: The variable is unset, malformed, or the
            database cannot be reached.
    """
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    finally:
        engine.dispose()
    return url


class SchemaState(Enum):
    """Where the database stands relative to the newest migration."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


@dataclass(frozen=True)
class SchemaReport:
    """What ``pronos db status`` prints about a database."""

    backend: str
    current: str | None
    head: str | None

    @property
    def state(self) -> SchemaState:
        if self.current == self.head:
            return SchemaState.UP_TO_DATE
        if self.current is None:
            return SchemaState.UNINITIALIZED
        return SchemaState.OUT_OF_DATE

    def describe(self) -> str:
        if self.current is None:
            return self.state.value
        return f"{self.current} ({self.state.value})"


def inspect_schema(url: str) -> SchemaReport:
    """Compare the revision stamped in the database with the packaged head."""
    scripts = ScriptDirectory.from_config(config.build_alembic_config(db_url=url))
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            current = MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()
    return SchemaReport(
        backend=engine.dialect.name, current=current, head=scripts.get_current_head()
    )


verbose_option = click.option(
    "-v", "--verbose", is_flag=True, help="Pass Alembic's verbose flag through."
)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Inspect and upgrade the PRONOS database schema."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Print the revision the database is at."""
    command.current(
        config.build_alembic_config(db_url=get_checked_url(), stdout=sys.stdout),
        verbose=verbose,
    )


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Print the newest packaged revision(s). No database needed."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it.")
@click.option("--force", is_flag=True, help="Skip the confirmation prompt.")
def upgrade(sql: bool, force: bool) -> None:
    """Migrate the database to the newest revision."""
    url = get_checked_url()
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(
        config.build_alembic_config(db_url=url, stdout=sys.stdout),
        revision="head",
        sql=sql,
    )
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Report reachability, backend and schema revision."""
    try:
        url = get_checked_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        return

    report = inspect_schema(url)
    success("Database reachable")
    click.echo(f"Backend : {report.backend}")
    click.echo(f"URL     : {sanitize_url(url)}")
    click.echo(f"Schema  : {report.describe()}")
    if report.state is not SchemaState.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
