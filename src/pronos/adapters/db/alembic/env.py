"""Alembic environment for the PRONOS schema.

The database URL is taken from, in order: ``alembic -x url=...``, the
``sqlalchemy.url`` main option (set by `pronos.config.build_alembic_config`),
then ``PRONOS_DB_URL``. On SQLite, migrations run in batch mode so that
``ALTER TABLE`` is emulated.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from pronos.adapters.db.schema import metadata
from pronos.config import get_db_url

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMMON_OPTIONS = {
    "target_metadata": metadata,
    "compare_type": True,
    "compare_server_default": True,
}


def database_url() -> str:
    """Pick the URL migrations run against."""
    url = context.get_x_argument(as_dictionary=True).get("url") or (
        config.get_main_option("sqlalchemy.url")
    )
    # an unexpanded "%(...)s" placeholder from an ini file counts as unset
    if url and "%(" not in url:
        return url
    return get_db_url()


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMMON_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection."""
    engine = engine_from_config(
        {"sqlalchemy.url": database_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMMON_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
