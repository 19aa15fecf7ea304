"""The ``pronos`` command.

Subcommands::

    pronos db            inspect and upgrade the database schema
    pronos users         register, show and resolve users
    pronos check-email   validate email addresses

Every invocation configures logging first (see `pronos.logging`), so that
subcommands only need ``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from pronos import __version__
from pronos.logging import (
    LoggingOptions,
    level_from_counts,
    log_startup,
    setup_logging,
)

from .db import db as db_group
from .email import check_email
from .helpers.log_level_parser import parse_log_level
from .users import users as users_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("pronos", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """Manage the PRONOS user directory.

    PRONOS is the backend of a prediction league. This CLI registers users,
    resolves the current user (an explicit name first, then the ambient
    identity) and validates email addresses.
    """

_LOGGING_OPTIONS = (
    click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more log output; repeat for more (-vv reaches DEBUG).",
    ),
    click.option(
        "-q",
        "--quiet",
        count=True,
        help="Show less log output; repeat for less.",
    ),
    click.option(
        "--debug/--no-debug",
        default=False,
        help="Log everything to the console, with logger names and source lines.",
    ),
    click.option(
        "--log-path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_LOG_PATH,
        envvar="PRONOS_LOG_PATH",
        show_default=True,
        show_envvar=True,
        help="File the flight recorder writes to.",
    ),
    click.option(
        "--flight-recorder/--no-flight-recorder",
        default=True,
        show_envvar=True,
        help=(
            "Buffer recent DEBUG records and write them to --log-path as soon "
            "as a WARNING is logged."
        ),
    ),
    click.option(
        "--flight-recorder-capacity",
        type=click.IntRange(min=1),
        default=2000,
        hidden=True,
        envvar="PRONOS_FLIGHT_RECORDER_CAPACITY",
        help="Number of records the flight recorder keeps.",
    ),
    click.option(
        "--force-flush/--no-force-flush",
        default=False,
        show_default=True,
        show_envvar=True,
        help="Also write the flight recorder buffer when the command exits.",
    ),
    click.option(
        "-L",
        "--logger-level",
        "logger_levels",
        multiple=True,
        callback=parse_log_level,
        default=("sqlalchemy=WARNING", "alembic=WARNING"),
        envvar="PRONOS_LOGGER_LEVELS",
        show_default=True,
        show_envvar=True,
        help=(
            "Minimum level for a logger, as NAME=LEVEL. Repeatable, e.g. "
            "-L sqlalchemy.engine=INFO -L pronos.service_layer=DEBUG."
        ),
    ),
)


def logging_options(func):
    """Attach the logging options to a command."""
    for option in reversed(_LOGGING_OPTIONS):
        func = option(func)
    return func


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@logging_options
@clickx.pass_context
def pronos(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """PRONOS command-line interface."""
    options = LoggingOptions(
        level=level_from_counts(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = setup_logging(options)
    log_startup(logger, __version__, options, handlers)
    ctx.call_on_close(logging.shutdown)


for _command in (db_group, users_group, check_email):
    pronos.add_command(_command)
