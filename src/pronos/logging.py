"""Logging setup for PRONOS.

Two handlers hang off the root logger:

* a Rich console handler on stderr, whose threshold follows ``-v``/``-q``;
* an optional flight recorder: a `MemoryHandler` that keeps the last records
  at DEBUG granularity and dumps them to a file once something goes wrong.

Records from other libraries are tagged ``[library]`` on the console so they
stand out from PRONOS's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_LOGGER = "pronos"
DEFAULT_LEVEL = logging.WARNING
LEVEL_STEP = 10

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def level_from_counts(verbose: int = 0, quiet: int = 0) -> int:
    """Move the WARNING default one level per ``-v`` (down) or ``-q`` (up).

    The result is clamped to ``DEBUG..CRITICAL``.
    """
    level = DEFAULT_LEVEL + LEVEL_STEP * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


@dataclass(frozen=True)
class LoggingOptions:
    """Everything the CLI lets users tune about logging."""

    level: int = DEFAULT_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        """Whether records are buffered for the flight-recorder file."""
        return self.log_path is not None


class LibraryTagFilter(logging.Filter):
    """Set ``record.tag`` to ``[library]`` for records from other packages.

    PRONOS records get an empty tag. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.tag = "" if top == PROJECT_LOGGER else f"[{top}]"
        return True


def console_handler(options: LoggingOptions) -> RichHandler:
    """Return a Rich handler writing to stderr.

    In debug mode everything down to DEBUG is shown, with timestamps, logger
    names and source locations.
    """
    console = Console(stderr=True, color_system="auto" if options.color else None)
    handler = RichHandler(
        level=logging.DEBUG if options.debug else options.level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=options.debug,
        enable_link_path=options.debug,
    )
    if options.debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.addFilter(LibraryTagFilter())
        handler.setFormatter(logging.Formatter("%(tag)s %(message)s"))
    return handler


def flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_on_close: bool = False,
    flush_level: int = logging.WARNING,
) -> MemoryHandler:
    """Return a memory buffer that writes to `path` on its first warning.

    Args:
        path: File receiving the buffered records. It is truncated, and only
            created once there is something to write.
        capacity: Number of records kept in memory.
        flush_on_close: Also write whatever is buffered when logging shuts down.
        flush_level: Records at this level or above trigger a flush.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def setup_logging(options: LoggingOptions) -> list[Handler]:
    """Install the PRONOS handlers on the root logger.

    The root logger itself passes everything; each handler applies its own
    threshold. Per-logger levels from `options.logger_levels` apply to both.

    Returns:
        The installed handlers.
    """
    handlers: list[Handler] = [console_handler(options)]
    if options.log_path is not None:
        handlers.append(
            flight_recorder(
                options.log_path,
                capacity=options.flight_capacity,
                flush_on_close=options.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in options.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _diagnostics(options: LoggingOptions, handlers: list[Handler]) -> dict[str, Any]:
    info: dict[str, Any] = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Alembic": alembic.__version__,
        "SQLAlchemy": sqlalchemy.__version__,
        "Handlers": [type(h).__name__ for h in handlers],
    }
    if options.flight_recorder:
        info["Flight recorder"] = (
            f"path={options.log_path}, capacity={options.flight_capacity}"
        )
    info["Per-logger overrides"] = {
        name: logging.getLevelName(level)
        for name, level in options.logger_levels.items()
    }
    return info


def log_startup(
    logger: Logger, version: str, options: LoggingOptions, handlers: list[Handler]
) -> None:
    """Log a one-line banner at INFO, then environment details at DEBUG."""
    logger.info(
        "PRONOS %s (console=%s, flight-recorder=%s)",
        version,
        logging.getLevelName(options.level),
        "ON" if options.flight_recorder else "OFF",
    )
    for key, value in _diagnostics(options, handlers).items():
        logger.debug("%s: %s", key, value)
