"""Parse ``-L NAME=LEVEL`` options.

Pairs come either from repeated flags or from one string separated by commas
or spaces, which is how ``PRONOS_LOGGER_LEVELS`` arrives.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = (value,) if isinstance(value, str) else value
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_pair(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    name = name.strip()
    if not sep or not name:
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name, level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Turn the raw option value into a ``{logger name: level}`` mapping.

    Library defaults come first, so a later pair for ``sqlalchemy`` or
    ``alembic`` replaces them.

    Raises:
        click.BadParameter: On a pair without ``=``, a blank name or an
            unknown level name.
    """
    return DEFAULT_LIB_LEVELS | dict(map(_parse_pair, _normalize_items(value)))
