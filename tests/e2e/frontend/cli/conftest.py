"""Fixtures for the top-level CLI tests.

`log-demo` is a throwaway subcommand, offered only by the per-test `cli` copy
of the group. It logs `DEMO_RECORDS` in order: a full range of levels from a
PRONOS logger, a few from a library logger, and one trailing DEBUG record that
only a forced flush writes out.
"""

import copy
import logging

import click
import pytest
from click.testing import CliRunner

from pronos.entrypoints.cli.main import pronos

# pylint: disable=redefined-outer-name

LEAGUE = "pronos.demo"
VENDOR = "some.thirdparty"

DEMO_RECORDS = [
    (LEAGUE, logging.DEBUG, "league debug record"),
    (LEAGUE, logging.INFO, "league info record"),
    (LEAGUE, logging.WARNING, "league warning record"),
    (LEAGUE, logging.ERROR, "league error record"),
    (LEAGUE, logging.CRITICAL, "league critical record"),
    (VENDOR, logging.DEBUG, "vendor debug record"),
    (VENDOR, logging.INFO, "vendor info record"),
    (VENDOR, logging.WARNING, "vendor warning record"),
    (LEAGUE, logging.DEBUG, "league trailing debug record"),
]


@click.command(name="log-demo")
def log_demo():
    """Log every entry of DEMO_RECORDS."""
    for name, level, message in DEMO_RECORDS:
        logging.getLogger(name).log(level, message)


@pytest.fixture
def cli():
    """A copy of `pronos` that also offers `log-demo`."""
    group = copy.copy(pronos)
    group.commands = {**pronos.commands, log_demo.name: log_demo}
    return group


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield
