"""End-to-end CLI tests for the top-level `pronos` command.

These tests exercise verbosity flags, logger-level overrides, debug formatting
and the in-memory flight recorder by invoking the `log-demo` command under
various flags, plus the `--help`/`--version` output.
"""

import re
from pathlib import Path

import pytest

import pronos as pronos_pkg
from pronos.entrypoints.cli.main import pronos

# pylint: disable=unused-argument

LOG_PATH = "flight_recorder.log"


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def read_log(path: str = LOG_PATH) -> str:
    """Return the content of the flight-recorder file."""
    return Path(path).read_text(encoding="utf-8")


def test_help_lists_commands(runner):
    """--help shows the project blurb and every subcommand."""
    result = runner.invoke(pronos, ["--help"])
    assert result.exit_code == 0, result.output
    for name in ("db", "users", "check-email"):
        assert_in_output(rf"\b{name}\b", result.output)
    assert_in_output(r"prediction\s+league", result.output)


def test_version(runner):
    """--version prints the package version."""
    result = runner.invoke(pronos, ["--version"])
    assert result.exit_code == 0
    assert pronos_pkg.__version__ in result.output


@pytest.mark.parametrize(
    ("cli_args", "shown", "hidden"),
    [
        ([], "league warning record", "league info record"),
        (["-v"], "league info record", "league debug record"),
        (["-vv"], "league debug record", None),
        (["-q"], "league error record", "league warning record"),
        (["-qq"], "league critical record", "league error record"),
    ],
    ids=["default", "v", "vv", "q", "qq"],
)
def test_verbosity_flags(cli, runner, fs, cli_args, shown, hidden):
    """-v/-q move the console threshold one level per repetition."""
    result = runner.invoke(cli, cli_args + ["log-demo"])
    assert result.exit_code == 0, result.output
    assert_in_output(shown, result.output)
    if hidden is not None:
        assert_not_in_output(hidden, result.output)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"PRONOS_LOGGER_LEVELS": "some.thirdparty=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_silences_debug(cli, runner, fs, env, cli_args):
    """Logger-level overrides silence third-party DEBUG while keeping INFO+."""
    result = runner.invoke(cli, cli_args + ["log-demo"], env=env)
    assert result.exit_code == 0, result.output
    assert_not_in_output("vendor debug record", result.output)
    assert_in_output("vendor info record", result.output)


def test_invalid_logger_level_is_rejected(cli, runner, fs):
    """A malformed -L value is a usage error."""
    result = runner.invoke(cli, ["-L", "pronos=LOUD", "log-demo"])
    assert result.exit_code == 2


def test_third_party_records_are_prefixed(cli, runner, fs):
    """Console lines from other libraries carry a [library] prefix."""
    result = runner.invoke(cli, ["log-demo"])
    assert result.exit_code == 0, result.output
    assert_in_output(r"\[some\] vendor warning record", result.output)


@pytest.mark.parametrize(
    ("cli_args", "expect_paths"),
    [(["--debug"], True), ([], False)],
    ids=["debug", "default"],
)
def test_debug_mode_shows_paths(
    cli, runner, fs, cli_args, expect_paths
):
    """--debug adds source paths and line numbers to console records."""
    result = runner.invoke(cli, cli_args + ["log-demo"])
    assert result.exit_code == 0, result.output
    check = assert_in_output if expect_paths else assert_not_in_output
    check(r"conftest\.py:\d+\b", result.output)


def test_flight_recorder_flush_on_warning(cli, runner, fs):
    """Buffered DEBUG records reach the file when a WARNING occurs."""
    result = runner.invoke(
        cli, ["--log-path", LOG_PATH, "-L", "some.thirdparty=INFO", "log-demo"]
    )
    assert result.exit_code == 0, result.output
    content = read_log()
    assert_in_output("league debug record", content)
    assert_not_in_output("vendor debug record", content)
    assert_in_output("vendor info record", content)
    assert_in_output("league critical record", content)
    # buffered after the last flush, and not forced out on exit
    assert_not_in_output("league trailing debug record", content)


def test_flight_recorder_force_flush(cli, runner, fs):
    """--force-flush writes the remaining buffer on exit."""
    result = runner.invoke(cli, ["--log-path", LOG_PATH, "--force-flush", "log-demo"])
    assert result.exit_code == 0, result.output
    assert_in_output("league trailing debug record", read_log())


def test_flight_recorder_can_be_disabled(cli, runner, fs):
    """--no-flight-recorder writes no file."""
    result = runner.invoke(
        cli, ["--log-path", LOG_PATH, "--no-flight-recorder", "log-demo"]
    )
    assert result.exit_code == 0, result.output
    assert not Path(LOG_PATH).exists()


def test_flight_recorder_truncates_log(cli, runner, fs):
    """The file is rewritten on each run, not appended to."""
    sizes = []
    for _ in range(2):
        result = runner.invoke(cli, ["--log-path", LOG_PATH, "log-demo"])
        assert result.exit_code == 0, result.output
        sizes.append(len(read_log().splitlines()))
    assert sizes[0] == sizes[1]


def test_startup_logging(cli, runner, fs):
    """The flight recorder starts with a startup banner and diagnostics."""
    result = runner.invoke(
        cli,
        ["--log-path", "startup.log", "--force-flush", "log-demo"],
        env={"PRONOS_LOGGER_LEVELS": "some.thirdparty=INFO"},
    )
    assert result.exit_code == 0, result.output
    content = read_log("startup.log")
    assert_in_output(r"PRONOS \d+\.\d+\.\d+", content)
    assert_in_output(r"console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+\.\d+", content)
    assert_in_output(r"PID: \d+", content)
    assert_in_output(r"Alembic: \d+\.\d+", content)
    assert_in_output(r"SQLAlchemy: \d+\.\d+", content)
    assert_in_output(r"Flight recorder: path=startup\.log, capacity=2000", content)
    assert_in_output(r"Per-logger overrides: .*'some\.thirdparty': 'INFO'", content)


def test_demo_command_stays_off_the_real_group(cli):
    """The demo command is only visible on the per-test copy."""
    assert "log-demo" in cli.commands
    assert "log-demo" not in pronos.commands
