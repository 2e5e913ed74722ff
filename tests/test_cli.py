"""
Tests for the cronexpand command line.

Uses typer's CliRunner to drive the app in-process.
"""

from typer.testing import CliRunner

from cronexpand import __version__
from cronexpand.cli import app

runner = CliRunner()

EXAMPLE_OUTPUT = (
    "minute        0 15 30 45\n"
    "hour          0\n"
    "day of month  1 15\n"
    "month         1 2 3 4 5 6 7 8 9 10 11 12\n"
    "day of week   1 2 3 4 5\n"
    "command       /usr/bin/find\n"
)


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"cronexpand {__version__}" in result.output

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestExpand:
    def test_single_argument(self):
        result = runner.invoke(app, ["*/15 0 1,15 * 1-5 /usr/bin/find"])
        assert result.exit_code == 0
        assert result.stdout == EXAMPLE_OUTPUT

    def test_arguments_are_joined(self):
        result = runner.invoke(app, ["*/15", "0", "1,15", "*", "1-5", "/usr/bin/find"])
        assert result.exit_code == 0
        assert result.stdout == EXAMPLE_OUTPUT

    def test_command_options_pass_through(self):
        result = runner.invoke(app, ["0", "0", "*", "*", "*", "find", "/tmp", "-name", "*.log", "--delete"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[-1] == "command       find /tmp -name *.log --delete"

    def test_names_and_sunday_alias(self):
        result = runner.invoke(app, ["0 12 * jan-mar 0-7 backup"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[3] == "month         1 2 3"
        assert lines[4] == "day of week   0 1 2 3 4 5 6"

    def test_table_output(self):
        result = runner.invoke(app, ["--table", "*/15 0 1,15 * 1-5 /usr/bin/find"])
        assert result.exit_code == 0
        assert "day of month" in result.stdout
        assert "0 15 30 45" in result.stdout
        assert "/usr/bin/find" in result.stdout

    def test_verbose_logs_do_not_change_exit_code(self):
        result = runner.invoke(app, ["--verbose", "*/15 0 1,15 * 1-5 /usr/bin/find"])
        assert result.exit_code == 0
        assert "0 15 30 45" in result.output


class TestErrors:
    def test_no_expression(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Usage:" in result.output
        assert "minute" not in result.output

    def test_blank_expression(self):
        result = runner.invoke(app, ["   "])
        assert result.exit_code == 1

    def test_too_few_parts(self):
        result = runner.invoke(app, ["* * * echo"])
        assert result.exit_code == 2
        assert "expected at least 6" in result.output

    def test_out_of_bounds(self):
        result = runner.invoke(app, ["60 * * * * cmd"])
        assert result.exit_code == 3
        assert "'60'" in result.output
        assert "allowed 0-59" in result.output
        assert "command" not in result.output

    def test_invalid_step(self):
        result = runner.invoke(app, ["*/0 * * * * cmd"])
        assert result.exit_code == 3
        assert "Invalid step" in result.output

    def test_invalid_value_in_later_field(self):
        result = runner.invoke(app, ["0 0 * * funday cmd"])
        assert result.exit_code == 3
        assert "day of week" in result.output

    def test_option_misuse_is_reported_by_click(self):
        # click's own usage errors share exit status 2 with short expressions
        result = runner.invoke(app, ["--log-level"])
        assert result.exit_code == 2
        assert "minute" not in result.output
