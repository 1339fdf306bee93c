"""Tests for the custom Click base classes."""

from __future__ import annotations

import errno

import click
from click.testing import CliRunner

from error_codes.commands._base import ErrorCodesCommand, ErrorCodesGroup, InvalidUsage


@click.group(cls=ErrorCodesGroup, examples="  demo run")
def demo() -> None:
    """Demo group."""


@demo.command(examples="  demo run --fast")
@click.option("--fast", is_flag=True)
def run(fast: bool) -> None:
    if not fast:
        raise InvalidUsage("need --fast")
    click.echo("ran")


def test_subcommands_use_command_class() -> None:
    assert isinstance(demo.commands["run"], ErrorCodesCommand)


def test_invalid_usage_exit_code() -> None:
    assert InvalidUsage.exit_code == errno.EINVAL


def test_raised_usage_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(demo, ["run"])
    assert result.exit_code == errno.EINVAL
    assert "need --fast" in result.stderr


def test_parse_error_remapped(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(demo, ["run", "--slow"])
    assert result.exit_code == errno.EINVAL


def test_unknown_subcommand_remapped(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(demo, ["walk"])
    assert result.exit_code == errno.EINVAL


def test_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(demo, ["run", "--examples"])
    assert result.exit_code == 0
    assert "demo run --fast" in result.stdout
    group = cli_runner.invoke(demo, ["--examples"])
    assert "demo run" in group.stdout


def test_success(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(demo, ["run", "--fast"])
    assert result.exit_code == 0
    assert result.stdout == "ran\n"
