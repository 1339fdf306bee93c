"""Root CLI group for error-codes with global flags and command registration."""

from __future__ import annotations

import click

from error_codes import __version__
from error_codes.commands import register_commands
from error_codes.commands._base import ErrorCodesGroup, usage_error
from error_codes.commands._context import AppContext
from error_codes.config.settings import ErrorCodesSettings

_EXAMPLES = """\
  error-codes errno 2
  error-codes errno --search permission
  error-codes --json pam --list
  error-codes --verbose econf --search-locales file"""


@click.group(
    name="error-codes",
    cls=ErrorCodesGroup,
    examples=_EXAMPLES,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-v", "--version", prog_name="error-codes")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("--verbose", is_flag=True, help="Debug logging and locale tags on results.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """error-codes - lookup error codes and their description.

    Commands: econf, errno, pam.
    """
    if ctx.invoked_subcommand is None:
        raise usage_error("missing command (econf, errno or pam).")
    # Only flags given on the command line override env vars and the config file.
    flags = {"json_output": json_output, "verbose": verbose, "log_json": log_json}
    settings = ErrorCodesSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)


register_commands(cli)