"""Custom Click base classes: --examples support and EINVAL usage errors.

Provides ErrorCodesCommand and ErrorCodesGroup. Both accept an
``examples`` parameter; when ``--examples`` is passed, the command prints
usage examples and exits. Every usage error, whether raised by Click's
parser or by a command body, exits with status ``EINVAL``.
"""

from __future__ import annotations

import errno
from typing import Any

import click


class InvalidUsage(click.UsageError):
    """Usage error that exits with ``EINVAL`` instead of Click's 2."""

    exit_code = errno.EINVAL


def usage_error(message: str) -> InvalidUsage:
    """Build an InvalidUsage bound to the active Click context."""
    return InvalidUsage(message, ctx=click.get_current_context(silent=True))


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class _EinvalMixin:
    """Re-tag Click's parse errors with the ``EINVAL`` exit status."""

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            context: click.Context = super().make_context(  # type: ignore[misc]
                info_name, args, parent=parent, **extra
            )
            return context
        except click.UsageError as exc:
            exc.exit_code = errno.EINVAL
            raise


class ErrorCodesCommand(_EinvalMixin, click.Command):
    """Click Command subclass with ``--examples`` and EINVAL usage errors."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ErrorCodesGroup(_EinvalMixin, click.Group):
    """Click Group subclass with ``--examples`` and EINVAL usage errors.

    Sets ``command_class = ErrorCodesCommand`` so subcommands get the same
    behaviour without explicit ``cls=`` each time.
    """

    command_class = ErrorCodesCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = errno.EINVAL
            raise
