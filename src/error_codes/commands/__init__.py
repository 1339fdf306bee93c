"""Subcommand modules for error-codes.

Provides register_commands() which attaches the domain commands to the
root CLI group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the econf, errno and pam commands on the root CLI group."""
    from error_codes.commands.lookup import econf, errno_cmd, pam

    cli.add_command(econf)
    cli.add_command(errno_cmd)
    cli.add_command(pam)
