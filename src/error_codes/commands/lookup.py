"""Commands: ``econf``, ``errno`` and ``pam``.

The three domain commands share one shape, so they are built by
:func:`make_domain_command`. Each command runs in exactly one mode:

- lookup (default): one or more name-or-code tokens
- ``--list``: every entry, no arguments
- ``--search``: keywords matched against descriptions
- ``--search-locales``: the same, under every installed locale
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from error_codes.commands._base import ErrorCodesCommand, usage_error
from error_codes.domain.types import Domain

if TYPE_CHECKING:
    from error_codes.commands._context import AppContext

_DESCRIPTIONS: dict[Domain, str] = {
    Domain.ECONF: "Look up libeconf error codes.",
    Domain.ERRNO: "Look up system error numbers (errno).",
    Domain.PAM: "Look up PAM error codes.",
}

_EXAMPLES: dict[Domain, str] = {
    Domain.ECONF: """\
  error-codes econf 3
  error-codes econf ECONF_NOKEY econf_nofile
  error-codes econf --list
  error-codes econf --search file permission""",
    Domain.ERRNO: """\
  error-codes errno 2
  error-codes errno enoent EACCES 13
  error-codes errno --list
  error-codes errno --search permission
  error-codes errno --search-locales denied""",
    Domain.PAM: """\
  error-codes pam 7
  error-codes pam PAM_AUTH_ERR
  error-codes pam --list
  error-codes --json pam --search token expired""",
}


def make_domain_command(domain: Domain) -> click.Command:
    """Build the Click command for one error domain."""

    @click.command(
        name=str(domain),
        cls=ErrorCodesCommand,
        help=_DESCRIPTIONS[domain],
        examples=_EXAMPLES[domain],
    )
    @click.option(
        "-l", "--list", "list_all", is_flag=True, help="List all names, values and descriptions."
    )
    @click.option("-s", "--search", is_flag=True, help="Search keywords in descriptions.")
    @click.option(
        "-S",
        "--search-locales",
        is_flag=True,
        help="Search keywords in all installed languages.",
    )
    @click.argument("args", nargs=-1, metavar="[NAME-OR-CODE|KEYWORD]...")
    @click.pass_obj
    def command(
        app: AppContext,
        list_all: bool,
        search: bool,
        search_locales: bool,
        args: tuple[str, ...],
    ) -> None:
        if list_all + search + search_locales > 1:
            raise usage_error("--list, --search and --search-locales are mutually exclusive.")

        svc = app.lookup_service(domain)

        if list_all:
            if args:
                raise usage_error("too many arguments.")
            app.emit(svc.list_entries())
        elif search or search_locales:
            if not args:
                raise usage_error("at least one keyword is required.")
            if search_locales:
                app.emit(svc.search_locales(args))
            else:
                app.emit(svc.search(args))
        elif args:
            app.emit(svc.lookup(args))
        else:
            raise usage_error("missing error name or code.")

    return command


econf = make_domain_command(Domain.ECONF)
errno_cmd = make_domain_command(Domain.ERRNO)
pam = make_domain_command(Domain.PAM)
