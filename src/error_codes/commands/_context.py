"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to the domain commands via
``@click.pass_obj``. Sets up logging and the process locale, builds
services, and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from error_codes.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from error_codes.config.settings import ErrorCodesSettings
    from error_codes.domain.types import Domain
    from error_codes.services.lookup import LookupService
    from error_codes.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: ErrorCodesSettings) -> None:
        self.settings = settings

        from error_codes.config.logging import configure_logging
        from error_codes.infrastructure.locales import initialize_locale

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        initialize_locale()

    def lookup_service(self, domain: Domain) -> LookupService:
        """Build the lookup service for *domain* from the current settings."""
        from error_codes.services.lookup import LookupService

        return LookupService(
            domain,
            localedir=self.settings.messages.localedir,
            locale_command=self.settings.search.locale_command,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
