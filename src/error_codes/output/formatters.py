"""Human/JSON output selection.

The CLI renders ServiceResult for humans (Rich, one line per entry) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from error_codes.output.renderers import render_result

if TYPE_CHECKING:
    from error_codes.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; human-readable defaults when omitted.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose)
