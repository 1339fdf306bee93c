"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.

Entry lines have the fixed shape ``<name> - <code> - <description>``
and lookup misses read ``Not found: <token>``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from error_codes.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from error_codes.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def entry_line(item: dict[str, Any]) -> Text:
    """Build the ``name - code - description`` line for an item."""
    return Text.assemble(
        (str(item["name"]), "ec.name"),
        " - ",
        (str(item["code"]), "ec.code"),
        " - ",
        (str(item["description"]), "ec.description"),
    )


def _line(console: Console, text: Text) -> None:
    # soft_wrap keeps long descriptions on one line
    console.print(text, soft_wrap=True)


def _render_lookup(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for item in result.items:
        if item.get("found"):
            _line(console, entry_line(item))
        else:
            _line(console, Text(f"Not found: {item['token']}", style="ec.missing"))


def _render_entries(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for item in result.items:
        line = entry_line(item)
        if verbose and "locale" in item:
            line = Text.assemble((f"[{item['locale']}] ", "ec.locale"), line)
        _line(console, line)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    _line(console, Text(f"ERROR: {result.op}: {msg}", style="ec.error"))
    if verbose and result.error is not None:
        _line(console, Text(f"  code: {result.error.code}"))
        for key, value in result.error.detail.items():
            _line(console, Text(f"  {key}: {value}"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "lookup": _render_lookup,
    "list": _render_entries,
    "search": _render_entries,
    "search_locales": _render_entries,
}
