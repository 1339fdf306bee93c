"""Rich Console factory and theme for error-codes output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ERROR_CODES_THEME = Theme(
    {
        "ec.name": "bold cyan",
        "ec.code": "magenta",
        "ec.description": "",
        "ec.locale": "dim",
        "ec.missing": "yellow",
        "ec.error": "bold red",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ERROR_CODES_THEME,
        highlight=False,
        emoji=False,
        width=120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
