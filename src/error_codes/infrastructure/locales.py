"""Process locale handling and installed-locale enumeration.

The active locale is process-wide state. Every change made here goes
through :func:`activated_locale`, which restores the previous setting
on exit. Installed locales are read from an external command
(``locale -a`` by default), one name per line.
"""

from __future__ import annotations

import locale
import logging
import subprocess
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import IO

logger = logging.getLogger(__name__)

DEFAULT_LOCALE_COMMAND: tuple[str, ...] = ("locale", "-a")


class LocaleEnumerationError(Exception):
    """The locale listing command could not be started."""

    def __init__(self, command: Sequence[str], cause: OSError) -> None:
        self.command = tuple(command)
        self.errno = cause.errno
        self.strerror = cause.strerror or str(cause)
        super().__init__(f"'{' '.join(self.command)}' failed: {self.strerror}")


def initialize_locale() -> str:
    """Adopt the locale configured in the environment (``LANG``, ``LC_*``).

    Falls back to the current (``C``) locale with a logged warning if the
    environment names a locale that is not installed.
    """
    try:
        return locale.setlocale(locale.LC_ALL, "")
    except locale.Error as exc:
        logger.warning("Cannot set locale from environment", extra={"reason": str(exc)})
        return locale.setlocale(locale.LC_ALL)


@contextmanager
def activated_locale(name: str) -> Iterator[str]:
    """Make *name* the active ``LC_ALL`` locale for the block.

    Raises :class:`locale.Error` without changing anything if *name*
    cannot be activated. Otherwise the previous locale is restored on
    exit, whether the block succeeds or raises.
    """
    previous = locale.setlocale(locale.LC_ALL)
    try:
        activated = locale.setlocale(locale.LC_ALL, name)
    except locale.Error:
        logger.debug("Locale unavailable", extra={"locale": name})
        raise
    logger.debug("Activated locale", extra={"locale": activated})
    try:
        yield activated
    finally:
        locale.setlocale(locale.LC_ALL, previous)


def _names(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        name = line.strip()
        if name:
            yield name


@contextmanager
def installed_locales(
    command: Sequence[str] = DEFAULT_LOCALE_COMMAND,
) -> Iterator[Iterator[str]]:
    """Stream installed locale names from *command*.

    Yields a lazy iterator over the non-blank output lines. The pipe is
    closed and the child reaped when the block exits, including early
    exits.

    Raises:
        LocaleEnumerationError: *command* could not be started.
    """
    try:
        proc = subprocess.Popen(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise LocaleEnumerationError(command, exc) from exc

    assert proc.stdout is not None
    try:
        yield _names(proc.stdout)
    finally:
        proc.stdout.close()
        returncode = proc.wait()
        if returncode:
            logger.debug(
                "Locale listing exited with non-zero status",
                extra={"command": list(command), "returncode": returncode},
            )
