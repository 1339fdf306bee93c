"""Keyword search over resolved descriptions.

Two surfaces:
- search: every entry whose description contains all keywords,
  under the locale active at call time
- search_all_locales: the same search repeated once per locale name,
  with each locale activated through a caller-supplied scoped context

Both are lazy and produce results in table order (and, for the
multi-locale variant, in locale order first). Empty keyword lists are
rejected before any entry is resolved.
"""

from __future__ import annotations

import locale
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import AbstractContextManager, ExitStack
from dataclasses import dataclass
from typing import Any

from error_codes.domain.resolvers import Resolver
from error_codes.domain.types import Entry

LocaleActivator = Callable[[str], AbstractContextManager[Any]]


@dataclass(frozen=True)
class LocaleMatch:
    """A search hit tagged with the locale it was produced under."""

    locale: str
    entry: Entry
    description: str


def matches(description: str, keywords: Iterable[str]) -> bool:
    """True when every keyword is a case-insensitive substring of *description*."""
    folded = description.casefold()
    return all(keyword.casefold() in folded for keyword in keywords)


def _require_keywords(keywords: Sequence[str]) -> tuple[str, ...]:
    words = tuple(keywords)
    if not words:
        raise ValueError("at least one keyword is required")
    return words


def search(
    entries: Sequence[Entry],
    resolver: Resolver,
    keywords: Sequence[str],
) -> Iterator[tuple[Entry, str]]:
    """Yield ``(entry, description)`` for each entry matching all *keywords*.

    Raises:
        ValueError: *keywords* is empty.
    """
    words = _require_keywords(keywords)
    return _scan(entries, resolver, words)


def _scan(
    entries: Sequence[Entry],
    resolver: Resolver,
    keywords: tuple[str, ...],
) -> Iterator[tuple[Entry, str]]:
    for entry in entries:
        description = resolver.describe(entry.code)
        if matches(description, keywords):
            yield entry, description


def search_all_locales(
    entries: Sequence[Entry],
    resolver: Resolver,
    keywords: Sequence[str],
    locales: Iterable[str],
    *,
    activate: LocaleActivator,
    on_warning: Callable[[str], None],
) -> Iterator[LocaleMatch]:
    """Run :func:`search` once per locale in *locales*.

    ``activate(name)`` must return a context manager that makes *name*
    the active locale for the duration of the block and restores the
    previous one on exit. A locale that fails to activate (raises
    :class:`locale.Error`) is reported through *on_warning* and skipped.
    Matches are not deduplicated across locales.

    Raises:
        ValueError: *keywords* is empty.
    """
    words = _require_keywords(keywords)
    return _scan_locales(entries, resolver, words, locales, activate, on_warning)


def _scan_locales(
    entries: Sequence[Entry],
    resolver: Resolver,
    keywords: tuple[str, ...],
    locales: Iterable[str],
    activate: LocaleActivator,
    on_warning: Callable[[str], None],
) -> Iterator[LocaleMatch]:
    for name in locales:
        with ExitStack() as stack:
            try:
                stack.enter_context(activate(name))
            except locale.Error:
                on_warning(f"locale '{name}' does not work")
                continue
            # Collected inside the scope: nothing is yielded while the
            # locale is swapped.
            hits = list(_scan(entries, resolver, keywords))
        for entry, description in hits:
            yield LocaleMatch(locale=name, entry=entry, description=description)
