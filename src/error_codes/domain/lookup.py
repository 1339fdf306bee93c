"""Exact lookup of table entries by name or by code.

Pure functions over the static tables. Tables are short, so every
lookup is a linear scan in table order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from error_codes.domain.types import Entry

_CODE_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class LookupHit:
    """A token that matched a table entry."""

    token: str
    entry: Entry


@dataclass(frozen=True)
class LookupMiss:
    """A token with no matching entry."""

    token: str


LookupOutcome = LookupHit | LookupMiss


def find_by_name(entries: Sequence[Entry], name: str) -> Entry | None:
    """Return the first entry whose name equals *name*, ignoring case."""
    wanted = name.casefold()
    for entry in entries:
        if entry.name.casefold() == wanted:
            return entry
    return None


def find_by_code(entries: Sequence[Entry], code: int) -> Entry | None:
    """Return the first entry carrying *code*."""
    for entry in entries:
        if entry.code == code:
            return entry
    return None


def parse_token(token: str) -> int | str | None:
    """Classify a lookup token as a code or a name.

    A token whose first character is an ASCII digit is a code and must
    consist of digits only; anything else (``12abc``) returns None.
    All other tokens, including ``-5``, are names.
    """
    if not token[:1].isascii() or not token[:1].isdigit():
        return token
    if _CODE_PATTERN.fullmatch(token) is None:
        return None
    return int(token, 10)


def find(entries: Sequence[Entry], token: str) -> Entry | None:
    """Resolve a single name-or-code token."""
    key = parse_token(token)
    if key is None:
        return None
    if isinstance(key, int):
        return find_by_code(entries, key)
    return find_by_name(entries, key)


def lookup(entries: Sequence[Entry], tokens: Iterable[str]) -> Iterator[LookupOutcome]:
    """Yield one hit or miss per token, in token order."""
    for token in tokens:
        entry = find(entries, token)
        if entry is None:
            yield LookupMiss(token)
        else:
            yield LookupHit(token, entry)
