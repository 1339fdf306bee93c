"""Error domains and table entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Domain(StrEnum):
    """The three error namespaces, named after their CLI subcommands."""

    ECONF = "econf"
    ERRNO = "errno"
    PAM = "pam"


@dataclass(frozen=True)
class Entry:
    """A symbolic error name and its numeric code."""

    name: str
    code: int
