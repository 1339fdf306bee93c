"""Tests for the static econf, errno and PAM tables."""

from __future__ import annotations

import errno

import pytest

from error_codes.domain.tables import (
    ECONF_ENTRIES,
    ERRNO_ENTRIES,
    PAM_ENTRIES,
    entries_for,
)
from error_codes.domain.types import Domain, Entry

ALL_TABLES = [ECONF_ENTRIES, ERRNO_ENTRIES, PAM_ENTRIES]


@pytest.mark.parametrize("table", ALL_TABLES)
def test_names_unique_ignoring_case(table: tuple[Entry, ...]) -> None:
    names = [entry.name.casefold() for entry in table]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("table", ALL_TABLES)
def test_tables_are_tuples_of_entries(table: tuple[Entry, ...]) -> None:
    assert isinstance(table, tuple)
    assert all(isinstance(entry, Entry) for entry in table)


def test_econf_codes_are_contiguous() -> None:
    assert [e.code for e in ECONF_ENTRIES] == list(range(25))
    assert ECONF_ENTRIES[0] == Entry("ECONF_SUCCESS", 0)
    assert ECONF_ENTRIES[-1] == Entry("ECONF_VALUE_CONVERSION_ERROR", 24)


def test_pam_codes_are_contiguous() -> None:
    assert [e.code for e in PAM_ENTRIES] == list(range(32))
    assert PAM_ENTRIES[7] == Entry("PAM_AUTH_ERR", 7)


def test_errno_codes_match_platform() -> None:
    for entry in ERRNO_ENTRIES:
        assert getattr(errno, entry.name) == entry.code


def test_errno_common_names_present() -> None:
    names = {e.name for e in ERRNO_ENTRIES}
    assert {"EPERM", "ENOENT", "EACCES", "EINVAL"} <= names


def test_errno_alias_follows_primary() -> None:
    names = [e.name for e in ERRNO_ENTRIES]
    if "EWOULDBLOCK" in names:
        assert names.index("EAGAIN") < names.index("EWOULDBLOCK")


def test_entries_for() -> None:
    assert entries_for(Domain.ECONF) is ECONF_ENTRIES
    assert entries_for(Domain.ERRNO) is ERRNO_ENTRIES
    assert entries_for(Domain.PAM) is PAM_ENTRIES
