"""Tests for name/code lookup over the static tables."""

from __future__ import annotations

import pytest

from error_codes.domain.lookup import (
    LookupHit,
    LookupMiss,
    find,
    find_by_code,
    find_by_name,
    lookup,
    parse_token,
)
from error_codes.domain.tables import ECONF_ENTRIES, ERRNO_ENTRIES, PAM_ENTRIES
from error_codes.domain.types import Entry

ALL_ENTRIES = [*ECONF_ENTRIES, *ERRNO_ENTRIES, *PAM_ENTRIES]
TABLE_OF = {id(e): t for t in (ECONF_ENTRIES, ERRNO_ENTRIES, PAM_ENTRIES) for e in t}


# ---------------------------------------------------------------------------
# find_by_name / find_by_code
# ---------------------------------------------------------------------------


class TestFindByName:
    @pytest.mark.parametrize("entry", ALL_ENTRIES, ids=lambda e: e.name)
    def test_every_entry_found_by_name(self, entry: Entry) -> None:
        table = TABLE_OF[id(entry)]
        assert find_by_name(table, entry.name) == entry
        assert find_by_name(table, entry.name.upper()) == entry
        assert find_by_name(table, entry.name.lower()) == entry

    def test_mixed_case(self) -> None:
        assert find_by_name(ERRNO_ENTRIES, "eNoEnT") == Entry("ENOENT", 2)

    def test_absent(self) -> None:
        assert find_by_name(ERRNO_ENTRIES, "ENOTATHING") is None

    def test_no_prefix_match(self) -> None:
        assert find_by_name(PAM_ENTRIES, "PAM_AUTH") is None

    def test_empty_table(self) -> None:
        assert find_by_name((), "ENOENT") is None


class TestFindByCode:
    @pytest.mark.parametrize("entry", ALL_ENTRIES, ids=lambda e: e.name)
    def test_every_code_found(self, entry: Entry) -> None:
        found = find_by_code(TABLE_OF[id(entry)], entry.code)
        assert found is not None
        assert found.code == entry.code

    def test_first_in_table_order(self) -> None:
        table = (Entry("EAGAIN", 11), Entry("EWOULDBLOCK", 11))
        assert find_by_code(table, 11) == Entry("EAGAIN", 11)

    def test_absent(self) -> None:
        assert find_by_code(ERRNO_ENTRIES, 99999) is None


# ---------------------------------------------------------------------------
# parse_token / find
# ---------------------------------------------------------------------------


class TestParseToken:
    def test_digits_are_codes(self) -> None:
        assert parse_token("2") == 2
        assert parse_token("007") == 7

    def test_names(self) -> None:
        assert parse_token("ENOENT") == "ENOENT"

    def test_malformed_numeric(self) -> None:
        assert parse_token("12abc") is None
        assert parse_token("1_000") is None
        assert parse_token("2 ") is None

    def test_negative_is_a_name(self) -> None:
        assert parse_token("-5") == "-5"

    def test_non_ascii_digit_is_a_name(self) -> None:
        assert parse_token("٢") == "٢"

    def test_empty(self) -> None:
        assert parse_token("") == ""


class TestFind:
    def test_code(self) -> None:
        assert find(ERRNO_ENTRIES, "2") == Entry("ENOENT", 2)

    def test_name(self) -> None:
        assert find(ERRNO_ENTRIES, "enoent") == Entry("ENOENT", 2)

    def test_malformed_numeric_is_miss(self) -> None:
        assert find(ERRNO_ENTRIES, "2abc") is None

    def test_negative_is_miss(self) -> None:
        assert find(ECONF_ENTRIES, "-1") is None


class TestLookup:
    def test_outcomes_in_token_order(self) -> None:
        outcomes = list(lookup(PAM_ENTRIES, ["7", "nope", "pam_success"]))
        assert outcomes == [
            LookupHit("7", Entry("PAM_AUTH_ERR", 7)),
            LookupMiss("nope"),
            LookupHit("pam_success", Entry("PAM_SUCCESS", 0)),
        ]

    def test_no_tokens(self) -> None:
        assert list(lookup(PAM_ENTRIES, [])) == []
