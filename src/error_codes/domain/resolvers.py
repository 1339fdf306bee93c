"""Description resolvers: code to human-readable message, per domain.

Each resolver reads the process locale (never writes it), so the text it
returns follows whatever locale is active at call time. Resolvers never
fail: unknown codes produce the library's own fallback message.
"""

from __future__ import annotations

import gettext
import locale
import os
from typing import Protocol

from error_codes.domain.types import Domain

# gettext domain Linux-PAM installs its translations under.
PAM_TEXT_DOMAIN = "Linux-PAM"

# libeconf: econf_errString()
_ECONF_MESSAGES: tuple[str, ...] = (
    "Success",
    "Unknown libeconf error",
    "Out of memory",
    "Configuration file not found",
    "Group not found",
    "Key not found",
    "Key is NULL or has empty value",
    "Write error",
    "Parse error",
    "Missing closing section bracket",
    "Missing delimiter",
    "Empty section name",
    "Text after section",
    "Parsed file list is NULL",
    "Wrong boolean value (1/0 true/false yes/no)",
    "Given key has NULL value",
    "File has wrong owner",
    "File has wrong group",
    "File has wrong file permissions",
    "File has wrong dir permission",
    "File is a sym link which is not permitted",
    "User defined parsing callback has failed",
    "Given argument is NULL",
    "Given option not found",
    "Value cannot be converted",
)

# Linux-PAM: pam_strerror()
_PAM_MESSAGES: dict[int, str] = {
    0: "Success",
    1: "Failed to load module",
    2: "Symbol not found",
    3: "Error in service module",
    4: "System error",
    5: "Memory buffer error",
    6: "Permission denied",
    7: "Authentication failure",
    8: "Insufficient credentials to access authentication data",
    9: "Authentication service cannot retrieve authentication info",
    10: "User not known to the underlying authentication module",
    11: "Have exhausted maximum number of retries for service",
    12: "Authentication token is no longer valid; new one required",
    13: "User account has expired",
    14: "Cannot make/remove an entry for the specified session",
    15: "Authentication service cannot retrieve user credentials",
    16: "User credentials expired",
    17: "Failure setting user credentials",
    18: "No module specific data is present",
    19: "Conversation error",
    20: "Authentication token manipulation error",
    21: "Authentication information cannot be recovered",
    22: "Authentication token lock busy",
    23: "Authentication token aging disabled",
    24: "Failed preliminary check by password service",
    25: "The return value should be ignored by PAM dispatch",
    26: "Critical error - immediate abort",
    27: "Authentication token expired",
    28: "Module is unknown",
    29: "Bad item passed to pam_*_item()",
    30: "Conversation is waiting for event",
    31: "Application needs to call libpam again",
}
_PAM_UNKNOWN = "Unknown PAM error"


class Resolver(Protocol):
    """Maps an error code to its description under the active locale."""

    def describe(self, code: int) -> str: ...


class ErrnoResolver:
    """System error messages via the C library's ``strerror``."""

    def describe(self, code: int) -> str:
        try:
            return os.strerror(code)
        except (ValueError, OverflowError):
            # Some C libraries return NULL instead of a fallback string.
            return f"Unknown error {code}"


class EconfResolver:
    """libeconf messages. libeconf ships no translations."""

    def describe(self, code: int) -> str:
        if 0 <= code < len(_ECONF_MESSAGES):
            return _ECONF_MESSAGES[code]
        return f"Unknown libeconf error {code}"


class PamResolver:
    """Linux-PAM messages, translated through the ``Linux-PAM`` catalog.

    The catalog language is taken from the active ``LC_MESSAGES`` setting
    on every call, the same way ``dgettext`` behaves inside libpam.

    Args:
        localedir: Directory holding ``<lang>/LC_MESSAGES/Linux-PAM.mo``.
            ``None`` uses Python's default locale directory.
    """

    def __init__(self, localedir: str | None = None) -> None:
        self._localedir = localedir

    def describe(self, code: int) -> str:
        message = _PAM_MESSAGES.get(code, _PAM_UNKNOWN)
        return self._translation().gettext(message)

    def _translation(self) -> gettext.NullTranslations:
        return gettext.translation(
            PAM_TEXT_DOMAIN,
            localedir=self._localedir,
            languages=[current_messages_locale()],
            fallback=True,
        )


def current_messages_locale() -> str:
    """Return the active ``LC_MESSAGES`` locale name without changing it."""
    return locale.setlocale(locale.LC_MESSAGES) or "C"


def resolver_for(domain: Domain, *, localedir: str | None = None) -> Resolver:
    """Return the resolver adapter for *domain*."""
    domain = Domain(domain)
    if domain is Domain.ERRNO:
        return ErrnoResolver()
    if domain is Domain.ECONF:
        return EconfResolver()
    return PamResolver(localedir=localedir)
