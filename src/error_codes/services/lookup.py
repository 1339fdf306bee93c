"""LookupService: lookup, listing and search over one error domain.

Four read-only surfaces:
- lookup: resolve name-or-code tokens, one hit or miss per token
- list_entries: the whole table in order
- search: keyword match under the active locale
- search_locales: keyword match repeated under every installed locale

Items in ``data["items"]`` carry ``name``, ``code`` and ``description``;
lookup items add ``token`` and ``found``, locale search items add
``locale``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from error_codes.domain import lookup as lookup_engine
from error_codes.domain import search as search_engine
from error_codes.domain.resolvers import Resolver, resolver_for
from error_codes.domain.tables import entries_for
from error_codes.domain.types import Domain, Entry
from error_codes.infrastructure.locales import (
    DEFAULT_LOCALE_COMMAND,
    LocaleEnumerationError,
    activated_locale,
    installed_locales,
)
from error_codes.services.result import Operation, ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class LookupService:
    """Lookup and search operations bound to a single domain.

    Args:
        domain: Which error table and resolver to use.
        resolver: Override the domain's default resolver.
        localedir: Catalog directory for translated PAM messages.
        locale_command: Command listing installed locales.
    """

    def __init__(
        self,
        domain: Domain,
        *,
        resolver: Resolver | None = None,
        localedir: str | None = None,
        locale_command: Sequence[str] = DEFAULT_LOCALE_COMMAND,
    ) -> None:
        self.domain = Domain(domain)
        self._entries = entries_for(self.domain)
        self._resolver = resolver or resolver_for(self.domain, localedir=localedir)
        self._locale_command = tuple(locale_command)

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------

    def lookup(self, tokens: Sequence[str]) -> ServiceResult:
        """Resolve each token as a code (digit-leading) or a name."""
        if not tokens:
            return self._no_input("lookup", "NO_TOKENS", "At least one name or code is required")

        items: list[dict[str, Any]] = []
        for outcome in lookup_engine.lookup(self._entries, tokens):
            if isinstance(outcome, lookup_engine.LookupHit):
                item = self._item(outcome.entry)
                items.append({"token": outcome.token, "found": True, **item})
            else:
                logger.debug(
                    "No entry for token",
                    extra={"domain": str(self.domain), "token": outcome.token},
                )
                items.append({"token": outcome.token, "found": False})

        return ServiceResult(
            ok=True,
            op="lookup",
            data={"domain": str(self.domain), "items": items},
        )

    # ------------------------------------------------------------------
    # list_entries
    # ------------------------------------------------------------------

    def list_entries(self) -> ServiceResult:
        """Every entry of the domain in table order."""
        items = [self._item(entry) for entry in self._entries]
        return ServiceResult(
            ok=True,
            op="list",
            data={"domain": str(self.domain), "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # search
    # ------------------------------------------------------------------

    def search(self, keywords: Sequence[str]) -> ServiceResult:
        """Entries whose description contains every keyword."""
        try:
            hits = search_engine.search(self._entries, self._resolver, keywords)
        except ValueError:
            return self._no_input("search", "NO_KEYWORDS", "At least one keyword is required")

        items = [self._item(entry, description) for entry, description in hits]
        return ServiceResult(
            ok=True,
            op="search",
            data={
                "domain": str(self.domain),
                "keywords": list(keywords),
                "count": len(items),
                "items": items,
            },
        )

    # ------------------------------------------------------------------
    # search_locales
    # ------------------------------------------------------------------

    def search_locales(self, keywords: Sequence[str]) -> ServiceResult:
        """Keyword search repeated under every installed locale.

        Locales that cannot be activated become warnings. Failing to
        start the locale listing command fails the whole operation.
        """
        if not keywords:
            return self._no_input(
                "search_locales", "NO_KEYWORDS", "At least one keyword is required"
            )

        warnings: list[str] = []

        def warn(message: str) -> None:
            logger.debug(
                "Skipped locale", extra={"domain": str(self.domain), "reason": message}
            )
            warnings.append(message)

        items: list[dict[str, Any]] = []
        try:
            with installed_locales(self._locale_command) as names:
                for match in search_engine.search_all_locales(
                    self._entries,
                    self._resolver,
                    keywords,
                    names,
                    activate=activated_locale,
                    on_warning=warn,
                ):
                    item = self._item(match.entry, match.description)
                    items.append({"locale": match.locale, **item})
        except LocaleEnumerationError as exc:
            logger.debug(
                "Locale enumeration failed",
                extra={"command": list(exc.command), "errno": exc.errno},
            )
            return ServiceResult(
                ok=False,
                op="search_locales",
                error=ServiceError(
                    code="LOCALE_ENUMERATION_FAILED",
                    message=str(exc),
                    detail={"command": list(exc.command), "errno": exc.errno},
                ),
            )

        return ServiceResult(
            ok=True,
            op="search_locales",
            data={
                "domain": str(self.domain),
                "keywords": list(keywords),
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _item(self, entry: Entry, description: str | None = None) -> dict[str, Any]:
        if description is None:
            description = self._resolver.describe(entry.code)
        return {"name": entry.name, "code": entry.code, "description": description}

    @staticmethod
    def _no_input(op: Operation, code: str, message: str) -> ServiceResult:
        return ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=message))
