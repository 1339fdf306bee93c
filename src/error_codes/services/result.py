"""ServiceResult and ServiceError: the contract between services and output.

INVARIANT: All LookupService methods return ServiceResult.
The CLI renders it as entry lines or as JSON.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

Operation = Literal["lookup", "list", "search", "search_locales"]


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is one of ``NO_TOKENS``, ``NO_KEYWORDS`` or
    ``LOCALE_ENUMERATION_FAILED``; ``detail`` carries the failing
    command and OS errno for the last.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one lookup, list or search operation.

    Attributes:
        ok: Whether the operation succeeded. Lookup misses still succeed.
        op: Which operation produced the result.
        data: ``domain`` plus ``items`` (and ``count``/``keywords`` for
            list and search).
        warnings: Locales that could not be activated during a
            multi-locale search.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: Operation
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def items(self) -> list[dict[str, Any]]:
        """Entries, hits or misses carried in ``data``, in output order."""
        items: list[dict[str, Any]] = self.data.get("items", [])
        return items
