"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchConfig(BaseModel):
    """[search] section."""

    model_config = {"frozen": True}

    locale_command: list[str] = Field(default_factory=lambda: ["locale", "-a"])


class MessagesConfig(BaseModel):
    """[messages] section."""

    model_config = {"frozen": True}

    # Where the Linux-PAM gettext catalogs live.
    localedir: str | None = "/usr/share/locale"

