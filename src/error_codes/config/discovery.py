"""Config file discovery and loading.

Looks for ``error-codes/config.toml`` under ``$XDG_CONFIG_HOME``
(``~/.config`` when unset). Supports the ERROR_CODES_CONFIG env var and
the --config CLI flag as overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIRNAME = "error-codes"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "ERROR_CODES_CONFIG"


def default_config_path() -> Path:
    """The per-user config location, whether or not it exists."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / CONFIG_DIRNAME / CONFIG_FILENAME


def find_config() -> Path | None:
    """Return the config file to use, or None if there is none.

    Checks ERROR_CODES_CONFIG first, then the per-user location.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    candidate = default_config_path()
    if candidate.is_file():
        return candidate
    return None

