"""Shared pytest fixtures for error-codes tests."""

from __future__ import annotations

import locale
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _c_locale(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test under the C locale with no user config.

    The CLI adopts the environment locale at start-up, so the environment
    is pinned to ``C`` and the process locale is restored afterwards.
    """
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("ERROR_CODES_CONFIG", raising=False)
    previous = locale.setlocale(locale.LC_ALL)
    locale.setlocale(locale.LC_ALL, "C")
    try:
        yield
    finally:
        locale.setlocale(locale.LC_ALL, previous)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """Drop handlers the CLI installs on the root logger during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
