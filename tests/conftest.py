"""Shared pytest fixtures for valrule tests."""

from __future__ import annotations

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
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run each test from an empty directory with no VALRULE_* env vars."""
    for name in (
        "VALRULE_CONFIG",
        "VALRULE_JSON_OUTPUT",
        "VALRULE_QUIET",
        "VALRULE_VERBOSE",
        "VALRULE_LOG_JSON",
        "VALRULE_RANGE__ACCURACY",
        "VALRULE_MESSAGES__NOT_EMPTY",
        "VALRULE_MESSAGES__RANGE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI installs a stderr handler on the root logger; CliRunner closes
    that stream when the invocation ends.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("valrule")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
