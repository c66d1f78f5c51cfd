"""Shared pytest fixtures for medea tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handlers every CLI invocation installs on the root logger."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    medea = logging.getLogger("medea")
    medea_level = medea.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    medea.setLevel(medea_level)


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep color detection deterministic regardless of the CI environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
