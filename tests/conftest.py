"""Shared pytest fixtures for romanctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from romanctl.config.models import ConvertConfig
from romanctl.services.convert import ConvertService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ROMANCTL_* variables from the outer shell out of every test."""
    for name in list(os.environ):
        if name.startswith("ROMANCTL_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    roman = logging.getLogger("romanctl")
    roman_level = roman.level
    yield
    for handler in root.handlers[:]:
        if handler not in original_handlers:
            root.removeHandler(handler)
    root.setLevel(original_level)
    roman.setLevel(roman_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> ConvertService:
    """ConvertService with default config."""
    return ConvertService(ConvertConfig())


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray romanctl.toml is picked up.

    Tests that need to write a config can request ``tmp_path`` directly
    (pytest deduplicates — it's the same directory).
    """
    monkeypatch.chdir(tmp_path)
