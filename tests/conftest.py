"""Shared pytest fixtures for nestr tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from nestr.config.settings import NestrSettings
from nestr.services.text import TextService


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from real nestr.toml files and NESTR_* env vars.

    CWD moves to a temp directory so walk-up discovery finds nothing
    unless a test writes its own config there.
    """
    monkeypatch.delenv("NESTR_CONFIG", raising=False)
    monkeypatch.delenv("NESTR_PAD__FILL", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> NestrSettings:
    """Default settings with no config file."""
    return NestrSettings.from_cli(start=tmp_path)


@pytest.fixture
def text_service(settings: NestrSettings) -> TextService:
    return TextService(settings)
