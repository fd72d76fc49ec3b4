"""Shared pytest fixtures and test helpers for intervalds tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from intervalds.config.settings import IntervalSettings
from intervalds.services.interval import IntervalService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> IntervalSettings:
    """Settings with code defaults (no TOML, no env overrides)."""
    return IntervalSettings.from_cli(config_path=str(tmp_path / "missing.toml"))


@pytest.fixture
def service(settings: IntervalSettings) -> IntervalService:
    return IntervalService(settings)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host INTERVALDS_* variables out of every test."""
    for name in ("INTERVALDS_CONFIG", "INTERVALDS_DISPLAY__LEADING_FIELD_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("INTERVALDS_DISPLAY__FRACTIONAL_SECOND_PRECISION", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """The CLI reconfigures logging; undo it after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("intervalds")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty directory so no intervalds.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.  Tests that need the path can request ``tmp_path`` directly.
    """
    monkeypatch.chdir(tmp_path)
