"""Shared pytest fixtures for drillctl tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from drillctl.config.settings import DrillSettings
from drillctl.domain.arithmetic import FaultInjector


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DRILLCTL_* variables from the caller's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("DRILLCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> DrillSettings:
    """Default settings rooted at an empty temp directory."""
    return DrillSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so no stray drillctl.toml is picked up.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def never_faults() -> FaultInjector:
    return FaultInjector(fault_rate=0.0)


@pytest.fixture
def always_faults() -> FaultInjector:
    return FaultInjector(fault_rate=1.0)
