"""Shared pytest fixtures for projctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

import projctl.services.store as store_module
from projctl.services.store import ProjectStore


@pytest.fixture(autouse=True)
def _fresh_store(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Each test starts with no process-wide store."""
    monkeypatch.setattr(store_module, "_store", None)
    yield


@pytest.fixture
def store() -> ProjectStore:
    """A private store, not the process-wide one."""
    return ProjectStore()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env override.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.delenv("PROJCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
