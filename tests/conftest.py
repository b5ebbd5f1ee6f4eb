"""Shared pytest fixtures for Dent tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from dent import Dent


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def dent_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to Dent document fixtures."""
    return fixtures_dir / "dent"


@pytest.fixture
def dent() -> Dent:
    """Engine with the built-in functions."""
    return Dent.default()


@pytest.fixture
def bare_dent() -> Dent:
    """Engine without any functions."""
    return Dent()


@pytest.fixture
def write_dent(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a Dent document under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
