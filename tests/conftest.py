"""
Pytest configuration and shared fixtures for ransel tests.

This module provides common fixtures that can be used across all test
modules in the project.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from ransel.core.random_source import RandomRange
from ransel.utils.logging_config import cleanup_logging

SAMPLE_FILE_NAMES = ("alpha.txt", "beta.txt", "gamma.txt")


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Detach console handlers installed by a test run of the CLI."""
    yield
    cleanup_logging()


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Create a directory holding three regular files and one subdirectory.

    Returns:
        Path to the populated directory.
    """
    directory = tmp_path / "samples"
    directory.mkdir()
    for name in SAMPLE_FILE_NAMES:
        (directory / name).write_text(f"content of {name}")
    (directory / "nested").mkdir()
    (directory / "nested" / "ignored.txt").write_text("not a direct entry")
    return directory


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Create a directory used as the parent of copy destinations."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def rng() -> RandomRange:
    """Seeded generator for reproducible draws."""
    return RandomRange(seed=1234)
