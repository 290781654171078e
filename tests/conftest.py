"""Shared test configuration and fixtures for errorvec tests."""

from pathlib import Path

import pytest

from errorvec import Failure, Success


@pytest.fixture
def mixed_outcomes():
    """Successes interleaved with failures."""
    return [Success(1), Failure("x"), Success(2), Failure("y")]


@pytest.fixture
def valid_yaml_file(tmp_path: Path) -> Path:
    """A YAML file that parses cleanly."""
    path = tmp_path / "valid.yml"
    path.write_text("name: test\nitems:\n  - a\n  - b\n", encoding="utf-8")
    return path


@pytest.fixture
def invalid_yaml_file(tmp_path: Path) -> Path:
    """A YAML file with an unclosed flow sequence."""
    path = tmp_path / "invalid.yml"
    path.write_text("name: test\nitems: [a, b\n", encoding="utf-8")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    """A path that does not exist."""
    return tmp_path / "does_not_exist.yml"
