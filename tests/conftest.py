"""
Pytest configuration and shared fixtures for packver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from packver.logging import get_global_logger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_manifest_data() -> dict[str, Any]:
    """
    Provide sample manifest data.

    Returns a complete manifest structure for testing.
    """
    return {
        "apiVersion": "packver/v1",
        "packages": [
            {"name": "libfoo", "constraint": "[1.0.0,2.0.0)"},
            {"name": "libbar", "constraint": "(*,3.0]"},
            {"name": "libbaz"},
        ],
    }


@pytest.fixture
def sample_org_defaults() -> dict[str, Any]:
    """Provide sample organization defaults."""
    return {
        "apiVersion": "packver/v1",
        "defaults": {
            "constraint": "[0.1,*)",
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def restore_global_logger():
    """Restore whatever global logger was installed before the test."""
    previous = get_global_logger()
    yield
    set_global_logger(previous)
