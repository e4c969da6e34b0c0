"""
Pytest configuration and shared fixtures for testfinder tests.
"""

import logging
import tempfile
from pathlib import Path
from typing import Iterable

import pytest

from testfinder import logging_integration
from testfinder.core.config import ConfigManager, TestFinderConfig
from testfinder.logging import logging_manager


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir).resolve()


@pytest.fixture
def repo_root(temp_dir):
    """An empty repository checkout (a directory holding .git)."""
    root = temp_dir / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def make_files(repo_root):
    """Create files under the repository root from repo-relative paths."""

    def _make(paths: Iterable[str]) -> None:
        for relative in paths:
            target = repo_root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("")

    return _make


@pytest.fixture
def config_dir(temp_dir):
    """Create a temporary config directory."""
    config_dir = temp_dir / ".config" / "testfinder"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def config_file(config_dir):
    """A temporary config file path (not created)."""
    return config_dir / "config.toml"


@pytest.fixture
def config_manager(config_file):
    return ConfigManager(config_file)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "mapping": {"backend_extension": "py", "frontend_extension": "vue"},
        "resolver": {"check_timeout": 0.5},
        "opener": {"command": "vim {path}", "beside_command": "vim -O {path}"},
        "logging": {"level": "DEBUG", "format": "json", "output": ["console"]},
    }


@pytest.fixture
def testfinder_config(sample_config_data):
    return TestFinderConfig(**sample_config_data)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, temp_dir):
    """Keep the user's configuration and TESTFINDER_* variables out of tests."""
    import os

    for name in list(os.environ):
        if name.upper().startswith("TESTFINDER_"):
            monkeypatch.delenv(name, raising=False)

    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by the logging manager during a test."""
    yield
    logging_manager.reset()
    logging.getLogger("testfinder").setLevel(logging.NOTSET)
    logging.getLogger().setLevel(logging.WARNING)
    logging_integration._logging_configured = False


# Pytest hooks
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
