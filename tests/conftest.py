"""Pytest configuration and shared fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from appa.config.settings import AppConfig, LoggingConfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, mocker):
    """Keep tests independent of the caller's environment and any .env file."""
    for key in list(os.environ):
        if key.startswith("APPA_"):
            monkeypatch.delenv(key)
    return mocker.patch("appa.config.settings.load_dotenv", return_value=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def runner() -> CliRunner:
    """Create a click test runner."""
    return CliRunner()


@pytest.fixture
def logging_config(temp_dir: Path) -> LoggingConfig:
    """Create a logging configuration that writes to a temporary file."""
    return LoggingConfig(
        level="DEBUG",
        format="text",
        file=temp_dir / "logs" / "appa.log",
    )


@pytest.fixture
def mock_config(logging_config: LoggingConfig) -> AppConfig:
    """Create a mock configuration for testing."""
    return AppConfig(logging=logging_config)
