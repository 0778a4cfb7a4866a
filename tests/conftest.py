"""Shared pytest fixtures for output-logging tests.

Provides configs, sink doubles and logger names used across the test modules.
"""

from __future__ import annotations

import os
import uuid
from unittest.mock import MagicMock

import pytest

from output_logging.config import LoggingConfig
from output_logging.sinks.base import OutputSink
from output_logging.sinks.buffered import BufferedOutput


@pytest.fixture
def default_config() -> LoggingConfig:
    """Return a LoggingConfig with defaults only (no env, no .env file)."""
    return LoggingConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def ignoring_config() -> LoggingConfig:
    """Return a config that swallows writes after the test boundary closed."""
    return LoggingConfig(_env_file=None, ignore_test_boundary_exception=True)  # type: ignore[call-arg]


@pytest.fixture
def mock_output() -> MagicMock:
    """Return a sink double recording every ``write_line`` call."""
    return MagicMock(spec=OutputSink)


@pytest.fixture
def buffered_output() -> BufferedOutput:
    """Return an open in-memory sink."""
    return BufferedOutput(owner="tests")


@pytest.fixture
def closed_output() -> BufferedOutput:
    """Return a sink whose test has already finished."""
    output = BufferedOutput(owner="finished-test")
    output.close()
    return output


@pytest.fixture
def logger_name() -> str:
    """Return a unique, valid logger name."""
    return str(uuid.uuid4())


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep OUTPUT_LOGGING_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("OUTPUT_LOGGING_"):
            monkeypatch.delenv(key)
