"""output-logging: route log lines into each test's own output.

An adapter that formats structured log events into single lines and writes
them through a per-test output sink instead of process-wide stdout, so lines
logged during a test are reported with that test. Ships a pytest plugin
providing the per-test sink, loggers over it and a stdlib ``logging`` bridge.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pytest-output-logging")
except PackageNotFoundError:
    __version__ = "0.0.0"

from output_logging.config import LoggingConfig, resolve_config, validate_overrides
from output_logging.exceptions import (
    ConfigValidationError,
    OutputLoggingError,
    ProviderClosedError,
    SinkUnavailableError,
)
from output_logging.formatting import DEFAULT_FORMATTER, DefaultFormatter, LogFormatter
from output_logging.logger import (
    EventInfo,
    LoggerProvider,
    LogLevel,
    OutputHandler,
    OutputLogger,
    OutputLoggerProvider,
    ScopeHandle,
)
from output_logging.sinks import BufferedOutput, OutputSink

__all__ = [
    "DEFAULT_FORMATTER",
    "BufferedOutput",
    "ConfigValidationError",
    "DefaultFormatter",
    "EventInfo",
    "LogFormatter",
    "LogLevel",
    "LoggerProvider",
    "LoggingConfig",
    "OutputHandler",
    "OutputLogger",
    "OutputLoggerProvider",
    "OutputLoggingError",
    "OutputSink",
    "ProviderClosedError",
    "ScopeHandle",
    "SinkUnavailableError",
    "__version__",
    "resolve_config",
    "validate_overrides",
]
