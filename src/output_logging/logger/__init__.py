"""Output loggers: scopes, formatting and dispatch to a per-test sink."""

from output_logging.logger.handler import OutputHandler
from output_logging.logger.logger import OutputLogger, ScopeHandle
from output_logging.logger.provider import LoggerProvider, OutputLoggerProvider
from output_logging.logger.types import EventInfo, LogLevel

__all__ = [
    "EventInfo",
    "LogLevel",
    "LoggerProvider",
    "OutputHandler",
    "OutputLogger",
    "OutputLoggerProvider",
    "ScopeHandle",
]
