"""Bridge from the stdlib ``logging`` module into output loggers.

Attach an :class:`OutputHandler` to a stdlib logger (usually the root
logger) and every record it handles is written through the output logger of
the same name, so code under test that uses ``logging.getLogger()`` ends up
in the test's own output::

    handler = OutputHandler(OutputLoggerProvider(output))
    logging.getLogger().addHandler(handler)

An ``event_id`` passed through ``extra=`` becomes the event identifier.
"""

from __future__ import annotations

import logging

from output_logging.logger.provider import LoggerProvider
from output_logging.logger.types import EventInfo, LogLevel

# Records from this package's own loggers are never forwarded, otherwise a
# dropped write would log about itself through the same closed output.
_INTERNAL_LOGGER = "output_logging"


def _render_record(record: logging.LogRecord, exception: BaseException | None) -> str:
    return record.getMessage()


class OutputHandler(logging.Handler):
    """``logging.Handler`` that writes records through a logger provider."""

    def __init__(self, provider: LoggerProvider, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        if provider is None:
            raise TypeError("provider must not be None")
        self._provider = provider

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == _INTERNAL_LOGGER or record.name.startswith(_INTERNAL_LOGGER + "."):
            return
        try:
            exception = record.exc_info[1] if record.exc_info else None
            event_info = EventInfo.coerce(getattr(record, "event_id", None))
            output_logger = self._provider.create_logger(record.name or "root")
            output_logger.log(
                LogLevel.from_stdlib(record.levelno),
                event_info,
                record,
                exception,
                _render_record,
            )
        except Exception:
            self.handleError(record)
