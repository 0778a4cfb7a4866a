"""Logger providers: create named loggers over a shared output sink."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from output_logging.exceptions import ProviderClosedError
from output_logging.logger.logger import OutputLogger

if TYPE_CHECKING:
    from types import TracebackType

    from output_logging.config import LoggingConfig


class LoggerProvider(ABC):
    """Abstract factory of named loggers.

    Subclasses must implement ``create_logger()`` and ``close()``.
    """

    @abstractmethod
    def create_logger(self, name: str) -> OutputLogger:
        """Return the logger for category *name*."""

    @abstractmethod
    def close(self) -> None:
        """Release the provider; no loggers can be created afterwards."""

    def __enter__(self) -> LoggerProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


class OutputLoggerProvider(LoggerProvider):
    """Creates :class:`OutputLogger` instances that share one sink and config.

    Loggers are cached by name, so every caller asking for the same category
    shares its scope stack.

    Args:
        output: Sink handed to every logger created.
        config: Config handed to every logger created (default when omitted).

    Raises:
        TypeError: If *output* is None.
    """

    def __init__(self, output: Any, config: LoggingConfig | None = None) -> None:
        if output is None:
            raise TypeError("output must not be None")
        self._output = output
        self._config = config
        self._loggers: dict[str, OutputLogger] = {}
        self._closed = False

    @property
    def output(self) -> Any:
        return self._output

    def create_logger(self, name: str) -> OutputLogger:
        """Return the logger for *name*, creating it on first use.

        Raises:
            ProviderClosedError: If the provider has been closed.
            ValueError: If *name* is blank.
        """
        if self._closed:
            raise ProviderClosedError(f"Cannot create logger {name!r}: provider is closed")
        found = self._loggers.get(name)
        if found is None:
            found = OutputLogger(name, self._output, self._config)
            self._loggers[name] = found
        return found

    def close(self) -> None:
        self._closed = True
        self._loggers.clear()
