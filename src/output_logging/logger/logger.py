"""Logger that writes each event as one line to a per-test output sink.

Pipeline for every ``log`` call:
    render message -> pick formatter -> format line -> write to sink.

The sink may be torn down before an asynchronous caller is done logging.
Such writes fail with SinkUnavailableError, which is swallowed when the
config sets ``ignore_test_boundary_exception`` and propagated otherwise.
Nothing else is ever swallowed.

Thread-safety: ``log`` holds no state of its own and may be called from any
thread. The scope stack is not locked; entering and leaving scopes on one
logger from several threads at once is the caller's responsibility.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from output_logging.config import LoggingConfig
from output_logging.exceptions import SinkUnavailableError
from output_logging.formatting.default import DEFAULT_FORMATTER, DefaultFormatter
from output_logging.logger.types import EventInfo, LogLevel

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

logger = logging.getLogger("output_logging")


def _render_message(state: tuple[str, tuple[Any, ...]], exception: BaseException | None) -> str:
    """Render the ``(message, args)`` state built by the convenience methods."""
    message, args = state
    # Same rule as logging.LogRecord: a lone mapping supplies named fields.
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    if args:
        return str(message) % args
    return str(message)


class ScopeHandle:
    """An active logging scope.

    Returned by :meth:`OutputLogger.begin_scope`. Use it as a context manager
    or call :meth:`close`. Only a reference to *state* is kept; it is not
    inspected until a line is formatted.
    """

    __slots__ = ("_closed", "_logger", "state")

    def __init__(self, owner: OutputLogger, state: object) -> None:
        self._logger = owner
        self._closed = False
        self.state = state

    def close(self) -> None:
        """Leave the scope. Closing an already-closed scope does nothing."""
        if self._closed:
            return
        self._closed = True
        self._logger._end_scope(self)

    def __enter__(self) -> ScopeHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


class OutputLogger:
    """Named logger bound to one output sink.

    Args:
        name: Category name of the logger; must contain a non-whitespace
            character.
        output: Sink receiving the formatted lines; anything with a
            ``write_line(str)`` method.
        config: Formatting and failure policy. A default
            :class:`LoggingConfig` is used when omitted.

    Raises:
        ValueError: If *name* is None, empty or whitespace only.
        TypeError: If *output* is None.
    """

    def __init__(self, name: str, output: Any, config: LoggingConfig | None = None) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Logger name must be a non-blank string, got {name!r}")
        if output is None:
            raise TypeError("output must not be None")

        self._name = name
        self._output = output
        self._config = config if config is not None else LoggingConfig()
        self._scopes: list[ScopeHandle] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> LoggingConfig:
        return self._config

    @property
    def scope_level(self) -> int:
        """Number of currently active scopes."""
        return len(self._scopes)

    def is_enabled(self, level: LogLevel) -> bool:
        """Return True for every level; this logger does no level filtering."""
        return True

    def begin_scope(self, state: object) -> ScopeHandle:
        """Enter a scope whose *state* prefixes lines until the handle closes.

        Scopes nest and must be closed innermost first.
        """
        handle = ScopeHandle(self, state)
        self._scopes.append(handle)
        return handle

    def _end_scope(self, handle: ScopeHandle) -> None:
        if self._scopes and self._scopes[-1] is handle:
            self._scopes.pop()
            return
        # Out-of-order close: drop the matching entry, leave the rest alone.
        for index in range(len(self._scopes) - 1, -1, -1):
            if self._scopes[index] is handle:
                del self._scopes[index]
                return

    def log(
        self,
        level: LogLevel,
        event_info: EventInfo | int | None,
        state: Any,
        exception: BaseException | None,
        renderer: Callable[[Any, BaseException | None], str],
    ) -> None:
        """Format one event and write it to the output.

        Args:
            level: Severity of the event.
            event_info: Event identifier; a bare int or None is accepted.
            state: Opaque value handed to *renderer*.
            exception: Exception attached to the event, if any.
            renderer: Builds the message text from ``(state, exception)``.

        Raises:
            SinkUnavailableError: If the sink is closed and the config does
                not ignore test boundary failures.
        """
        event_info = EventInfo.coerce(event_info)
        message = renderer(state, exception)

        formatter = self._config.formatter
        if formatter is None:
            formatter = DEFAULT_FORMATTER

        # Only DefaultFormatter.format itself takes scopes; subclasses that
        # override it get the plain six-argument call.
        if type(formatter).format is DefaultFormatter.format:
            line = formatter.format(
                len(self._scopes),
                self._name,
                level,
                event_info,
                message,
                exception,
                scopes=[scope.state for scope in self._scopes],
            )
        else:
            line = formatter.format(
                len(self._scopes), self._name, level, event_info, message, exception
            )

        try:
            self._output.write_line(line)
        except SinkUnavailableError:
            if not self._config.ignore_test_boundary_exception:
                raise
            logger.debug("Dropped %s line from %r: output no longer available", level, self._name)

    def _log_message(
        self,
        level: LogLevel,
        message: str,
        args: tuple[Any, ...],
        event_info: EventInfo | int | None,
        exception: BaseException | None,
    ) -> None:
        self.log(level, event_info, (message, args), exception, _render_message)

    def trace(self, message: str, *args: Any, event_info: EventInfo | int | None = None,
              exception: BaseException | None = None) -> None:
        self._log_message(LogLevel.TRACE, message, args, event_info, exception)

    def debug(self, message: str, *args: Any, event_info: EventInfo | int | None = None,
              exception: BaseException | None = None) -> None:
        self._log_message(LogLevel.DEBUG, message, args, event_info, exception)

    def information(self, message: str, *args: Any, event_info: EventInfo | int | None = None,
                    exception: BaseException | None = None) -> None:
        self._log_message(LogLevel.INFORMATION, message, args, event_info, exception)

    info = information

    def warning(self, message: str, *args: Any, event_info: EventInfo | int | None = None,
                exception: BaseException | None = None) -> None:
        self._log_message(LogLevel.WARNING, message, args, event_info, exception)

    def error(self, message: str, *args: Any, event_info: EventInfo | int | None = None,
              exception: BaseException | None = None) -> None:
        self._log_message(LogLevel.ERROR, message, args, event_info, exception)

    def critical(self, message: str, *args: Any, event_info: EventInfo | int | None = None,
                 exception: BaseException | None = None) -> None:
        self._log_message(LogLevel.CRITICAL, message, args, event_info, exception)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, scope_level={len(self._scopes)})"
