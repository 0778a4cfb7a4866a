"""Abstract base class for all line formatters.

A formatter turns one log event into the exact text handed to the output
sink, line terminator included. Formatters are pure: no I/O, no state that
changes between calls. Any object with a compatible ``format`` method is
accepted by the logger; subclassing :class:`LogFormatter` is optional.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from output_logging.logger.types import EventInfo, LogLevel


class LogFormatter(ABC):
    """Abstract base for line formatters."""

    @abstractmethod
    def format(
        self,
        scope_level: int,
        logger_name: str,
        level: LogLevel,
        event_info: EventInfo,
        message: str,
        exception: BaseException | None,
    ) -> str:
        """Build the output line for a single event.

        Args:
            scope_level: Number of scopes active on the calling logger.
            logger_name: Name the logger was created with.
            level: Severity of the event.
            event_info: Identifier of the event.
            message: Message already rendered by the caller's render function.
            exception: Exception attached to the event, if any.

        Returns:
            The complete text to write, including any line terminator.
        """
