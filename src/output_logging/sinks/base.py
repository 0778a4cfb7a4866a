"""Abstract base class for output sinks.

A sink is the per-test output channel a logger writes to: one call to
``write_line`` per formatted event. Once the owning test has finished, a sink
raises :class:`~output_logging.exceptions.SinkUnavailableError` instead of
writing. Any object with a ``write_line`` method can be used as a sink;
subclassing :class:`OutputSink` is optional.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Abstract base for output sinks."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one formatted line.

        Args:
            line: Text produced by a formatter, terminator included.

        Raises:
            SinkUnavailableError: If the test owning this sink has finished.
        """
