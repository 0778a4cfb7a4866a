"""In-memory sink bound to the lifetime of one test."""

from __future__ import annotations

import threading

from output_logging.exceptions import SinkUnavailableError
from output_logging.sinks.base import OutputSink


class BufferedOutput(OutputSink):
    """Collects lines in memory until closed.

    Writes and ``close()`` are serialised with a lock, so a background
    thread that logs while the test is being torn down either lands its line
    before the close or gets :class:`SinkUnavailableError`.

    Args:
        owner: Label for the test this output belongs to, used in errors.
    """

    def __init__(self, owner: str = "") -> None:
        self._owner = owner
        self._lines: list[str] = []
        self._closed = False
        self._lock = threading.Lock()

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def lines(self) -> list[str]:
        """Snapshot of the lines written so far."""
        with self._lock:
            return list(self._lines)

    def write_line(self, line: str) -> None:
        with self._lock:
            if self._closed:
                raise SinkUnavailableError(
                    f"Output for {self._owner or 'this test'} is closed; "
                    "the test has already finished"
                )
            self._lines.append(line)

    def getvalue(self) -> str:
        """Return everything written so far as one string."""
        with self._lock:
            return "".join(self._lines)

    def close(self) -> None:
        """Stop accepting writes. Closing twice is a no-op."""
        with self._lock:
            self._closed = True
