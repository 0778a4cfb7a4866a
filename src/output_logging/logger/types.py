"""Value types shared by the logger and the formatters."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

# stdlib has no TRACE level; use the customary value below DEBUG.
_TRACE_LEVELNO = 5

_TO_STDLIB: dict[int, int] = {}


class LogLevel(enum.IntEnum):
    """Severity of a log event, lowest to highest.

    ``NONE`` sorts above every real severity. Its string form, like every
    member's, is the capitalised level name (``"Error"``, ``"None"``), which
    is what the default formatter writes.
    """

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def to_stdlib(self) -> int:
        """Return the matching :mod:`logging` level number."""
        return _TO_STDLIB[self]

    @classmethod
    def from_stdlib(cls, levelno: int) -> LogLevel:
        """Map a :mod:`logging` level number onto the nearest level at or below it."""
        if levelno >= logging.CRITICAL:
            return cls.CRITICAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFORMATION
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


_TO_STDLIB.update(
    {
        LogLevel.TRACE: _TRACE_LEVELNO,
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFORMATION: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
        # Nothing is ever emitted at NONE; keep it above CRITICAL.
        LogLevel.NONE: logging.CRITICAL + 10,
    }
)


@dataclass(frozen=True, slots=True)
class EventInfo:
    """Identifies a class of log event.

    Attributes:
        id: Numeric event identifier, written between brackets by the
            default formatter.
        name: Optional symbolic name for the event.
    """

    id: int = 0
    name: str | None = None

    @classmethod
    def coerce(cls, value: EventInfo | int | None) -> EventInfo:
        """Accept an EventInfo, a bare integer id, or ``None``."""
        if value is None:
            return cls()
        if isinstance(value, EventInfo):
            return value
        return cls(int(value))
