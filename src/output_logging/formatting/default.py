"""Built-in line formatter.

Produces ``<scopes><Level> [<EventId>]: <Message>\\r\\n``. When an exception
is attached, its full traceback text follows the message on its own line,
before the terminator.

Scope states are rendered lazily and shallowly: a scope may hold any object,
including self-referencing structures or objects whose ``__str__`` recurses,
so rendering never descends more than one level and never raises.
"""

from __future__ import annotations

import reprlib
import traceback
from collections.abc import Iterable
from typing import TYPE_CHECKING

from output_logging.formatting.base import LogFormatter
from output_logging.formatting.registry import register_formatter

if TYPE_CHECKING:
    from output_logging.logger.types import EventInfo, LogLevel

LINE_TERMINATOR = "\r\n"

_CONTAINER_TYPES = (list, tuple, set, frozenset, dict)


def _shallow_repr() -> reprlib.Repr:
    shallow = reprlib.Repr()
    shallow.maxlevel = 1
    shallow.maxstring = 80
    shallow.maxother = 80
    return shallow


_SHALLOW = _shallow_repr()


def render_scope_state(state: object) -> str:
    """Return a best-effort, single-level text form of a scope state.

    Args:
        state: Whatever was passed to ``begin_scope``.

    Returns:
        ``str(state)`` for scalars, a depth-limited ``reprlib`` rendering for
        built-in containers, the object's own ``str`` when its class defines
        one, and otherwise the class's qualified name.
    """
    if isinstance(state, _CONTAINER_TYPES):
        return _SHALLOW.repr(state)

    cls = type(state)
    if cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__:
        return cls.__qualname__
    try:
        return str(state)
    except Exception:  # Intentional: user __str__ may recurse or fail
        return cls.__qualname__


def format_exception_text(exception: BaseException) -> str:
    """Return the full text of *exception*: traceback, type and message."""
    lines = traceback.format_exception(type(exception), exception, exception.__traceback__)
    return "".join(lines).rstrip("\n")


class DefaultFormatter(LogFormatter):
    """Stateless formatter used whenever no formatter is configured."""

    def format(
        self,
        scope_level: int,
        logger_name: str,
        level: LogLevel,
        event_info: EventInfo,
        message: str,
        exception: BaseException | None,
        *,
        scopes: Iterable[object] = (),
    ) -> str:
        """Format one event.

        Args:
            scope_level: Number of active scopes (informational only; the
                prefix is built from *scopes*).
            logger_name: Unused by this formatter.
            level: Severity, written by name.
            event_info: Its numeric ``id`` is written between brackets.
            message: Rendered message.
            exception: Optional exception whose full text is appended.
            scopes: Active scope states, outermost first.

        Returns:
            The line, terminated with ``\\r\\n``.
        """
        prefix = "".join(f"{render_scope_state(state)} " for state in scopes)
        line = f"{prefix}{level!s} [{event_info.id}]: {message}"
        if exception is not None:
            line += LINE_TERMINATOR + format_exception_text(exception)
        return line + LINE_TERMINATOR


# Process-wide immutable instance used when the config sets no formatter.
DEFAULT_FORMATTER = register_formatter("default", DefaultFormatter())
