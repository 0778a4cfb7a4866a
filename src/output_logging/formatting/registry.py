"""Named formatter instances.

Formatters are stateless, so the registry holds one shared instance per
name rather than classes: looking up ``"default"`` yields the process-wide
``DEFAULT_FORMATTER`` itself. Formatters from other packages are published
under the ``output_logging.formatters`` entry-point group, pointing either at
a formatter instance or at a class that can be built without arguments::

    [project.entry-points."output_logging.formatters"]
    terse = "my_package.formatting:TerseFormatter"

They are read once, on the first lookup of a name that is not registered,
and are what lets ``OUTPUT_LOGGING_FORMATTER=terse`` select a formatter.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Any

logger = logging.getLogger("output_logging")

_ENTRY_POINT_GROUP = "output_logging.formatters"

_formatters: dict[str, Any] = {}
_entry_points_read = False


def _as_formatter(name: str, candidate: Any) -> Any:
    formatter = candidate() if isinstance(candidate, type) else candidate
    if not callable(getattr(formatter, "format", None)):
        raise TypeError(
            f"Formatter {name!r} must provide a callable 'format' method, "
            f"got {type(formatter).__name__}"
        )
    return formatter


def register_formatter(name: str, formatter: Any) -> Any:
    """Publish *formatter* under *name*, replacing any earlier registration.

    Args:
        name: Lookup key, e.g. the value of ``OUTPUT_LOGGING_FORMATTER``.
        formatter: A formatter instance, or a class built once here.

    Returns:
        The registered instance.

    Raises:
        TypeError: If the formatter has no callable ``format`` method.
    """
    instance = _as_formatter(name, formatter)
    _formatters[name] = instance
    return instance


def _read_entry_points() -> None:
    global _entry_points_read
    _entry_points_read = True
    for ep in importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP):
        # In-process registrations win over installed plugins.
        if ep.name in _formatters:
            continue
        try:
            _formatters[ep.name] = _as_formatter(ep.name, ep.load())
        except Exception:  # Intentional: a broken plugin only loses its own name
            logger.warning("Skipping formatter entry point %r (%s)", ep.name, ep.value, exc_info=True)


def get_formatter(name: str) -> Any:
    """Return the shared formatter registered as *name*.

    Raises:
        KeyError: If no formatter, built in or installed, has that name.
    """
    if name not in _formatters and not _entry_points_read:
        _read_entry_points()
    try:
        return _formatters[name]
    except KeyError:
        known = ", ".join(sorted(_formatters)) or "(none)"
        raise KeyError(f"Unknown formatter: {name!r}. Available: {known}") from None


def available_formatters() -> list[str]:
    """Return every registered and installed formatter name, sorted."""
    if not _entry_points_read:
        _read_entry_points()
    return sorted(_formatters)
