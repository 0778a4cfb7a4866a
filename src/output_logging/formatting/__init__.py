"""Line formatting for output-logging.

Re-exports the ABC, the registry and the built-in formatter::

    from output_logging.formatting import DEFAULT_FORMATTER, LogFormatter
"""

from output_logging.formatting.base import LogFormatter
from output_logging.formatting.default import (
    DEFAULT_FORMATTER,
    LINE_TERMINATOR,
    DefaultFormatter,
    format_exception_text,
    render_scope_state,
)
from output_logging.formatting.registry import (
    available_formatters,
    get_formatter,
    register_formatter,
)

__all__ = [
    "DEFAULT_FORMATTER",
    "LINE_TERMINATOR",
    "DefaultFormatter",
    "LogFormatter",
    "available_formatters",
    "format_exception_text",
    "get_formatter",
    "register_formatter",
    "render_scope_state",
]
