"""Output sinks: where formatted log lines are written."""

from output_logging.sinks.base import OutputSink
from output_logging.sinks.buffered import BufferedOutput

__all__ = ["BufferedOutput", "OutputSink"]
