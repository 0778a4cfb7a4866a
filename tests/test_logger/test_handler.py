"""Tests for the stdlib logging bridge."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from output_logging.config import LoggingConfig
from output_logging.formatting.base import LogFormatter
from output_logging.logger.handler import OutputHandler
from output_logging.logger.provider import OutputLoggerProvider
from output_logging.sinks.buffered import BufferedOutput


@pytest.fixture
def std_logger() -> Iterator[logging.Logger]:
    """Return an isolated stdlib logger that does not propagate to root."""
    log = logging.getLogger(f"handler-test.{uuid.uuid4().hex}")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    yield log
    log.handlers.clear()


class TestOutputHandler:
    """Records from stdlib loggers end up in the output."""

    def test_none_provider_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            OutputHandler(None)  # type: ignore[arg-type]

    def test_forwards_record(self, std_logger: logging.Logger) -> None:
        output = BufferedOutput()
        std_logger.addHandler(OutputHandler(OutputLoggerProvider(output)))

        std_logger.warning("disk at %d%%", 91, extra={"event_id": 12})

        assert output.lines == ["Warning [12]: disk at 91%\r\n"]

    def test_maps_debug_level(self, std_logger: logging.Logger) -> None:
        output = BufferedOutput()
        std_logger.addHandler(OutputHandler(OutputLoggerProvider(output)))

        std_logger.debug("details")

        assert output.lines == ["Debug [0]: details\r\n"]

    def test_forwards_exception(self, std_logger: logging.Logger) -> None:
        output = BufferedOutput()
        std_logger.addHandler(OutputHandler(OutputLoggerProvider(output)))

        try:
            raise ZeroDivisionError("division by zero")
        except ZeroDivisionError:
            std_logger.exception("calculation failed")

        (line,) = output.lines
        assert line.startswith("Error [0]: calculation failed\r\n")
        assert "ZeroDivisionError: division by zero" in line

    def test_uses_logger_named_after_record(self, std_logger: logging.Logger) -> None:
        formatter = MagicMock(spec=LogFormatter)
        formatter.format.return_value = "line"
        config = LoggingConfig(_env_file=None, formatter=formatter)  # type: ignore[call-arg]
        std_logger.addHandler(OutputHandler(OutputLoggerProvider(BufferedOutput(), config)))

        std_logger.info("hello")

        assert formatter.format.call_args.args[1] == std_logger.name

    def test_ignores_package_internal_records(self) -> None:
        output = BufferedOutput()
        handler = OutputHandler(OutputLoggerProvider(output))
        record = logging.LogRecord("output_logging", logging.DEBUG, __file__, 1, "internal", (), None)

        handler.emit(record)

        assert output.lines == []

    def test_closed_output_with_ignore_policy_is_silent(
        self, std_logger: logging.Logger, ignoring_config: LoggingConfig
    ) -> None:
        output = BufferedOutput()
        output.close()
        std_logger.addHandler(OutputHandler(OutputLoggerProvider(output, ignoring_config)))

        std_logger.error("too late")

        assert output.lines == []

    def test_closed_output_without_policy_goes_to_handle_error(
        self, std_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        output = BufferedOutput()
        output.close()
        handler = OutputHandler(OutputLoggerProvider(output))
        failures: list[logging.LogRecord] = []
        monkeypatch.setattr(handler, "handleError", failures.append)
        std_logger.addHandler(handler)

        std_logger.error("too late")

        assert [r.getMessage() for r in failures] == ["too late"]
