"""Tests for LogLevel and EventInfo."""

from __future__ import annotations

import logging

import pytest

from output_logging.logger.types import EventInfo, LogLevel


class TestLogLevel:
    """String form and stdlib mapping."""

    @pytest.mark.parametrize(
        ("level", "text"),
        [
            (LogLevel.TRACE, "Trace"),
            (LogLevel.DEBUG, "Debug"),
            (LogLevel.INFORMATION, "Information"),
            (LogLevel.WARNING, "Warning"),
            (LogLevel.ERROR, "Error"),
            (LogLevel.CRITICAL, "Critical"),
            (LogLevel.NONE, "None"),
        ],
    )
    def test_str_is_level_name(self, level: LogLevel, text: str) -> None:
        assert str(level) == text
        assert f"{level}" == text

    def test_ordering(self) -> None:
        assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.CRITICAL < LogLevel.NONE

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.CRITICAL, LogLevel.CRITICAL),
            (logging.ERROR, LogLevel.ERROR),
            (logging.WARNING + 5, LogLevel.WARNING),
            (logging.INFO, LogLevel.INFORMATION),
            (logging.DEBUG, LogLevel.DEBUG),
            (5, LogLevel.TRACE),
            (logging.NOTSET, LogLevel.TRACE),
        ],
    )
    def test_from_stdlib(self, levelno: int, expected: LogLevel) -> None:
        assert LogLevel.from_stdlib(levelno) is expected

    @pytest.mark.parametrize("level", [lvl for lvl in LogLevel if lvl is not LogLevel.NONE])
    def test_stdlib_round_trip(self, level: LogLevel) -> None:
        assert LogLevel.from_stdlib(level.to_stdlib()) is level

    def test_none_maps_above_critical(self) -> None:
        assert LogLevel.NONE.to_stdlib() > logging.CRITICAL


class TestEventInfo:
    """EventInfo value semantics."""

    def test_defaults(self) -> None:
        info = EventInfo()
        assert info.id == 0
        assert info.name is None

    def test_frozen(self) -> None:
        info = EventInfo(1, "start")
        with pytest.raises(AttributeError):
            info.id = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert EventInfo(3, "x") == EventInfo(3, "x")
        assert EventInfo(3, "x") != EventInfo(3, "y")

    def test_coerce(self) -> None:
        info = EventInfo(9)
        assert EventInfo.coerce(info) is info
        assert EventInfo.coerce(4) == EventInfo(4)
        assert EventInfo.coerce(None) == EventInfo()
