"""pytest integration for output-logging.

Registered via entry point::

    [project.entry-points.pytest11]
    output_logging = "output_logging.plugin"

Each test that asks for one of the fixtures below gets its own
:class:`BufferedOutput`. Lines written to it are attached to the test report
as a ``Captured output logging`` section, and the output is closed when the
test tears down, so a thread that logs after the test finished gets
SinkUnavailableError (or is silently dropped when the config ignores test
boundary failures).

Per-test config overrides use the marker::

    @pytest.mark.output_logging(ignore_test_boundary_exception=True)
    def test_background_worker(output_logger): ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from output_logging.config import LoggingConfig, resolve_config
from output_logging.logger.handler import OutputHandler
from output_logging.logger.provider import OutputLoggerProvider
from output_logging.sinks.buffered import BufferedOutput

if TYPE_CHECKING:
    from collections.abc import Generator

    from output_logging.logger.logger import OutputLogger

_MARKER = "output_logging"
_SECTION = "Captured output logging"

_output_key = pytest.StashKey[BufferedOutput]()
_reported_key = pytest.StashKey[int]()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{_MARKER}(**overrides): override LoggingConfig fields for this test",
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]) -> Generator[None, None, None]:
    outcome = yield
    output = item.stash.get(_output_key, None)
    if output is None:
        return
    # Each phase reports only the lines written since the previous phase.
    lines = output.lines
    already = item.stash.get(_reported_key, 0)
    item.stash[_reported_key] = len(lines)
    text = "".join(lines[already:])
    if text:
        report = outcome.get_result()
        report.sections.append((f"{_SECTION} ({call.when})", text.replace("\r\n", "\n")))


@pytest.fixture
def test_output(request: pytest.FixtureRequest) -> Generator[BufferedOutput, None, None]:
    """Output sink owned by the current test; closed at teardown."""
    output = BufferedOutput(owner=request.node.nodeid)
    request.node.stash[_output_key] = output
    yield output
    output.close()


@pytest.fixture
def logging_config(request: pytest.FixtureRequest) -> LoggingConfig:
    """LoggingConfig from the environment plus ``output_logging`` marker overrides."""
    config = LoggingConfig()
    for marker in reversed(list(request.node.iter_markers(_MARKER))):
        config = resolve_config(config, marker.kwargs)
    return config


@pytest.fixture
def logger_provider(
    test_output: BufferedOutput, logging_config: LoggingConfig
) -> Generator[OutputLoggerProvider, None, None]:
    """Provider creating loggers over the current test's output."""
    with OutputLoggerProvider(test_output, logging_config) as provider:
        yield provider


@pytest.fixture
def output_logger(logger_provider: OutputLoggerProvider, request: pytest.FixtureRequest) -> OutputLogger:
    """Logger named after the current test."""
    return logger_provider.create_logger(request.node.name)


@pytest.fixture
def output_log_handler(logger_provider: OutputLoggerProvider) -> Generator[OutputHandler, None, None]:
    """Route stdlib ``logging`` records into the current test's output.

    The handler is attached to the root logger for the duration of the test.
    Logger levels are left untouched.
    """
    handler = OutputHandler(logger_provider)
    root = logging.getLogger()
    root.addHandler(handler)
    try:
        yield handler
    finally:
        root.removeHandler(handler)
