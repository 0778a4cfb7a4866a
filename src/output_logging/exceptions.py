"""Exception hierarchy for output-logging.

All exceptions derive from OutputLoggingError, enabling broad catch patterns
at the test-harness boundary while allowing fine-grained handling internally.
Argument validation at construction time uses the builtin ``ValueError`` and
``TypeError`` instead.
"""


class OutputLoggingError(Exception):
    """Base exception for all output-logging errors."""


class SinkUnavailableError(OutputLoggingError):
    """The destination for this output is no longer available.

    Raised by an output sink when the test that owns it has already finished,
    typically because a background thread or task logged after teardown.
    This is the only error the ``ignore_test_boundary_exception`` policy
    suppresses.
    """


class ConfigValidationError(OutputLoggingError):
    """Configuration override validation failed.

    Raised when per-test overrides name unknown configuration fields.
    """


class ProviderClosedError(OutputLoggingError):
    """A logger provider was asked for a logger after it was closed."""
