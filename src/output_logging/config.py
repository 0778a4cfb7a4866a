"""Configuration system for output-logging.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (OUTPUT_LOGGING_*) -> .env file -> field defaults.

Instances are frozen. Per-test overrides (the ``output_logging`` pytest
marker) are applied via resolve_config(), which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from output_logging.exceptions import ConfigValidationError
from output_logging.formatting.registry import get_formatter

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class LoggingConfig(BaseSettings):
    """Configuration for an output logger.

    Resolution order: init kwargs -> env vars (OUTPUT_LOGGING_*) -> .env file
    -> defaults.

    ``formatter`` holds a formatter object. A string is treated as the name
    of a registered formatter and replaced by its shared instance, which
    is how the formatter is chosen from the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="OUTPUT_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    formatter: Any = Field(
        default=None,
        description="Line formatter, or the registered name of one (None = built-in default)",
    )
    ignore_test_boundary_exception: bool = Field(
        default=False,
        description="Swallow writes to an output whose test has already finished",
    )

    @field_validator("formatter", mode="before")
    @classmethod
    def resolve_formatter(cls, value: Any) -> Any:
        """Turn a registered formatter name into an instance; check other values."""
        if value is None:
            return None
        if isinstance(value, str):
            if not value:
                return None
            try:
                return get_formatter(value)
            except KeyError as exc:
                raise ValueError(exc.args[0]) from exc
        if not callable(getattr(value, "format", None)):
            raise ValueError(
                f"formatter must provide a callable 'format' method, got {type(value).__name__}"
            )
        return value


_ALL_FIELDS = frozenset(LoggingConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Check that every override key names a config field.

    Args:
        overrides: Field name to value mapping.

    Raises:
        ConfigValidationError: If any key is not a known field.
    """
    unknown = sorted(key for key in overrides if key not in _ALL_FIELDS)
    if unknown:
        known = ", ".join(sorted(_ALL_FIELDS))
        raise ConfigValidationError(
            f"Unknown config field(s): {', '.join(unknown)} (known fields: {known})"
        )


def resolve_config(
    defaults: LoggingConfig,
    overrides: dict[str, Any] | None,
) -> LoggingConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration, usually loaded from the environment.
        overrides: Field values to replace, e.g. from a pytest marker.

    Returns:
        *defaults* itself when there is nothing to override, otherwise a new
        LoggingConfig.

    Raises:
        ConfigValidationError: If any override key is unknown.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_validate runs the field validators; model_copy(update=...) would
    # not resolve formatter names or coerce "true" to True. Attributes are
    # read directly: model_dump would turn a dataclass formatter into a dict.
    merged = {name: getattr(defaults, name) for name in _ALL_FIELDS}
    merged.update(overrides)
    return LoggingConfig.model_validate(merged)
