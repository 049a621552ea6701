"""Structured logging configuration using structlog.

This module provides environment-driven structured logging with:
- Console output with colors, or JSON lines for machine consumption
- Context variable merging for per-load context (source, reload id)
- Truncation of long raw configuration values in log events

Usage:
    # During application startup
    from hudconf.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from hudconf.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.warning("config_field_ignored", key="fps_value", reason="...")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

# Event fields that carry user-written configuration text
RAW_VALUE_FIELDS: frozenset[str] = frozenset({"raw_value", "value"})

TRUNCATION_MARKER: str = "..."


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Output format (console, json)

    Attributes:
        log_level: Minimum log level to output. Default: INFO
        log_format: Renderer selection. Default: console
        max_value_length: Raw values longer than this are truncated. Default: 120

    Example:
        >>> settings = LoggingSettings()
        >>> settings.use_json_logs
        False

        >>> settings = LoggingSettings(log_level="DEBUG", log_format="json")
        >>> settings.use_json_logs
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    log_format: str = Field(
        default="console",
        alias="LOG_FORMAT",
        description="Renderer: 'console' or 'json'",
    )
    max_value_length: int = Field(
        default=120,
        ge=8,
        alias="LOG_MAX_VALUE_LENGTH",
        description="Maximum logged length of raw configuration values",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            msg = f"log_level must be one of {valid_levels}"
            raise ValueError(msg)
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: Any) -> str:
        """Normalize and validate the output format.

        Raises:
            ValueError: If the format is neither console nor json.
        """
        value = str(v).lower()
        if value not in {"console", "json"}:
            msg = "log_format must be 'console' or 'json'"
            raise ValueError(msg)
        return value

    @property
    def use_json_logs(self) -> bool:
        """True when JSON lines should be emitted."""
        return self.log_format == "json"

    @property
    def log_level_int(self) -> int:
        """Convert log level string to logging module constant."""
        return getattr(logging, self.log_level, logging.INFO)


class RawValueTruncator:
    """Structlog processor that shortens long raw configuration values.

    Free-text fields (custom text, exec commands, format templates) can be
    arbitrarily long; only their prefix is useful in a log line.

    Example:
        >>> processor = RawValueTruncator(max_length=8)
        >>> processor(None, "warning", {"raw_value": "abcdefghijkl"})["raw_value"]
        'abcde...'
    """

    def __init__(self, max_length: int = 120) -> None:
        self._max_length = max_length

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        """Truncate raw value fields in event_dict.

        Args:
            logger: Logger instance (unused).
            method_name: Log method name (unused).
            event_dict: Dictionary of log context fields.

        Returns:
            Modified event_dict with long raw values truncated.
        """
        for key in event_dict.keys() & RAW_VALUE_FIELDS:
            value = event_dict[key]
            if isinstance(value, str) and len(value) > self._max_length:
                keep = self._max_length - len(TRUNCATION_MARKER)
                event_dict[key] = value[:keep] + TRUNCATION_MARKER
        return event_dict


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for structured logging.

    Configures structlog with:
    - Context variable merging
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Raw value truncation
    - Console or JSON rendering

    Should be called once during application startup, before the first
    configuration load.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        RawValueTruncator(settings.max_value_length),
        structlog.processors.format_exc_info,
    ]

    if settings.use_json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    The logger stays lazy until first use, so module-level loggers pick up
    the configuration applied later by ``configure_logging()``.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Returns:
        Lazy structlog logger with name context.
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(logger=name)
