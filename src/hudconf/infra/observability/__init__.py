"""hudconf Infra Observability -- structlog logging for configuration loads."""

from __future__ import annotations

from hudconf.infra.observability.logging import (
    LoggingSettings,
    RawValueTruncator,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "LoggingSettings",
    "RawValueTruncator",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]
