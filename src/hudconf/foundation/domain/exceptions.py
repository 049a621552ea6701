"""Configuration error hierarchy.

Every error raised while loading an overlay configuration derives from
``ConfigError``. Errors carry a machine-readable ``error_code`` and a
structured ``context`` so the consuming application can log them
consistently.

Only ``SourceUnavailableError`` and ``EmptySectionError`` stop a load.
``FieldDecodeError`` is raised per field and, in lenient mode, is turned
into a warning by the decoder while the field keeps its default.

Example:
    >>> from hudconf.foundation.domain.exceptions import FieldDecodeError
    >>> raise FieldDecodeError("fps_value", "30", "expected 2 values, got 1")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigError",
    "EmptySectionError",
    "FieldDecodeError",
    "SourceUnavailableError",
]


class ConfigError(Exception):
    """Base class for all configuration errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (source, field names).
    """

    error_code: str = "CONFIG_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize configuration error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class SourceUnavailableError(ConfigError):
    """Raised when the backing file or environment cannot be read at all.

    Fatal: no configuration is produced.

    Attributes:
        error_code: "SOURCE_UNAVAILABLE" (class constant).
        source: Description of the source (file path or variable name).
        reason: Why the source could not be read.

    Example:
        >>> raise SourceUnavailableError("/etc/MangoHud.conf", "Permission denied")
        SourceUnavailableError: Configuration source unavailable: /etc/MangoHud.conf
    """

    error_code: str = "SOURCE_UNAVAILABLE"

    def __init__(self, source: str, reason: str, **extra_context: Any) -> None:
        self.source = source
        self.reason = reason
        message = f"Configuration source unavailable: {source}"
        context = {"source": source, "reason": reason, **extra_context}
        super().__init__(message, context)


class EmptySectionError(ConfigError):
    """Raised when the expected section is missing or holds no usable keys.

    Usually means the wrong file or section was read. Fatal: no
    configuration is produced.

    Attributes:
        error_code: "EMPTY_SECTION" (class constant).
        source: Description of the source that was read.
        section: Name of the section that was expected.
    """

    error_code: str = "EMPTY_SECTION"

    def __init__(self, source: str, section: str = "default", **extra_context: Any) -> None:
        self.source = source
        self.section = section
        message = f"No configuration keys in section '{section}' of {source}"
        context = {"source": source, "section": section, **extra_context}
        super().__init__(message, context)


class FieldDecodeError(ConfigError):
    """Raised when a single field's raw value does not match its grammar.

    Attributes:
        error_code: "FIELD_DECODE_ERROR" (class constant).
        field: Name of the configuration field.
        raw_value: The raw textual value (``None`` for a bare key).
        reason: Human-readable decode failure reason.

    Example:
        >>> raise FieldDecodeError("alpha", "1.5", "Input should be less than or equal to 1")
        FieldDecodeError: Cannot decode 'alpha': Input should be less than or equal to 1
    """

    error_code: str = "FIELD_DECODE_ERROR"

    def __init__(
        self,
        field: str,
        raw_value: str | None,
        reason: str,
        **extra_context: Any,
    ) -> None:
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        message = f"Cannot decode '{field}': {reason}"
        context = {"field": field, "raw_value": raw_value, "reason": reason, **extra_context}
        super().__init__(message, context)
