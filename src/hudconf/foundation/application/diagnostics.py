"""Non-fatal findings collected while decoding a configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from hudconf.foundation.domain.exceptions import FieldDecodeError


class WarningKind(StrEnum):
    """Why a raw pair did not change the configuration."""

    UNKNOWN_KEY = "unknown_key"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True, slots=True)
class FieldWarning:
    """A raw pair that was ignored.

    Attributes:
        kind: Unknown key or failed decode.
        key: The key as written in the input.
        raw_value: The raw value (``None`` for a bare key).
        reason: Human-readable explanation.
    """

    kind: WarningKind
    key: str
    raw_value: str | None
    reason: str

    @classmethod
    def unknown_key(cls, key: str, raw_value: str | None) -> FieldWarning:
        return cls(WarningKind.UNKNOWN_KEY, key, raw_value, f"Unknown configuration key '{key}'")

    @classmethod
    def from_error(cls, error: FieldDecodeError) -> FieldWarning:
        return cls(WarningKind.DECODE_ERROR, error.field, error.raw_value, error.reason)

    def __str__(self) -> str:
        return f"{self.key}: {self.reason}"


def format_warnings(warnings: Iterable[FieldWarning]) -> str:
    """Render warnings as a human-readable block, one line per warning.

    Example:
        >>> print(format_warnings([FieldWarning.unknown_key("foo_bar", "1")]))
        Configuration warnings (1):
          * [unknown_key] foo_bar: Unknown configuration key 'foo_bar'
    """
    items = list(warnings)
    if not items:
        return "Configuration warnings: none"
    lines = [f"Configuration warnings ({len(items)}):"]
    lines.extend(f"  * [{item.kind}] {item}" for item in items)
    return "\n".join(lines)
