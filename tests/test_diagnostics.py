"""Tests for decode warnings."""

from __future__ import annotations

import pytest

from hudconf.foundation.application.diagnostics import FieldWarning, WarningKind, format_warnings
from hudconf.foundation.domain.exceptions import FieldDecodeError


@pytest.mark.unit
class TestFieldWarning:
    def test_unknown_key(self) -> None:
        warning = FieldWarning.unknown_key("foo_bar", "1")
        assert warning.kind is WarningKind.UNKNOWN_KEY
        assert warning.reason == "Unknown configuration key 'foo_bar'"

    def test_from_error(self) -> None:
        warning = FieldWarning.from_error(FieldDecodeError("alpha", "2", "too large"))
        assert warning == FieldWarning(WarningKind.DECODE_ERROR, "alpha", "2", "too large")
        assert str(warning) == "alpha: too large"


@pytest.mark.unit
class TestFormatWarnings:
    def test_none(self) -> None:
        assert format_warnings([]) == "Configuration warnings: none"

    def test_lines(self) -> None:
        text = format_warnings(
            [
                FieldWarning.unknown_key("foo_bar", "1"),
                FieldWarning.from_error(FieldDecodeError("alpha", "2", "too large")),
            ]
        )
        assert text.splitlines() == [
            "Configuration warnings (2):",
            "  * [unknown_key] foo_bar: Unknown configuration key 'foo_bar'",
            "  * [decode_error] alpha: too large",
        ]
