"""Tests for the Color value object."""

from __future__ import annotations

import pytest

from hudconf.foundation.domain.colors import BLUE, DARK_RED, Color


@pytest.mark.unit
class TestColor:
    def test_from_hex(self) -> None:
        assert Color.from_hex("2e97cb") == Color(46, 151, 203)

    def test_from_hex_with_hash_prefix(self) -> None:
        assert Color.from_hex("#B22222") == DARK_RED

    def test_from_hex_strips_whitespace(self) -> None:
        assert Color.from_hex("  2E97CB ") == BLUE

    @pytest.mark.parametrize("text", ["", "fff", "2e97cb0", "zz97cb", "0x2e97cb"])
    def test_from_hex_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="expected 6 hex digits"):
            Color.from_hex(text)

    def test_hex_is_lowercase(self) -> None:
        assert Color(0xAD, 0x64, 0xC1).hex == "ad64c1"
        assert str(Color(0, 0, 0)) == "000000"

    def test_channel_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="Color channel 'g' out of range"):
            Color(0, 256, 0)

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            BLUE.r = 0  # type: ignore[misc]
