"""Tests for key chord parsing."""

from __future__ import annotations

import pytest

from hudconf.foundation.domain.chords import Chord


@pytest.mark.unit
class TestChordParse:
    def test_parse_plus_separated(self) -> None:
        chord = Chord.parse("Shift_L+F12")
        assert chord.keys == ("Shift_L", "F12")

    def test_parse_comma_separated(self) -> None:
        assert Chord.parse("Control_R, Alt_L, F5").keys == ("Control_R", "Alt_L", "F5")

    def test_left_and_right_modifiers_are_distinct(self) -> None:
        assert Chord.parse("Shift_L+F12") != Chord.parse("Shift_R+F12")

    def test_single_key(self) -> None:
        chord = Chord.parse("F10")
        assert chord.key == "F10"
        assert chord.modifiers == ()

    def test_modifiers_and_key(self) -> None:
        chord = Chord.parse("Shift_R+Control_L+F11")
        assert chord.modifiers == ("Shift_R", "Control_L")
        assert chord.key == "F11"

    def test_str_round_trip(self) -> None:
        assert str(Chord.parse("Shift_L , F2")) == "Shift_L+F2"

    def test_empty_text(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            Chord.parse("   ")

    def test_empty_token(self) -> None:
        with pytest.raises(ValueError, match="Invalid key name ''"):
            Chord.parse("Shift_L++F12")

    def test_invalid_key_name(self) -> None:
        with pytest.raises(ValueError, match="Invalid key name 'F-12'"):
            Chord.parse("Shift_L+F-12")

    def test_repeated_key(self) -> None:
        with pytest.raises(ValueError, match="repeats a key"):
            Chord.parse("F1+F1")

    def test_of(self) -> None:
        assert Chord.of("Shift_R", "F12") == Chord.parse("Shift_R+F12")
