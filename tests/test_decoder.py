"""Tests for decoding raw pairs into a configuration snapshot."""

from __future__ import annotations

from datetime import timedelta

import pytest

from hudconf.foundation.application import DecodePolicy, WarningKind, decode
from hudconf.foundation.domain import HudPosition, OrderableParam, OverlayConfig, VSync
from hudconf.foundation.domain.exceptions import EmptySectionError, FieldDecodeError


class TestDecodeBasics:
    @pytest.mark.unit
    def test_absent_keys_keep_defaults(self) -> None:
        snapshot = decode([("vram", None)])
        expected = OverlayConfig().model_dump()
        expected["vram"] = True
        assert snapshot.config.model_dump() == expected

    @pytest.mark.unit
    def test_bare_flag_enables(self) -> None:
        assert decode([("vram", None)]).config.vram is True

    @pytest.mark.unit
    def test_zero_disables(self) -> None:
        assert decode([("fps", "0")]).config.fps is False

    @pytest.mark.unit
    def test_pair_field(self) -> None:
        assert decode([("fps_value", "30,60")]).config.fps_value == (30, 60)

    @pytest.mark.unit
    def test_pair_arity_failure_keeps_default(self) -> None:
        snapshot = decode([("fps_value", "30"), ("vram", None)])
        assert snapshot.config.fps_value == (30, 60)
        assert len(snapshot.warnings) == 1
        warning = snapshot.warnings[0]
        assert warning.kind is WarningKind.DECODE_ERROR
        assert warning.key == "fps_value"
        assert warning.raw_value == "30"

    @pytest.mark.unit
    def test_chord_field(self) -> None:
        config = decode([("toggle_hud", "Shift_L+F12")]).config
        assert config.toggle_hud.keys == ("Shift_L", "F12")

    @pytest.mark.unit
    def test_duration_units(self) -> None:
        config = decode([("log_interval", "500"), ("log_duration", "60")]).config
        assert config.log_interval == timedelta(milliseconds=500)
        assert config.log_duration == timedelta(seconds=60)

    @pytest.mark.unit
    def test_vsync_unset_until_present(self) -> None:
        assert decode([("fps", None)]).config.vsync is None
        assert decode([("vsync", "1")]).config.vsync is VSync.OFF

    @pytest.mark.unit
    def test_last_occurrence_wins(self) -> None:
        snapshot = decode([("position", "top-right"), ("position", "bottom-left")])
        assert snapshot.config.position is HudPosition.BOTTOM_LEFT

    @pytest.mark.unit
    def test_failed_repeat_keeps_earlier_value(self) -> None:
        snapshot = decode([("position", "top-right"), ("position", "nowhere")])
        assert snapshot.config.position is HudPosition.TOP_RIGHT

    @pytest.mark.unit
    def test_base_not_mutated(self) -> None:
        base = OverlayConfig()
        snapshot = decode([("vram", None)], base=base)
        assert base.vram is False
        assert snapshot.config is not base

    @pytest.mark.unit
    def test_decodes_on_top_of_base(self) -> None:
        base = OverlayConfig(ram=True)
        assert decode([("vram", None)], base=base).config.ram is True

    @pytest.mark.unit
    def test_source_recorded(self) -> None:
        assert decode([("vram", None)], source="MangoHud.conf").source == "MangoHud.conf"


class TestUnknownKeys:
    @pytest.mark.unit
    def test_unknown_key_warning(self) -> None:
        snapshot = decode([("foo_bar", "1"), ("fps", None)])
        assert len(snapshot.warnings) == 1
        warning = snapshot.warnings[0]
        assert warning.kind is WarningKind.UNKNOWN_KEY
        assert warning.key == "foo_bar"
        assert snapshot.config == OverlayConfig()

    @pytest.mark.unit
    def test_keys_are_case_sensitive(self) -> None:
        snapshot = decode([("VRAM", None), ("fps", None)])
        assert snapshot.config.vram is False
        assert snapshot.warnings[0].kind is WarningKind.UNKNOWN_KEY

    @pytest.mark.unit
    def test_unknown_key_not_fatal_under_strict(self) -> None:
        snapshot = decode([("foo_bar", "1"), ("fps", None)], policy=DecodePolicy.STRICT)
        assert snapshot.warnings[0].key == "foo_bar"


class TestEmptyInput:
    @pytest.mark.unit
    def test_no_pairs(self) -> None:
        with pytest.raises(EmptySectionError):
            decode([])

    @pytest.mark.unit
    def test_only_unknown_keys(self) -> None:
        with pytest.raises(EmptySectionError) as exc_info:
            decode([("foo", "1"), ("bar", None)], source="x.conf")
        assert exc_info.value.source == "x.conf"
        assert exc_info.value.context["pairs_seen"] == 2

    @pytest.mark.unit
    def test_reports_section_read(self) -> None:
        with pytest.raises(EmptySectionError) as exc_info:
            decode([("foo", "1")], source="x.conf", section="wine")
        assert exc_info.value.section == "wine"
        assert "section 'wine'" in exc_info.value.message

    @pytest.mark.unit
    def test_recognised_but_invalid_is_not_empty(self) -> None:
        snapshot = decode([("alpha", "2")])
        assert snapshot.config.alpha == 1.0
        assert snapshot.warnings[0].kind is WarningKind.DECODE_ERROR


class TestStrictPolicy:
    @pytest.mark.unit
    def test_first_failure_raises(self) -> None:
        with pytest.raises(FieldDecodeError) as exc_info:
            decode([("fps_value", "30"), ("alpha", "2")], policy=DecodePolicy.STRICT)
        assert exc_info.value.field == "fps_value"

    @pytest.mark.unit
    def test_valid_input_decodes(self) -> None:
        snapshot = decode([("fps_value", "20,40")], policy=DecodePolicy.STRICT)
        assert snapshot.config.fps_value == (20, 40)
        assert snapshot.warnings == ()


class TestOrdering:
    @pytest.mark.unit
    def test_captured_order(self) -> None:
        snapshot = decode(
            [("legacy_layout", "0"), ("version", None), ("fps", None), ("time", None)],
        )
        assert snapshot.layout_order == (
            OrderableParam.VERSION,
            OrderableParam.FPS,
            OrderableParam.TIME,
        )
        assert snapshot.display_order() == (
            OrderableParam.VERSION,
            OrderableParam.FPS,
            OrderableParam.TIME,
        )

    @pytest.mark.unit
    def test_legacy_layout_ignores_captured_order(self) -> None:
        snapshot = decode([("version", None), ("fps", None), ("time", None)])
        assert snapshot.display_order() == (
            OrderableParam.TIME,
            OrderableParam.VERSION,
            OrderableParam.FPS,
        )

    @pytest.mark.unit
    def test_disable_removes_and_reenable_appends(self) -> None:
        snapshot = decode(
            [
                ("legacy_layout", "0"),
                ("fps", None),
                ("time", None),
                ("fps", "0"),
                ("version", None),
                ("fps", "1"),
            ],
        )
        assert snapshot.layout_order == (
            OrderableParam.TIME,
            OrderableParam.VERSION,
            OrderableParam.FPS,
        )

    @pytest.mark.unit
    def test_disabled_field_not_displayed(self) -> None:
        snapshot = decode([("legacy_layout", "0"), ("time", None), ("fps", "0")])
        assert snapshot.display_order() == (OrderableParam.TIME,)
