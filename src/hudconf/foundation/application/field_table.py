"""Declarative field table: one decoding rule per configuration field.

``RULES`` maps every ``OverlayConfig`` field name to a ``FieldRule``
describing the textual encoding of that field (its category, the parser for
its scalar elements and, for durations, the unit). ``build_field_table()``
joins the rules with the model's defaults and range constraints into
``FieldSpec`` entries. It fails if a field has no rule or a rule has no
field, so the schema cannot drift from the table.

Category grammars:

- flag: ``"0"`` is False, any other payload or a bare key is True.
- scalar / optional: strict decimal.
- pair / color triple / list: tokens separated by ``,`` or ``+``.
- ordinal enum: decimal ordinal or kebab name; named enum: kebab name only.
- duration: non-negative integer in the field's unit.
- chord, color, path, text: see the value objects in the domain package.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from hudconf.foundation.domain.chords import Chord
from hudconf.foundation.domain.colors import Color
from hudconf.foundation.domain.enums import (
    FcatOverlayEdge,
    FpsLimitMethod,
    HudPosition,
    HudPreset,
    VSync,
)
from hudconf.foundation.domain.exceptions import FieldDecodeError
from hudconf.foundation.domain.overlay_config import OverlayConfig

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_LIST_SEPARATOR = re.compile(r"[,+]")


class FieldCategory(StrEnum):
    """Textual encoding families."""

    FLAG = "flag"
    SCALAR = "scalar"
    OPTIONAL = "optional"
    PAIR = "pair"
    COLOR_TRIPLE = "color_triple"
    LIST = "list"
    ORDINAL_ENUM = "ordinal_enum"
    NAMED_ENUM = "named_enum"
    DURATION = "duration"
    CHORD = "chord"
    COLOR = "color"
    PATH = "path"
    TEXT = "text"


class DurationUnit(StrEnum):
    """Unit a duration field is written in. Not uniform across fields."""

    NANOSECONDS = "ns"
    MILLISECONDS = "ms"
    SECONDS = "s"

    def to_timedelta(self, amount: int) -> timedelta:
        """Convert an integer amount in this unit.

        ``timedelta`` resolution is one microsecond, so nanosecond amounts
        are truncated to whole microseconds.
        """
        if self is DurationUnit.NANOSECONDS:
            return timedelta(microseconds=amount // 1000)
        if self is DurationUnit.MILLISECONDS:
            return timedelta(milliseconds=amount)
        return timedelta(seconds=amount)


def parse_int(token: str) -> int:
    """Parse a strict decimal integer (no underscores, no blanks)."""
    text = token.strip()
    if not _INT_PATTERN.match(text):
        msg = f"Invalid integer '{token}'"
        raise ValueError(msg)
    return int(text)


def parse_float(token: str) -> float:
    """Parse a strict finite decimal number. ``nan``, ``inf`` and overflow are rejected."""
    text = token.strip()
    if not _FLOAT_PATTERN.match(text):
        msg = f"Invalid number '{token}'"
        raise ValueError(msg)
    value = float(text)
    if not math.isfinite(value):
        msg = f"Number out of range '{token}'"
        raise ValueError(msg)
    return value


def parse_token(token: str) -> str:
    """Parse a non-empty list item."""
    text = token.strip()
    if not text:
        msg = "Empty list item"
        raise ValueError(msg)
    return text


@dataclass(frozen=True, slots=True)
class FieldRule:
    """How one field is written in configuration text.

    Attributes:
        category: Encoding family.
        element: Parser for scalar elements (scalar, optional, pair, list
            and enum categories).
        unit: Unit of a duration field.
    """

    category: FieldCategory
    element: Callable[[str], Any] | None = None
    unit: DurationUnit | None = None

    def apply(self, raw: str | None) -> Any:
        """Turn a raw value into a Python value of the field's shape.

        Raises:
            ValueError: If the raw value does not match the category grammar.
        """
        return _DECODERS[self.category](self, raw)


def _require(raw: str | None) -> str:
    if raw is None:
        msg = "A value is required"
        raise ValueError(msg)
    return raw


def _split(raw: str) -> list[str]:
    if not raw.strip():
        return []
    return _LIST_SEPARATOR.split(raw)


def _fixed(raw: str | None, arity: int, parse: Callable[[str], Any]) -> tuple[Any, ...]:
    tokens = _split(_require(raw))
    if len(tokens) != arity:
        msg = f"Expected exactly {arity} values, got {len(tokens)}"
        raise ValueError(msg)
    return tuple(parse(token) for token in tokens)


def _decode_flag(rule: FieldRule, raw: str | None) -> bool:
    return raw is None or raw.strip() != "0"


def _decode_element(rule: FieldRule, raw: str | None) -> Any:
    assert rule.element is not None
    return rule.element(_require(raw))


def _decode_pair(rule: FieldRule, raw: str | None) -> tuple[Any, ...]:
    assert rule.element is not None
    return _fixed(raw, 2, rule.element)


def _decode_color_triple(rule: FieldRule, raw: str | None) -> tuple[Any, ...]:
    return _fixed(raw, 3, Color.from_hex)


def _decode_list(rule: FieldRule, raw: str | None) -> tuple[Any, ...]:
    assert rule.element is not None
    return tuple(rule.element(token) for token in _split(_require(raw)))


def _decode_duration(rule: FieldRule, raw: str | None) -> timedelta:
    assert rule.unit is not None
    amount = parse_int(_require(raw))
    if amount < 0:
        msg = f"Duration cannot be negative: {amount}"
        raise ValueError(msg)
    return rule.unit.to_timedelta(amount)


def _decode_chord(rule: FieldRule, raw: str | None) -> Chord:
    return Chord.parse(_require(raw))


def _decode_color(rule: FieldRule, raw: str | None) -> Color:
    return Color.from_hex(_require(raw))


def _decode_path(rule: FieldRule, raw: str | None) -> Path | None:
    text = _require(raw)
    return Path(text) if text else None


def _decode_text(rule: FieldRule, raw: str | None) -> str:
    return _require(raw)


_DECODERS: dict[FieldCategory, Callable[[FieldRule, str | None], Any]] = {
    FieldCategory.FLAG: _decode_flag,
    FieldCategory.SCALAR: _decode_element,
    FieldCategory.OPTIONAL: _decode_element,
    FieldCategory.PAIR: _decode_pair,
    FieldCategory.COLOR_TRIPLE: _decode_color_triple,
    FieldCategory.LIST: _decode_list,
    FieldCategory.ORDINAL_ENUM: _decode_element,
    FieldCategory.NAMED_ENUM: _decode_element,
    FieldCategory.DURATION: _decode_duration,
    FieldCategory.CHORD: _decode_chord,
    FieldCategory.COLOR: _decode_color,
    FieldCategory.PATH: _decode_path,
    FieldCategory.TEXT: _decode_text,
}


# Rule constructors


def flag() -> FieldRule:
    return FieldRule(FieldCategory.FLAG)


def integer() -> FieldRule:
    return FieldRule(FieldCategory.SCALAR, parse_int)


def number() -> FieldRule:
    return FieldRule(FieldCategory.SCALAR, parse_float)


def optional(element: Callable[[str], Any]) -> FieldRule:
    return FieldRule(FieldCategory.OPTIONAL, element)


def pair(element: Callable[[str], Any]) -> FieldRule:
    return FieldRule(FieldCategory.PAIR, element)


def color_triple() -> FieldRule:
    return FieldRule(FieldCategory.COLOR_TRIPLE)


def list_of(element: Callable[[str], Any]) -> FieldRule:
    return FieldRule(FieldCategory.LIST, element)


def ordinal_enum(enum_cls: type[Any]) -> FieldRule:
    return FieldRule(FieldCategory.ORDINAL_ENUM, enum_cls.parse)


def named_enum(enum_cls: type[Any]) -> FieldRule:
    return FieldRule(FieldCategory.NAMED_ENUM, enum_cls.parse)


def duration(unit: DurationUnit) -> FieldRule:
    return FieldRule(FieldCategory.DURATION, unit=unit)


def chord() -> FieldRule:
    return FieldRule(FieldCategory.CHORD)


def color() -> FieldRule:
    return FieldRule(FieldCategory.COLOR)


def path() -> FieldRule:
    return FieldRule(FieldCategory.PATH)


def text() -> FieldRule:
    return FieldRule(FieldCategory.TEXT)


RULES: Mapping[str, FieldRule] = {
    # Performance
    "fps_limit": list_of(parse_int),
    "fps_limit_method": named_enum(FpsLimitMethod),
    "vsync": optional(VSync.parse),
    "gl_vsync": optional(parse_int),
    "picmip": optional(parse_int),
    "af": optional(parse_int),
    "bicubic": flag(),
    "trilinear": flag(),
    "retro": flag(),
    # Core visual
    "legacy_layout": flag(),
    "preset": ordinal_enum(HudPreset),
    "histogram": flag(),
    "custom_text_center": text(),
    "time": flag(),
    "time_format": text(),
    "version": flag(),
    # GPU
    "gpu_stats": flag(),
    "gpu_temp": flag(),
    "gpu_junction_temp": flag(),
    "gpu_core_clock": flag(),
    "gpu_mem_temp": flag(),
    "gpu_mem_clock": flag(),
    "gpu_power": flag(),
    "gpu_text": text(),
    "gpu_load_change": flag(),
    "gpu_load_value": pair(parse_int),
    "gpu_load_color": color_triple(),
    # CPU
    "cpu_stats": flag(),
    "cpu_temp": flag(),
    "cpu_power": flag(),
    "cpu_text": text(),
    "cpu_mhz": flag(),
    "cpu_load_change": flag(),
    "cpu_load_value": pair(parse_int),
    "cpu_load_color": color_triple(),
    "core_load": flag(),
    "core_load_change": flag(),
    # App IO
    "io_read": flag(),
    "io_write": flag(),
    # Storage usage
    "vram": flag(),
    "ram": flag(),
    "swap": flag(),
    # Per-process memory
    "procmem": flag(),
    "procmem_shared": flag(),
    "procmem_virt": flag(),
    # Battery
    "battery": flag(),
    "battery_icon": flag(),
    "gamepad_battery": flag(),
    "gamepad_battery_icon": flag(),
    # FPS
    "fps": flag(),
    "fps_sampling_period": duration(DurationUnit.NANOSECONDS),
    "fps_color_change": flag(),
    "fps_value": pair(parse_int),
    "fps_color": color_triple(),
    "frametime": flag(),
    "frame_timing": flag(),
    "frame_count": flag(),
    "show_fps_limit": flag(),
    # Misc info
    "throttling_status": flag(),
    "engine_version": flag(),
    "gpu_name": flag(),
    "vulkan_driver": flag(),
    "wine": flag(),
    "exec_name": flag(),
    "arch": flag(),
    "gamemode": flag(),
    "vkbasalt": flag(),
    "resolution": flag(),
    "custom_text": text(),
    "exec": text(),
    # Media player
    "media_player": flag(),
    "media_player_name": text(),
    "media_player_format": text(),
    # Font
    "font_size": number(),
    "font_scale": number(),
    "font_size_text": number(),
    "font_scale_media_player": number(),
    "no_small_font": flag(),
    "font_file": path(),
    "font_file_text": path(),
    "font_glyph_ranges": list_of(parse_token),
    "text_outline": flag(),
    "text_outline_thickness": number(),
    # Appearance
    "position": named_enum(HudPosition),
    "round_corners": number(),
    "hud_no_margin": flag(),
    "hud_compact": flag(),
    "horizontal": flag(),
    "horizontal_stretch": flag(),
    "no_display": flag(),
    "offset_x": number(),
    "offset_y": number(),
    "width": number(),
    "height": number(),
    "table_columns": integer(),
    "cellpadding_y": number(),
    "background_alpha": number(),
    "alpha": number(),
    # FCAT overlay
    "fcat": flag(),
    "fcat_overlay_width": integer(),
    "fcat_screen_edge": ordinal_enum(FcatOverlayEdge),
    # Colors
    "text_color": color(),
    "gpu_color": color(),
    "cpu_color": color(),
    "vram_color": color(),
    "ram_color": color(),
    "engine_color": color(),
    "io_color": color(),
    "frametime_color": color(),
    "background_color": color(),
    "media_player_color": color(),
    "wine_color": color(),
    "battery_color": color(),
    "text_outline_color": color(),
    # Misc
    "pci_dev": text(),
    "blacklist": list_of(parse_token),
    "control": text(),
    # OpenGL workarounds
    "gl_bind_framebuffer": optional(parse_int),
    # Key bindings
    "toggle_hud": chord(),
    "toggle_hud_position": chord(),
    "toggle_fps_limit": chord(),
    "toggle_logging": chord(),
    "reload_cfg": chord(),
    "upload_log": chord(),
    # Logging
    "autostart_log": flag(),
    "log_duration": duration(DurationUnit.SECONDS),
    "log_interval": duration(DurationUnit.MILLISECONDS),
    "output_folder": path(),
    "permit_upload": flag(),
    "benchmark_percentiles": text(),
}


@dataclass(frozen=True)
class FieldSpec:
    """A configuration field joined with its decoding rule.

    Attributes:
        name: Field name, matched case-sensitively against input keys.
        rule: Textual decoding rule.
        default: Declared default value.
        adapter: Validates decoded values against the field's constraints.
    """

    name: str
    rule: FieldRule
    default: Any
    adapter: TypeAdapter[Any]

    @property
    def category(self) -> FieldCategory:
        return self.rule.category

    def decode(self, raw: str | None) -> Any:
        """Decode a raw value into a validated field value.

        Args:
            raw: Raw text, or ``None`` for a bare key.

        Returns:
            The typed value for the field.

        Raises:
            FieldDecodeError: If the text does not match the field's grammar
                or the value violates the field's constraints.
        """
        try:
            return self.adapter.validate_python(self.rule.apply(raw))
        except ValidationError as exc:
            reason = "; ".join(error["msg"] for error in exc.errors())
            raise FieldDecodeError(self.name, raw, reason) from exc
        except ValueError as exc:
            raise FieldDecodeError(self.name, raw, str(exc)) from exc


def build_field_table(
    rules: Mapping[str, FieldRule],
    model: type[BaseModel] = OverlayConfig,
) -> Mapping[str, FieldSpec]:
    """Join decoding rules with the model's fields.

    Args:
        rules: Field name -> decoding rule.
        model: Pydantic model providing defaults and constraints.

    Returns:
        Read-only mapping of field name -> FieldSpec, in model declaration order.

    Raises:
        ValueError: If the rules and the model fields do not match one-to-one.
    """
    fields = model.model_fields
    missing = sorted(set(fields) - set(rules))
    if missing:
        msg = f"Fields without a decoding rule: {missing}"
        raise ValueError(msg)
    orphaned = sorted(set(rules) - set(fields))
    if orphaned:
        msg = f"Decoding rules without a field: {orphaned}"
        raise ValueError(msg)

    table: dict[str, FieldSpec] = {}
    for name, info in fields.items():
        annotation = Annotated[info.annotation, *info.metadata] if info.metadata else info.annotation
        table[name] = FieldSpec(
            name=name,
            rule=rules[name],
            default=info.get_default(call_default_factory=True),
            adapter=TypeAdapter(annotation),
        )
    return MappingProxyType(table)


FIELD_TABLE: Mapping[str, FieldSpec] = build_field_table(RULES)
