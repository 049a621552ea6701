"""hudconf Foundation Application -- decoding and snapshot publication.

Turns ordered raw ``key, value`` pairs into an immutable configuration
snapshot using the declarative field table, and publishes snapshots to
readers.
"""

from hudconf.foundation.application.decoder import DecodePolicy, RawPair, decode
from hudconf.foundation.application.diagnostics import FieldWarning, WarningKind, format_warnings
from hudconf.foundation.application.field_table import (
    FIELD_TABLE,
    RULES,
    DurationUnit,
    FieldCategory,
    FieldRule,
    FieldSpec,
    build_field_table,
)
from hudconf.foundation.application.layout import (
    LEGACY_ORDER,
    CapturedLayout,
    FixedLayout,
    LayoutStrategy,
    layout_for,
)
from hudconf.foundation.application.snapshot import ConfigSnapshot, SnapshotStore

__all__ = [
    "FIELD_TABLE",
    "LEGACY_ORDER",
    "RULES",
    "CapturedLayout",
    "ConfigSnapshot",
    "DecodePolicy",
    "DurationUnit",
    "FieldCategory",
    "FieldRule",
    "FieldSpec",
    "FieldWarning",
    "FixedLayout",
    "LayoutStrategy",
    "RawPair",
    "SnapshotStore",
    "WarningKind",
    "build_field_table",
    "decode",
    "format_warnings",
    "layout_for",
]
