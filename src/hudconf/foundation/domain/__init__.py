"""hudconf Foundation Domain -- the typed overlay configuration schema.

This package provides the configuration record, its enumerations and value
objects, and the configuration error hierarchy. It has no knowledge of
where configuration text comes from.
"""

from hudconf.foundation.domain.chords import MODIFIER_KEYS, Chord
from hudconf.foundation.domain.colors import Color
from hudconf.foundation.domain.enums import (
    FcatOverlayEdge,
    FpsLimitMethod,
    HudPosition,
    HudPreset,
    NamedEnum,
    OrderableParam,
    OrdinalEnum,
    VSync,
)
from hudconf.foundation.domain.exceptions import (
    ConfigError,
    EmptySectionError,
    FieldDecodeError,
    SourceUnavailableError,
)
from hudconf.foundation.domain.overlay_config import ADVISORY_DEPENDENCIES, OverlayConfig

__all__ = [
    "ADVISORY_DEPENDENCIES",
    "MODIFIER_KEYS",
    "Chord",
    "Color",
    "ConfigError",
    "EmptySectionError",
    "FcatOverlayEdge",
    "FieldDecodeError",
    "FpsLimitMethod",
    "HudPosition",
    "HudPreset",
    "NamedEnum",
    "OrderableParam",
    "OrdinalEnum",
    "OverlayConfig",
    "SourceUnavailableError",
    "VSync",
]
