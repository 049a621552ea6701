"""Closed enumerations used by the overlay configuration.

Two textual encodings exist:

- ``OrdinalEnum``: accepts the decimal ordinal (which may be negative) or the
  kebab-cased symbol, case-insensitively.
- ``NamedEnum``: accepts the kebab-cased symbol only, case-insensitively.

Both lookup directions are derived from the member declarations, so
``parse(member.symbol)`` and ``from_ordinal(member.ordinal)`` always return
the member itself.

Example:
    >>> HudPreset.parse("-1") is HudPreset.DEFAULT
    True
    >>> HudPreset.parse("FPS-ONLY").ordinal
    1
    >>> HudPosition.parse("Top-Right").symbol
    'top-right'
"""

from __future__ import annotations

import re
from enum import Enum, IntEnum, StrEnum
from functools import cache
from typing import Self

_ORDINAL_PATTERN = re.compile(r"^[+-]?\d+$")


@cache
def _symbol_table(enum_cls: type[Enum]) -> dict[str, Enum]:
    return {member.symbol: member for member in enum_cls}  # type: ignore[attr-defined]


class OrdinalEnum(IntEnum):
    """Base for enums encoded either by ordinal or by kebab-cased name."""

    @property
    def ordinal(self) -> int:
        """Display ordinal of the member."""
        return int(self)

    @property
    def symbol(self) -> str:
        """Canonical kebab-cased name (``FPS_ONLY`` -> ``fps-only``)."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Self:
        """Look up a member by ordinal.

        Raises:
            ValueError: If no member has that ordinal.
        """
        try:
            return cls(ordinal)
        except ValueError:
            msg = f"Unknown {cls.__name__} ordinal: {ordinal}"
            raise ValueError(msg) from None

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        """Look up a member by symbol, case-insensitively.

        Raises:
            ValueError: If no member has that symbol.
        """
        member = _symbol_table(cls).get(symbol.strip().lower())
        if member is None:
            msg = f"Unknown {cls.__name__} name: '{symbol}'"
            raise ValueError(msg)
        return member  # type: ignore[return-value]

    @classmethod
    def parse(cls, token: str) -> Self:
        """Parse either textual form.

        Raises:
            ValueError: If the token is neither a known ordinal nor a known name.
        """
        text = token.strip()
        if _ORDINAL_PATTERN.match(text):
            return cls.from_ordinal(int(text))
        return cls.from_symbol(text)


class NamedEnum(StrEnum):
    """Base for enums encoded only by their kebab-cased name."""

    @property
    def symbol(self) -> str:
        """Canonical kebab-cased name."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        """Look up a member by symbol, case-insensitively.

        Raises:
            ValueError: If no member has that symbol.
        """
        member = _symbol_table(cls).get(symbol.strip().lower())
        if member is None:
            allowed = ", ".join(m.value for m in cls)
            msg = f"Unknown {cls.__name__} name: '{symbol}' (expected one of: {allowed})"
            raise ValueError(msg)
        return member  # type: ignore[return-value]

    @classmethod
    def parse(cls, token: str) -> Self:
        """Parse the symbolic form. Ordinals are not accepted."""
        return cls.from_symbol(token)


class VSync(OrdinalEnum):
    """Vulkan present mode override."""

    ADAPTIVE = 0
    OFF = 1
    MAILBOX = 2
    ON = 3


class HudPreset(OrdinalEnum):
    """Built-in HUD presets. ``DEFAULT`` (-1) means no preset selected."""

    DEFAULT = -1
    OFF = 0
    FPS_ONLY = 1
    HORIZONTAL = 2
    EXTENDED = 3
    DETAILED = 4


class FcatOverlayEdge(OrdinalEnum):
    """Screen edge the FCAT overlay bar is drawn on."""

    LEFT = 0
    BOTTOM = 1
    RIGHT = 2
    TOP = 3


class FpsLimitMethod(NamedEnum):
    """Where in the frame the FPS limiter sleeps."""

    EARLY = "early"
    LATE = "late"


class HudPosition(NamedEnum):
    """Anchor position of the HUD on screen."""

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    MIDDLE_LEFT = "middle-left"
    MIDDLE_RIGHT = "middle-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


class OrderableParam(NamedEnum):
    """Informational fields whose on-screen order follows the input order.

    The captured order only matters when ``legacy_layout`` is disabled.
    """

    TIME = "time"
    VERSION = "version"
    FPS = "fps"
