"""RGB color value object and the overlay's default palette.

Colors are written in configuration files as six hex digits (``ff0000``),
optionally prefixed with ``#``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{6})$")


@dataclass(frozen=True, slots=True)
class Color:
    """Immutable 8-bit-per-channel RGB color.

    Attributes:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).

    Raises:
        ValueError: If any channel is outside 0-255.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                msg = f"Color channel '{channel}' out of range: {value} (expected 0-255)"
                raise ValueError(msg)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse a ``rrggbb`` hex string.

        Args:
            text: Six hex digits, with or without a leading ``#``.

        Returns:
            Parsed color.

        Raises:
            ValueError: If the text is not exactly six hex digits.

        Example:
            >>> Color.from_hex("2e97cb")
            Color(r=46, g=151, b=203)
        """
        match = _HEX_PATTERN.match(text.strip())
        if match is None:
            msg = f"Invalid color '{text}': expected 6 hex digits"
            raise ValueError(msg)
        digits = match.group(1)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def hex(self) -> str:
        """Lowercase ``rrggbb`` representation."""
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.hex


WHITE = Color(0xFF, 0xFF, 0xFF)
BLACK = Color(0x00, 0x00, 0x00)
ALMOST_BLACK = Color(0x02, 0x02, 0x02)
DARK_RED = Color(0xB2, 0x22, 0x22)
VIVID_YELLOW = Color(0xFD, 0xFD, 0x09)
GREEN = Color(0x39, 0xF9, 0x00)
LIME_GREEN = Color(0x00, 0xFF, 0x00)
DARK_LIME_GREEN = Color(0x2E, 0x97, 0x62)
BLUE = Color(0x2E, 0x97, 0xCB)
LIGHT_MAGENTA = Color(0xAD, 0x64, 0xC1)
LIGHT_PINK = Color(0xC2, 0x66, 0x93)
SOFT_RED = Color(0xEB, 0x5B, 0x5B)
LIGHT_VIOLET = Color(0xA4, 0x91, 0xD3)
LIGHT_RED = Color(0xFF, 0x90, 0x78)
