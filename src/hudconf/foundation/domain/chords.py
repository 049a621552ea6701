"""Keyboard shortcut descriptors.

A chord is an ordered set of symbolic key names, for example
``Shift_R+F12``. Key names are kept exactly as written, so the left and
right variants of a modifier stay distinct. Turning a chord into a platform
key combination and registering it is the job of the hotkey integration,
not of this package.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_KEY_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
_SEPARATOR_PATTERN = re.compile(r"[+,]")

MODIFIER_KEYS: frozenset[str] = frozenset(
    {
        "Shift_L",
        "Shift_R",
        "Control_L",
        "Control_R",
        "Alt_L",
        "Alt_R",
        "Meta_L",
        "Meta_R",
        "Super_L",
        "Super_R",
    }
)


@dataclass(frozen=True, slots=True)
class Chord:
    """Validated key chord (immutable after creation).

    Attributes:
        keys: Key names in the order they were written.

    Raises:
        ValueError: If the chord is empty, a key name is malformed, or a key
            appears twice.
    """

    keys: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.keys:
            msg = "Key chord cannot be empty"
            raise ValueError(msg)
        for key in self.keys:
            if not _KEY_NAME_PATTERN.match(key):
                msg = f"Invalid key name '{key}' in chord"
                raise ValueError(msg)
        if len(set(self.keys)) != len(self.keys):
            msg = f"Key chord repeats a key: {'+'.join(self.keys)}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, text: str) -> Chord:
        """Parse ``Shift_L+F12`` (``,`` is accepted as a separator as well).

        Example:
            >>> Chord.parse("Shift_L+F12").keys
            ('Shift_L', 'F12')
        """
        tokens = tuple(token.strip() for token in _SEPARATOR_PATTERN.split(text.strip()))
        if tokens == ("",):
            tokens = ()
        return cls(tokens)

    @classmethod
    def of(cls, *keys: str) -> Chord:
        return cls(keys)

    @property
    def modifiers(self) -> tuple[str, ...]:
        """Modifier keys of the chord, in written order."""
        return tuple(key for key in self.keys if key in MODIFIER_KEYS)

    @property
    def key(self) -> str:
        """The last key of the chord (the one that triggers it)."""
        return self.keys[-1]

    def __str__(self) -> str:
        return "+".join(self.keys)
