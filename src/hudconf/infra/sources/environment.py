"""Read raw pairs from the process environment.

Two encodings are supported:

- Inline: a single variable holding ``key=value`` entries separated by
  commas, e.g. ``fps_limit=60+144,vram,position=top-right``. Because the
  comma separates entries, list values in this form use ``+``.
- Per key: one variable per field, named exactly like the key, holding the
  same value text a file would.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from hudconf.foundation.application.decoder import RawPair

ENTRY_SEPARATOR = ","


def parse_inline_config(text: str) -> list[RawPair]:
    """Split an inline configuration string into raw pairs.

    Args:
        text: Comma-separated ``key=value`` or bare ``key`` entries.

    Returns:
        Ordered raw pairs. Empty entries are skipped.

    Example:
        >>> parse_inline_config("fps_limit=60+144, vram ,position=top-right")
        [('fps_limit', '60+144'), ('vram', None), ('position', 'top-right')]
    """
    pairs: list[RawPair] = []
    for entry in text.split(ENTRY_SEPARATOR):
        key, sep, value = entry.strip().partition("=")
        key = key.strip()
        if not key:
            continue
        pairs.append((key, value.strip() if sep else None))
    return pairs


def read_environment(environ: Mapping[str, str], names: Iterable[str]) -> list[RawPair]:
    """Collect per-key variables for the given field names.

    Only variables named after a configuration field are taken, so the rest
    of the process environment is not reported as unknown keys.

    Args:
        environ: Environment snapshot (e.g. ``os.environ``).
        names: Configuration field names.

    Returns:
        Raw pairs in the environment's iteration order.
    """
    wanted = frozenset(names)
    return [(key, value.strip()) for key, value in environ.items() if key in wanted]
