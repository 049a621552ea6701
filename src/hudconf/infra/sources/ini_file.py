"""Read raw ``key = value`` pairs from an INI-like configuration file.

Format:
    - leading and trailing whitespace is trimmed from every line;
    - blank lines and lines starting with ``#`` are ignored;
    - lines before any ``[section]`` header belong to the default section,
      as do lines under an explicit ``[default]`` header; other sections
      are skipped;
    - ``key = value`` splits on the first ``=``; a line without ``=`` is a
      bare key and yields ``(key, None)``.

Example:
    >>> parse_ini_lines(["# overlay", "fps_limit = 60+144", "vram"])
    [('fps_limit', '60+144'), ('vram', None)]
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hudconf.foundation.domain.exceptions import EmptySectionError, SourceUnavailableError
from hudconf.infra.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hudconf.foundation.application.decoder import RawPair

logger = get_logger(__name__)

DEFAULT_SECTION = "default"
COMMENT_PREFIX = "#"


def parse_ini_lines(lines: Iterable[str], section: str = DEFAULT_SECTION) -> list[RawPair]:
    """Extract the raw pairs of one section, in file order.

    Args:
        lines: Lines of the file (line terminators are stripped).
        section: Section to read. Lines before the first header count as
            part of ``default``.

    Returns:
        Ordered ``(key, value)`` pairs; ``value`` is None for bare keys.
    """
    pairs: list[RawPair] = []
    current = DEFAULT_SECTION
    for lineno, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        if line.startswith("[") and line.endswith("]"):
            current = line[1:-1].strip() or DEFAULT_SECTION
            continue
        if current != section:
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not key:
            logger.warning("config_line_skipped", line=lineno, reason="empty key")
            continue
        pairs.append((key, value.strip() if sep else None))
    return pairs


def read_ini_file(path: Path | str, section: str = DEFAULT_SECTION) -> list[RawPair]:
    """Read the raw pairs of one section from a configuration file.

    Args:
        path: Path to the configuration file.
        section: Section to read.

    Returns:
        Ordered raw pairs of the section.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded.
        EmptySectionError: If the section is missing or has no keys.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(str(file_path), str(exc)) from exc

    pairs = parse_ini_lines(text.splitlines(), section)
    if not pairs:
        raise EmptySectionError(str(file_path), section)
    logger.debug("config_file_read", path=str(file_path), section=section, pairs=len(pairs))
    return pairs
