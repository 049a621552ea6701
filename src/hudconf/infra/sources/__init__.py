"""hudconf Infra Sources -- configuration file and environment readers."""

from __future__ import annotations

from hudconf.infra.sources.environment import parse_inline_config, read_environment
from hudconf.infra.sources.ini_file import parse_ini_lines, read_ini_file
from hudconf.infra.sources.loader import gather_pairs, load_snapshot, load_snapshot_or_fallback
from hudconf.infra.sources.settings import SourceSettings, get_source_settings

__all__ = [
    "SourceSettings",
    "gather_pairs",
    "get_source_settings",
    "load_snapshot",
    "load_snapshot_or_fallback",
    "parse_ini_lines",
    "parse_inline_config",
    "read_environment",
    "read_ini_file",
]
