"""Load a configuration snapshot from the configured sources.

Sources are read in a fixed order and their pairs concatenated, so a key
set by a later source overrides the same key from an earlier one:

1. the configuration file (``MANGOHUD_CONFIGFILE``), one section of it;
2. the inline string (``MANGOHUD_CONFIG``);
3. per-key variables, when ``MANGOHUD_CONFIG_FROM_ENV`` is set.

Usage:
    from hudconf.infra.sources import load_snapshot_or_fallback

    snapshot = load_snapshot_or_fallback()
    for param in snapshot.display_order():
        ...
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from hudconf.foundation.application import FIELD_TABLE, ConfigSnapshot, decode
from hudconf.foundation.domain.exceptions import ConfigError, SourceUnavailableError
from hudconf.infra.observability import get_logger
from hudconf.infra.sources.environment import parse_inline_config, read_environment
from hudconf.infra.sources.ini_file import read_ini_file
from hudconf.infra.sources.settings import SourceSettings, get_source_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hudconf.foundation.application import RawPair

logger = get_logger(__name__)

INLINE_SOURCE = "MANGOHUD_CONFIG"
ENVIRONMENT_SOURCE = "environment"


def gather_pairs(
    settings: SourceSettings,
    environ: Mapping[str, str],
) -> tuple[list[RawPair], list[str]]:
    """Collect raw pairs from every configured source, in precedence order.

    Returns:
        The concatenated pairs and the names of the sources that were read.

    Raises:
        SourceUnavailableError: If no source is configured, or the file
            cannot be read.
        EmptySectionError: If the file section holds no keys.
    """
    if not settings.has_source:
        raise SourceUnavailableError(ENVIRONMENT_SOURCE, "no configuration source configured")

    pairs: list[RawPair] = []
    sources: list[str] = []
    if settings.config_file is not None:
        pairs.extend(read_ini_file(settings.config_file, settings.section))
        sources.append(str(settings.config_file))
    if settings.inline_config is not None:
        pairs.extend(parse_inline_config(settings.inline_config))
        sources.append(INLINE_SOURCE)
    if settings.from_environment:
        pairs.extend(read_environment(environ, FIELD_TABLE))
        sources.append(ENVIRONMENT_SOURCE)
    return pairs, sources


def load_snapshot(
    settings: SourceSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigSnapshot:
    """Read the configured sources and decode them into a snapshot.

    Args:
        settings: Source selection. Loaded from the environment if omitted.
        environ: Environment for per-key variables. Defaults to ``os.environ``.

    Returns:
        The decoded snapshot. Each of its warnings has been logged.

    Raises:
        ConfigError: If no source is usable, the input holds no known key,
            or (under the strict policy) a field fails to decode.
    """
    if settings is None:
        settings = get_source_settings()
    if environ is None:
        environ = os.environ

    pairs, sources = gather_pairs(settings, environ)
    source = " + ".join(sources)
    snapshot = decode(pairs, policy=settings.policy, source=source, section=settings.section)

    for warning in snapshot.warnings:
        logger.warning(
            "config_field_ignored",
            key=warning.key,
            raw_value=warning.raw_value,
            reason=warning.reason,
            kind=str(warning.kind),
            source=source,
        )
    logger.info(
        "config_loaded",
        source=source,
        pairs=len(pairs),
        warnings=len(snapshot.warnings),
    )
    return snapshot


def load_snapshot_or_fallback(
    settings: SourceSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigSnapshot:
    """Like ``load_snapshot``, but fall back to the built-in defaults on error.

    The failure is logged as an error so a broken configuration is visible
    even though the overlay keeps running.
    """
    try:
        return load_snapshot(settings, environ)
    except ConfigError as exc:
        logger.error(
            "config_load_failed",
            error_code=exc.error_code,
            message=exc.message,
            **exc.context,
        )
        return ConfigSnapshot.fallback()
