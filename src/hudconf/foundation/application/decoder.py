"""Decode raw ``key, value`` pairs into a configuration snapshot.

Input is an ordered sequence of ``(key, value)`` pairs where ``value`` is
``None`` for a bare key. Keys are matched case-sensitively against the field
table; there are no aliases.

- Unknown keys are recorded as warnings and never abort decoding.
- A field whose value fails to decode keeps its current value. In lenient
  mode the failure becomes a warning; in strict mode it is raised.
- When a key appears more than once, the last successful value wins.
- Input without a single recognised key raises ``EmptySectionError``.

The base configuration is never mutated: all overwrites are applied at once
to produce a new frozen record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from hudconf.foundation.application.diagnostics import FieldWarning
from hudconf.foundation.application.field_table import FIELD_TABLE, FieldSpec
from hudconf.foundation.application.layout import OrderTracker
from hudconf.foundation.application.snapshot import ConfigSnapshot
from hudconf.foundation.domain.exceptions import EmptySectionError, FieldDecodeError
from hudconf.foundation.domain.overlay_config import OverlayConfig

logger = logging.getLogger(__name__)

RawPair = tuple[str, str | None]


class DecodePolicy(StrEnum):
    """What to do when a recognised field fails to decode."""

    LENIENT = "lenient"  # keep the default, record a warning
    STRICT = "strict"  # abort with FieldDecodeError


def decode(
    pairs: Iterable[RawPair],
    *,
    base: OverlayConfig | None = None,
    policy: DecodePolicy = DecodePolicy.LENIENT,
    source: str = "<input>",
    section: str = "default",
    table: Mapping[str, FieldSpec] = FIELD_TABLE,
) -> ConfigSnapshot:
    """Decode raw pairs on top of a base configuration.

    Args:
        pairs: Ordered raw pairs from a file section or the environment.
        base: Configuration to start from. Defaults to ``OverlayConfig()``.
        policy: Per-field failure policy.
        source: Description of the input, used in errors and the snapshot.
        section: Section the pairs were read from, reported when none is usable.
        table: Field table to decode against.

    Returns:
        A new snapshot holding the decoded configuration, the captured
        display order and any warnings.

    Raises:
        EmptySectionError: If no pair names a known field.
        FieldDecodeError: Under ``DecodePolicy.STRICT``, on the first field
            that fails to decode.
    """
    config = base if base is not None else OverlayConfig()
    updates: dict[str, Any] = {}
    warnings: list[FieldWarning] = []
    tracker = OrderTracker()
    recognized = 0

    for key, raw in pairs:
        field_spec = table.get(key)
        if field_spec is None:
            warnings.append(FieldWarning.unknown_key(key, raw))
            logger.debug("config_key_unknown", extra={"key": key, "source": source})
            continue

        recognized += 1
        try:
            value = field_spec.decode(raw)
        except FieldDecodeError as exc:
            if policy is DecodePolicy.STRICT:
                raise
            warnings.append(FieldWarning.from_error(exc))
            logger.debug(
                "config_field_rejected",
                extra={"key": key, "reason": exc.reason, "source": source},
            )
            continue

        updates[key] = value
        if isinstance(value, bool):
            tracker.record(key, value)

    if recognized == 0:
        raise EmptySectionError(source, section, pairs_seen=len(warnings))

    logger.debug(
        "config_decoded",
        extra={"source": source, "fields_set": len(updates), "warnings": len(warnings)},
    )
    return ConfigSnapshot(
        config=config.model_copy(update=updates),
        layout_order=tracker.order,
        warnings=tuple(warnings),
        source=source,
    )
