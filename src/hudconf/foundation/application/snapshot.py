"""Published configuration snapshots.

A ``ConfigSnapshot`` is the immutable result of one configuration load: the
typed record, the captured display order and the warnings collected along
the way. ``SnapshotStore`` holds the snapshot currently in use. A reload
builds a complete new snapshot first and only then swaps the reference, so
readers never observe a half-updated configuration.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hudconf.foundation.application.layout import layout_for
from hudconf.foundation.domain.exceptions import ConfigError
from hudconf.foundation.domain.overlay_config import OverlayConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from hudconf.foundation.application.diagnostics import FieldWarning
    from hudconf.foundation.domain.enums import OrderableParam

logger = logging.getLogger(__name__)

FALLBACK_SOURCE = "<fallback>"


@dataclass(frozen=True)
class ConfigSnapshot:
    """Immutable result of a configuration load.

    Attributes:
        config: The fully populated configuration record.
        layout_order: Orderable fields in the order the input enabled them.
        warnings: Ignored pairs (unknown keys, failed decodes).
        source: Description of where the configuration came from.
    """

    config: OverlayConfig = field(default_factory=OverlayConfig)
    layout_order: tuple[OrderableParam, ...] = ()
    warnings: tuple[FieldWarning, ...] = ()
    source: str = FALLBACK_SOURCE

    @classmethod
    def fallback(cls) -> ConfigSnapshot:
        """Hard-coded default snapshot used when no configuration could be loaded."""
        return cls()

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK_SOURCE

    def display_order(self) -> tuple[OrderableParam, ...]:
        """Stacking order of the enabled orderable fields, top to bottom."""
        return layout_for(self.config, self.layout_order).order(self.config)


class SnapshotStore:
    """Holds the current snapshot and swaps it atomically on reload.

    Reads are lock-free. Publishing and reloading are serialised by a writer
    lock, so two concurrent reloads never interleave.

    Args:
        initial: Snapshot to start with. Defaults to the fallback snapshot.
    """

    def __init__(self, initial: ConfigSnapshot | None = None) -> None:
        self._current = initial if initial is not None else ConfigSnapshot.fallback()
        self._write_lock = threading.Lock()

    @property
    def current(self) -> ConfigSnapshot:
        """The snapshot currently published."""
        return self._current

    def publish(self, snapshot: ConfigSnapshot) -> None:
        """Replace the current snapshot."""
        with self._write_lock:
            self._current = snapshot
        logger.info(
            "config_snapshot_published",
            extra={"source": snapshot.source, "warnings": len(snapshot.warnings)},
        )

    def reload(self, loader: Callable[[], ConfigSnapshot]) -> ConfigSnapshot:
        """Build a new snapshot with ``loader`` and publish it.

        Args:
            loader: Zero-argument callable producing a complete snapshot.

        Returns:
            The newly published snapshot.

        Raises:
            ConfigError: If the loader fails. The previous snapshot stays
                published.
        """
        with self._write_lock:
            try:
                snapshot = loader()
            except ConfigError as exc:
                logger.warning(
                    "config_reload_failed",
                    extra={"error_code": exc.error_code, "kept_source": self._current.source},
                )
                raise
            self._current = snapshot
        logger.info(
            "config_snapshot_reloaded",
            extra={"source": snapshot.source, "warnings": len(snapshot.warnings)},
        )
        return snapshot
