"""Display-order strategies for the orderable informational fields.

``time``, ``version`` and ``fps`` are stacked on screen either in a fixed
built-in order (legacy layout, the default) or in the order their keys were
enabled in the input. The order is a presentation concern over the
configuration, not a property of the configuration record itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from hudconf.foundation.domain.enums import OrderableParam

if TYPE_CHECKING:
    from hudconf.foundation.domain.overlay_config import OverlayConfig

LEGACY_ORDER: tuple[OrderableParam, ...] = (
    OrderableParam.TIME,
    OrderableParam.VERSION,
    OrderableParam.FPS,
)


def _enabled(config: OverlayConfig, params: tuple[OrderableParam, ...]) -> tuple[OrderableParam, ...]:
    return tuple(param for param in params if getattr(config, param.value))


class LayoutStrategy(Protocol):
    """Decides the stacking order of the orderable fields."""

    def order(self, config: OverlayConfig) -> tuple[OrderableParam, ...]:
        """Return the enabled orderable fields, top to bottom."""
        ...


@dataclass(frozen=True)
class FixedLayout:
    """Built-in order, used while ``legacy_layout`` is enabled."""

    sequence: tuple[OrderableParam, ...] = LEGACY_ORDER

    def order(self, config: OverlayConfig) -> tuple[OrderableParam, ...]:
        return _enabled(config, self.sequence)


@dataclass(frozen=True)
class CapturedLayout:
    """Input order, used once ``legacy_layout`` is disabled.

    Attributes:
        captured: Orderable fields in the order their keys enabled them.
    """

    captured: tuple[OrderableParam, ...] = ()

    def order(self, config: OverlayConfig) -> tuple[OrderableParam, ...]:
        return _enabled(config, self.captured)


def layout_for(config: OverlayConfig, captured: tuple[OrderableParam, ...]) -> LayoutStrategy:
    """Pick the layout strategy the configuration asks for.

    Args:
        config: Decoded configuration.
        captured: Enablement order recorded by the decoder.

    Returns:
        ``FixedLayout`` when ``legacy_layout`` is set, else ``CapturedLayout``.
    """
    if config.legacy_layout:
        return FixedLayout()
    return CapturedLayout(captured)


class OrderTracker:
    """Records the enablement order of orderable fields during decoding.

    Enabling appends a field once. Disabling removes it, so a later
    re-enable moves it to the end.
    """

    def __init__(self) -> None:
        self._order: list[OrderableParam] = []

    def record(self, key: str, enabled: bool) -> None:
        """Note a successfully decoded flag. Non-orderable keys are ignored."""
        try:
            param = OrderableParam(key)
        except ValueError:
            return
        if enabled:
            if param not in self._order:
                self._order.append(param)
        elif param in self._order:
            self._order.remove(param)

    @property
    def order(self) -> tuple[OrderableParam, ...]:
        return tuple(self._order)
