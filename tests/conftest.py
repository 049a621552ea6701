"""Shared fixtures for hudconf tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hudconf.infra.observability import get_logging_settings
from hudconf.infra.sources import get_source_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> Iterator[None]:
    """Settings are cached per process; start every test from the environment."""
    get_source_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_source_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write configuration text to a file and return its path."""

    def _write(text: str, name: str = "MangoHud.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
