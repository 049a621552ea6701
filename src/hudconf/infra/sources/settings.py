"""Where configuration text is read from, using Pydantic settings.

Environment Variables:
    MANGOHUD_CONFIGFILE: Path of the configuration file (optional)
    MANGOHUD_CONFIG: Inline comma-separated configuration (optional)
    MANGOHUD_CONFIG_SECTION: File section to read (default: default)
    MANGOHUD_CONFIG_POLICY: lenient or strict field decoding (default: lenient)
    MANGOHUD_CONFIG_FROM_ENV: Also read one variable per field (default: false)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hudconf.foundation.application.decoder import DecodePolicy


class SourceSettings(BaseSettings):
    """Configuration source selection.

    Example:
        >>> settings = SourceSettings(config_file="/home/me/.config/MangoHud/MangoHud.conf")
        >>> settings.has_source
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    config_file: Path | None = Field(
        default=None,
        alias="MANGOHUD_CONFIGFILE",
        description="Configuration file path",
    )
    inline_config: str | None = Field(
        default=None,
        alias="MANGOHUD_CONFIG",
        description="Inline configuration, entries separated by commas",
    )
    section: str = Field(
        default="default",
        alias="MANGOHUD_CONFIG_SECTION",
        min_length=1,
        description="Configuration file section to read",
    )
    policy: DecodePolicy = Field(
        default=DecodePolicy.LENIENT,
        alias="MANGOHUD_CONFIG_POLICY",
        description="What to do when a field fails to decode",
    )
    from_environment: bool = Field(
        default=False,
        alias="MANGOHUD_CONFIG_FROM_ENV",
        description="Read one environment variable per configuration field",
    )

    @field_validator("config_file", "inline_config", mode="before")
    @classmethod
    def blank_as_unset(cls, v: Any) -> Any:
        """Treat empty strings as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("policy", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        """Accept the policy name in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def has_source(self) -> bool:
        """True if at least one configuration source is selected."""
        return self.config_file is not None or self.inline_config is not None or self.from_environment


@lru_cache(maxsize=1)
def get_source_settings() -> SourceSettings:
    """Get cached SourceSettings instance.

    Clear cache with ``get_source_settings.cache_clear()`` for testing.
    """
    return SourceSettings()
