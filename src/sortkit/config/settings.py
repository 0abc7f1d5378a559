"""Configuration settings using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from sortkit.config import EngineSettings, get_settings

    # Load from environment variables (SORTKIT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = EngineSettings(string_collation="casefold")
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install sortkit"
    ) from e


StringCollation = Literal["locale", "casefold", "ordinal"]

MAX_COMPARE_DEPTH_LIMIT = 250
"""Highest allowed max_compare_depth. Each nesting level costs two stack frames,
so this stays well inside the default interpreter recursion limit."""


class EngineSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for comparison, sorting and key normalization.

    Attributes:
        numeric_pad_width: Width digit runs are zero-padded to by
            sortable_numeric_suffix. Longer runs are left as they are.
        string_collation: How two strings compare. ``locale`` uses the
            process locale (``locale.strcoll``), ``casefold`` compares
            case-insensitively and breaks ties by code point, ``ordinal``
            compares code points only.
        max_compare_depth: Deepest array nesting the comparator descends
            into. Deeper pairs compare equal. At most MAX_COMPARE_DEPTH_LIMIT.

    Environment Variables:
        SORTKIT_NUMERIC_PAD_WIDTH
        SORTKIT_STRING_COLLATION
        SORTKIT_MAX_COMPARE_DEPTH
    """

    model_config = SettingsConfigDict(
        env_prefix="SORTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    numeric_pad_width: int = Field(default=10, ge=1)
    string_collation: StringCollation = "locale"
    max_compare_depth: int = Field(default=100, ge=1, le=MAX_COMPARE_DEPTH_LIMIT)


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Process-wide settings, read from the environment on first use."""
    return EngineSettings()


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def resolve_settings(settings: EngineSettings | None) -> EngineSettings:
    """Return explicit settings, or the process-wide ones when None."""
    return settings if settings is not None else get_settings()
