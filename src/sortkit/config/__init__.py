"""Configuration module using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from sortkit.config import EngineSettings

    settings = EngineSettings(numeric_pad_width=12)
"""

from sortkit.config.settings import (
    MAX_COMPARE_DEPTH_LIMIT,
    EngineSettings,
    StringCollation,
    get_settings,
    reset_settings,
    resolve_settings,
)

__all__ = [
    "MAX_COMPARE_DEPTH_LIMIT",
    "EngineSettings",
    "StringCollation",
    "get_settings",
    "reset_settings",
    "resolve_settings",
]
