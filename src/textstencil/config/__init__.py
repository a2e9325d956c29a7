"""Configuration management for textstencil.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LayoutConfig: Line spacing, number precision and unmapped glyph handling
- InputLimits: Recommended input ranges used by the front end
- FontConfig: Font directory and catalog
- LoggingConfig: Logging settings
- StencilSettings: Main application settings
"""

from textstencil.config.settings import (
    DEFAULT_FONT_CATALOG,
    Alignment,
    FontConfig,
    FontEntry,
    InputLimits,
    LayoutConfig,
    LoggingConfig,
    StencilSettings,
    UnmappedGlyphPolicy,
    get_default_settings,
)

__all__ = [
    "DEFAULT_FONT_CATALOG",
    "Alignment",
    "FontConfig",
    "FontEntry",
    "InputLimits",
    "LayoutConfig",
    "LoggingConfig",
    "StencilSettings",
    "UnmappedGlyphPolicy",
    "get_default_settings",
]
