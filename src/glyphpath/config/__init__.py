"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SVGOutputOptions: Path data serialization settings
- ExportConfig: Glyph export settings
- LoggingConfig: Logging settings
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    ExportConfig,
    GlyphPathSettings,
    LoggingConfig,
    SVGOutputOptions,
    get_default_settings,
)

__all__ = [
    "ExportConfig",
    "GlyphPathSettings",
    "LoggingConfig",
    "SVGOutputOptions",
    "get_default_settings",
]
