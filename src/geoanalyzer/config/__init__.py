"""Configuration management for geoanalyzer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Grid padding, circle band and marker characters
- LoggingConfig: Logging settings
- AnalyzerSettings: Main application settings
"""

from geoanalyzer.config.settings import (
    AnalyzerSettings,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "AnalyzerSettings",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
