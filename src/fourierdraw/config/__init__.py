"""Configuration management for fourierdraw.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplingConfig: Sample count, wave count and flattening tolerance
- RenderConfig: Visualizer settings
- LoggingConfig: Logging settings
- FourierDrawSettings: Main application settings
"""

from fourierdraw.config.settings import (
    FourierDrawSettings,
    LoggingConfig,
    OutputFormat,
    RenderConfig,
    SamplingConfig,
    get_default_settings,
)

__all__ = [
    "FourierDrawSettings",
    "LoggingConfig",
    "OutputFormat",
    "RenderConfig",
    "SamplingConfig",
    "get_default_settings",
]
