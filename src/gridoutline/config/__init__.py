"""Configuration management for gridoutline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, grid documents or defaults.

Key classes:
- RadiusConfig: Global convex/concave corner radii
- BridgeConfig: Diagonal fillet settings
- ScaleConfig: Horizontal/vertical scale factors
- ExportConfig: SVG and bitmap export settings
- LoggingConfig: Logging settings
- OutlineSettings: Main application settings
"""

from gridoutline.config.settings import (
    MAX_RADIUS,
    BridgeConfig,
    ExportConfig,
    FillRule,
    LoggingConfig,
    OutlineSettings,
    RadiusConfig,
    ScaleConfig,
    clamp_radius,
    get_default_settings,
)

__all__ = [
    "MAX_RADIUS",
    "BridgeConfig",
    "ExportConfig",
    "FillRule",
    "LoggingConfig",
    "OutlineSettings",
    "RadiusConfig",
    "ScaleConfig",
    "clamp_radius",
    "get_default_settings",
]
