"""Utility functions for gridoutline.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics collection
"""

from gridoutline.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
