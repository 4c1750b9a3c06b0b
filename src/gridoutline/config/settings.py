"""Configuration settings for gridoutline."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Largest radius that keeps a rounded corner inside its own cell
MAX_RADIUS = 0.5


def clamp_radius(value: float) -> float:
    """Clamp a radius to [0, MAX_RADIUS].

    Args:
        value: Requested radius in grid units

    Returns:
        Radius limited to the valid range
    """
    return min(max(float(value), 0.0), MAX_RADIUS)


class FillRule(str, Enum):
    """SVG fill rule applied to every rendered path."""

    NONZERO = "nonzero"
    EVENODD = "evenodd"


class RadiusConfig(BaseModel):
    """Global corner rounding defaults.

    Out-of-range values are clamped rather than rejected.
    """

    corner_radius: float = Field(
        default=0.25,
        description="Radius of convex corners in grid units (0-0.5)",
    )
    inner_radius: float = Field(
        default=0.0,
        description="Radius of concave corners in grid units (0-0.5), the metaball blend",
    )

    @field_validator("corner_radius", "inner_radius", mode="before")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_radius(value)


class BridgeConfig(BaseModel):
    """Configuration for diagonal bridge fillets."""

    enabled: bool = Field(
        default=False,
        description="Add fillets where filled cells touch only diagonally",
    )
    radius: float = Field(
        default=0.35,
        description="Fillet radius in grid units (0 disables the geometry)",
    )

    @field_validator("radius", mode="before")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_radius(value)


class ScaleConfig(BaseModel):
    """Independent horizontal and vertical scale for non-uniform output."""

    scale_x: float = Field(default=1.0, gt=0.0, description="Horizontal scale factor")
    scale_y: float = Field(default=1.0, gt=0.0, description="Vertical scale factor")


class ExportConfig(BaseModel):
    """Configuration for SVG documents and bitmap sizing."""

    cell_px: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="SVG width/height in pixels per grid cell",
    )
    base_size: int = Field(
        default=512,
        ge=16,
        le=8192,
        description="Long side of a 1x bitmap export in pixels",
    )
    pixel_scale: int = Field(
        default=1,
        description="Bitmap export multiplier (1, 2 or 4)",
    )
    fill_rule: FillRule = Field(
        default=FillRule.NONZERO,
        description="Fill rule used by every written path",
    )
    fill: str = Field(default="black", description="Path fill colour")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class OutlineSettings(BaseModel):
    """Main application settings."""

    radius: RadiusConfig = Field(default_factory=RadiusConfig)
    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    scale: ScaleConfig = Field(default_factory=ScaleConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OutlineSettings:
    """Get default application settings."""
    return OutlineSettings()
