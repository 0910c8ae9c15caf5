"""Configuration settings for Fourierdraw."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_SAMPLE_COUNT = 10240
DEFAULT_WAVE_COUNT = 201
DEFAULT_FLATTEN_TOLERANCE = 0.01


class OutputFormat(str, Enum):
    """Visualizer output format."""

    HTML = "html"
    JSON = "json"


class SamplingConfig(BaseModel):
    """Configuration for path sampling and spectrum truncation."""

    sample_count: int = Field(
        default=DEFAULT_SAMPLE_COUNT,
        ge=1,
        description="Number of arc-length uniform samples (DFT size)",
    )
    wave_count: int = Field(
        default=DEFAULT_WAVE_COUNT,
        ge=1,
        description="Number of rotating vectors to keep (clamped to sample_count)",
    )
    flatten_tolerance: float = Field(
        default=DEFAULT_FLATTEN_TOLERANCE,
        gt=0.0,
        description="Maximum deviation of flattened lines from the true curve, in path units",
    )


class RenderConfig(BaseModel):
    """Configuration for the epicycle visualizer."""

    output_format: OutputFormat = Field(
        default=OutputFormat.HTML,
        description="Output format",
    )
    title: str = Field(
        default="Fourier Visualizer",
        description="HTML page title",
    )
    canvas_width: int = Field(default=800, ge=1, description="Canvas width in pixels")
    canvas_height: int = Field(default=600, ge=1, description="Canvas height in pixels")
    center_x: float = Field(default=150.0, description="Animation origin X on the canvas")
    center_y: float = Field(default=150.0, description="Animation origin Y on the canvas")
    radius_scale: float = Field(
        default=0.5,
        gt=0.0,
        description="Scale applied to every vector radius",
    )
    speed_scale: float = Field(
        default=0.05,
        gt=0.0,
        description="Scale applied to every vector frequency",
    )
    time_step: float = Field(
        default=0.04,
        gt=0.0,
        description="Animation time advanced per frame",
    )
    trail_length: int = Field(
        default=400,
        ge=1,
        description="Number of traced points kept on screen",
    )


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


class FourierDrawSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FourierDrawSettings:
    """Get default application settings."""
    return FourierDrawSettings()
