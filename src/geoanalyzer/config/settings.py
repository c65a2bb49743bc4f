"""Configuration settings for Geoanalyzer."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Configuration for the text grid renderer.

    Coordinates are plotted on an integer grid, one cell per unit, so these
    values are in grid units rather than in any scaled unit.
    """

    padding: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Empty grid units added around the plotted figure on every side",
    )
    circle_thickness: float = Field(
        default=0.6,
        gt=0.0,
        le=2.0,
        description="Half-width of the band around the radius drawn as circumference",
    )
    origin_marker: str = Field(default="+", min_length=1, max_length=1)
    x_axis_marker: str = Field(default="-", min_length=1, max_length=1)
    y_axis_marker: str = Field(default="|", min_length=1, max_length=1)
    empty_marker: str = Field(default=".", min_length=1, max_length=1)
    circumference_marker: str = Field(default="O", min_length=1, max_length=1)
    center_marker: str = Field(default="C", min_length=1, max_length=1)


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


class AnalyzerSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AnalyzerSettings:
    """Get default application settings."""
    return AnalyzerSettings()
