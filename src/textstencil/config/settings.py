"""Configuration settings for Textstencil."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Alignment(str, Enum):
    """Horizontal alignment of each line within the text block."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class UnmappedGlyphPolicy(str, Enum):
    """What to do with characters the font has no glyph for."""

    NOTDEF = "notdef"
    SKIP = "skip"
    ERROR = "error"


class LayoutConfig(BaseModel):
    """Configuration for line layout and path output."""

    line_height_factor: float = Field(
        default=1.2,
        gt=0.0,
        description="Line advance as a multiple of the point size",
    )
    precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places for every number in the path data",
    )
    unmapped_policy: UnmappedGlyphPolicy = Field(
        default=UnmappedGlyphPolicy.NOTDEF,
        description="Handling of characters missing from the font",
    )


class InputLimits(BaseModel):
    """Recommended input ranges, enforced by the front end only."""

    point_size_min: float = Field(default=5.0, gt=0.0)
    point_size_max: float = Field(default=200.0, gt=0.0)
    point_size_default: float = Field(default=40.0, gt=0.0)
    padding_min: float = Field(default=0.0, ge=0.0)
    padding_max: float = Field(default=100.0, ge=0.0)
    padding_default: float = Field(default=10.0, ge=0.0)
    text_max_length: int = Field(
        default=1000,
        ge=1,
        description="Longer text is truncated",
    )
    default_alignment: Alignment = Field(default=Alignment.CENTER)


class FontEntry(BaseModel):
    """A named font in the catalog."""

    value: str = Field(description="Font file name under the font directory")
    label: str = Field(description="Human readable name")


DEFAULT_FONT_CATALOG: list[FontEntry] = [
    FontEntry(value="AllertaStencil-Regular.ttf", label="Allerta Stencil"),
    FontEntry(value="SirinStencil-Regular.ttf", label="Sirin Stencil"),
    FontEntry(value="BigShouldersStencil-Regular.ttf", label="Big Shoulders"),
    FontEntry(value="EmblemaOne-Regular.ttf", label="Emblema One"),
    FontEntry(value="StardosStencil-Regular.ttf", label="Stardos Stencil"),
]


class FontConfig(BaseModel):
    """Configuration for locating font files."""

    font_dir: Path = Field(
        default=Path("."),
        description="Directory holding the catalog font files",
    )
    catalog: list[FontEntry] = Field(
        default_factory=lambda: [entry.model_copy() for entry in DEFAULT_FONT_CATALOG],
    )

    @property
    def default_font(self) -> str:
        """File name of the first catalog font."""
        return self.catalog[0].value if self.catalog else ""


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


class StencilSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    limits: InputLimits = Field(default_factory=InputLimits)
    fonts: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StencilSettings:
    """Get default application settings."""
    return StencilSettings()
