"""
sozi_export/options/models.py -- Pydantic models for conversion options

Typed replacement for the loose options bag the converters used to take.
Every pipeline reads one of these: the path resolver fills in `output`,
the renderer reads the frame geometry, the assemblers read their own
format-specific fields.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Shared Options ─────────────────────────────────────────────────


class ExportOptions(BaseModel):
    """Options common to every output format."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    output: Optional[Path] = None
    width: float = Field(default=29.7, gt=0)
    height: float = Field(default=21, gt=0)
    resolution: float = Field(default=72, gt=0)  # pixels per width/height unit
    png_compression: int = Field(default=100, ge=0, le=100, alias="pngCompression")
    include: str = "all"  # frame list, syntax owned by the renderer
    exclude: str = "none"

    @property
    def pixel_width(self) -> float:
        return self.width * self.resolution

    @property
    def pixel_height(self) -> float:
        return self.height * self.resolution


# ── Per-Format Options ─────────────────────────────────────────────


class PDFOptions(ExportOptions):
    """Options for the PDF pipeline (pages joined by pdfjam)."""

    paper: str = "a4paper"
    portrait: bool = False


class PPTXOptions(ExportOptions):
    """Options for the PowerPoint pipeline."""

    width: float = Field(default=25, gt=0)
    height: float = Field(default=18.75, gt=0)
    wide: bool = False


class VideoOptions(ExportOptions):
    """
    Options for the video pipeline.

    The video renderer steps through every animation frame, so it takes the
    pixel size directly: `resolution`, `include` and `exclude` are ignored.
    When `images` is set, `output` names a directory that receives the raw
    frames and no video is encoded.
    """

    width: float = Field(default=1024, gt=0)
    height: float = Field(default=768, gt=0)
    bit_rate: str = Field(default="2M", alias="bitRate")
    images: bool = False

    @property
    def pixel_width(self) -> float:
        return self.width

    @property
    def pixel_height(self) -> float:
        return self.height
