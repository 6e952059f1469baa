"""
sozi_export/renderer/format_plugins.py -- Output format converter registry

Maps a target format name ("pdf", "pptx", "video"/"ogv") to the pipeline
that produces it, so callers can pick a converter from user input.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from sozi_export.services.converter import (
    ConversionResult,
    ToolConfig,
    convert_to_pdf,
    convert_to_pptx,
    convert_to_video,
)


class FormatConverter(Protocol):
    """Plugin interface for output format converters."""

    def can_convert(self, target_format: str) -> bool: ...
    def convert(
        self,
        input_path: Path,
        options: Optional[Mapping[str, Any]] = None,
        tools: Optional[ToolConfig] = None,
    ) -> ConversionResult: ...


class PDFConverter:
    """Presentation → .pdf via pdfjam."""

    def can_convert(self, target_format: str) -> bool:
        return target_format.lower() == "pdf"

    def convert(
        self,
        input_path: Path,
        options: Optional[Mapping[str, Any]] = None,
        tools: Optional[ToolConfig] = None,
    ) -> ConversionResult:
        return convert_to_pdf(input_path, options, tools=tools)


class PPTXConverter:
    """Presentation → .pptx, one slide per frame."""

    def can_convert(self, target_format: str) -> bool:
        return target_format.lower() == "pptx"

    def convert(
        self,
        input_path: Path,
        options: Optional[Mapping[str, Any]] = None,
        tools: Optional[ToolConfig] = None,
    ) -> ConversionResult:
        return convert_to_pptx(input_path, options, tools=tools)


class VideoConverter:
    """Presentation → .ogv via ffmpeg/avconv."""

    def can_convert(self, target_format: str) -> bool:
        return target_format.lower() in ("video", "ogv")

    def convert(
        self,
        input_path: Path,
        options: Optional[Mapping[str, Any]] = None,
        tools: Optional[ToolConfig] = None,
    ) -> ConversionResult:
        return convert_to_video(input_path, options, tools=tools)


def get_converter(target_format: str) -> FormatConverter:
    """Get the appropriate converter for a target format."""
    converters: list[FormatConverter] = [PDFConverter(), PPTXConverter(), VideoConverter()]
    for c in converters:
        if c.can_convert(target_format):
            return c
    raise ValueError(f"No converter available for format: {target_format}")
