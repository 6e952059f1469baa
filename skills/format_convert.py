"""
skills/format_convert.py -- Convert a Sozi presentation to .pdf, .pptx or video.

Wraps sozi_export.renderer.format_plugins.get_converter.
"""

from pathlib import Path
from typing import Optional

from sozi_export.renderer.format_plugins import get_converter
from sozi_export.services.converter import ConversionResult


def convert(
    input_path: str,
    target_format: str,
    output_path: Optional[str] = None,
    **options,
) -> ConversionResult:
    """Convert a presentation to the specified format.

    Args:
        input_path: Path to the presentation's HTML file.
        target_format: Target format ("pdf", "pptx", "video").
        output_path: Output file (or frame directory for video images).
            Defaults to the input path with the format's extension.
        **options: Any other conversion option, e.g. paper="a3paper".

    Returns:
        ConversionResult for the conversion.
    """
    if output_path is not None:
        options["output"] = output_path
    converter = get_converter(target_format)
    return converter.convert(Path(input_path), options)
