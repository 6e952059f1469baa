"""
sozi_export/services/converter.py -- Conversion pipelines

Each pipeline runs the same steps:
  resolve output → open staging dir → render frames → assemble → clean up

  - PDF:   frames joined by pdfjam
  - PPTX:  frames placed on slides with python-pptx
  - Video: animation steps encoded by ffmpeg (or avconv), or kept as raw
           PNG files when `images` is set

Failures never raise out of the public functions: they are logged and
reported through ConversionResult.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from sozi_export.backends.base import (
    ExportError,
    FrameRenderer,
    PageJoiner,
    RenderRequest,
    RenderResult,
    Transcoder,
)
from sozi_export.backends.pdfjam import PdfJamJoiner
from sozi_export.backends.renderer import PhantomRenderer
from sozi_export.backends.transcoder import FFmpegTranscoder
from sozi_export.options.models import ExportOptions, PDFOptions, PPTXOptions, VideoOptions
from sozi_export.options.paths import resolve_output_path
from sozi_export.renderer.pptx_builder import build_deck
from sozi_export.services.staging import (
    frames_since,
    list_frames,
    snapshot_frames,
    staging_directory,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
OptionsT = TypeVar("OptionsT", bound=ExportOptions)


@dataclass
class ToolConfig:
    """Executables and renderer scripts used by the default backends."""

    phantomjs: str = "phantomjs"
    frames_script: str = "export-frames.js"
    video_script: str = "export-video.js"
    pdfjam: str = "pdfjam"
    ffmpeg: str = "ffmpeg"
    avconv: str = "avconv"

    @classmethod
    def from_env(cls) -> "ToolConfig":
        """Read overrides from SOZI_EXPORT_<FIELD> environment variables."""
        values = {
            f.name: os.environ.get(f"SOZI_EXPORT_{f.name.upper()}", f.default)
            for f in fields(cls)
        }
        return cls(**values)


@dataclass
class Backends:
    """The external collaborators a pipeline talks to."""

    renderer: FrameRenderer
    joiner: PageJoiner
    transcoder: Transcoder

    @classmethod
    def from_config(cls, tools: Optional[ToolConfig] = None) -> "Backends":
        tools = tools or ToolConfig.from_env()
        return cls(
            renderer=PhantomRenderer(
                executable=tools.phantomjs,
                frames_script=tools.frames_script,
                video_script=tools.video_script,
            ),
            joiner=PdfJamJoiner(executable=tools.pdfjam),
            transcoder=FFmpegTranscoder(executables=(tools.ffmpeg, tools.avconv)),
        )


@dataclass
class ConversionResult:
    """Outcome of one conversion."""

    output_path: Optional[Path] = None
    success: bool = False
    frame_count: int = 0
    renderer_exit_code: Optional[int] = None
    errors: list[str] = field(default_factory=list)


# ── Helpers ───────────────────────────────────────────────────────


def _coerce_options(
    options: Union[OptionsT, Mapping[str, Any], None],
    model: Type[OptionsT],
) -> OptionsT:
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, ExportOptions):
        return model.model_validate(options.model_dump(by_alias=False, exclude_unset=True))
    return model.model_validate(dict(options))


def _render(
    backends: Backends,
    input_path: Path,
    staging_dir: Path,
    options: ExportOptions,
    result: ConversionResult,
    video: bool = False,
) -> RenderResult:
    request = RenderRequest(
        input_path=input_path,
        staging_dir=staging_dir,
        width=options.pixel_width,
        height=options.pixel_height,
        png_compression=options.png_compression,
        include=None if video else options.include,
        exclude=None if video else options.exclude,
        video=video,
    )
    rendered = backends.renderer.render(request)
    result.renderer_exit_code = rendered.returncode
    return rendered


def _fail(result: ConversionResult, message: str) -> ConversionResult:
    logger.error(message)
    result.errors.append(message)
    result.success = False
    return result


# ── Pipelines ─────────────────────────────────────────────────────


def convert_to_pdf(
    input_path: PathLike,
    options: Union[PDFOptions, Mapping[str, Any], None] = None,
    tools: Optional[ToolConfig] = None,
    backends: Optional[Backends] = None,
) -> ConversionResult:
    """
    Render every selected frame and join the frames into one PDF.

    Args:
        input_path: The presentation's HTML file.
        options: PDFOptions (or a dict of them). `output` defaults to the
                 input path with a .pdf extension.
        tools: Executable/script locations, defaults to ToolConfig.from_env().
        backends: Pre-built backends, overrides `tools`.

    Returns:
        ConversionResult; `success` is False if pdfjam is missing or fails.
    """
    input_path = Path(input_path)
    options = _coerce_options(options, PDFOptions)
    backends = backends or Backends.from_config(tools)
    output = resolve_output_path(input_path, options, "pdf")
    result = ConversionResult(output_path=output)

    logger.info("Converting %s to %s", input_path, output)

    try:
        with staging_directory() as staging_dir:
            _render(backends, input_path, staging_dir, options, result)
            frames = list_frames(staging_dir)
            result.frame_count = len(frames)
            backends.joiner.join(frames, output, options.paper, options.portrait)
    except ExportError as e:
        return _fail(result, str(e))

    result.success = True
    return result


def convert_to_pptx(
    input_path: PathLike,
    options: Union[PPTXOptions, Mapping[str, Any], None] = None,
    tools: Optional[ToolConfig] = None,
    backends: Optional[Backends] = None,
) -> ConversionResult:
    """Render every selected frame and place each one on its own slide."""
    input_path = Path(input_path)
    options = _coerce_options(options, PPTXOptions)
    backends = backends or Backends.from_config(tools)
    output = resolve_output_path(input_path, options, "pptx")
    result = ConversionResult(output_path=output)

    logger.info("Converting %s to %s", input_path, output)

    try:
        with staging_directory() as staging_dir:
            _render(backends, input_path, staging_dir, options, result)
            frames = list_frames(staging_dir)
            result.frame_count = len(frames)
            try:
                build_deck(frames, output, wide=options.wide)
            except Exception as e:  # python-pptx, PIL and I/O errors alike
                return _fail(result, f"could not write {output}: {e}")
    except ExportError as e:
        return _fail(result, str(e))

    result.success = True
    return result


def convert_to_video(
    input_path: PathLike,
    options: Union[VideoOptions, Mapping[str, Any], None] = None,
    tools: Optional[ToolConfig] = None,
    backends: Optional[Backends] = None,
) -> ConversionResult:
    """
    Render every animation step and encode the steps as a video.

    With `options.images` the frames are rendered straight into the output
    directory and left there; no video is encoded.
    """
    input_path = Path(input_path)
    options = _coerce_options(options, VideoOptions)
    backends = backends or Backends.from_config(tools)
    output = resolve_output_path(input_path, options, "ogv")
    result = ConversionResult(output_path=output)

    logger.info("Converting %s to %s", input_path, output)

    try:
        with staging_directory(keep_in=output if options.images else None) as staging_dir:
            existing = snapshot_frames(staging_dir)
            _render(backends, input_path, staging_dir, options, result, video=True)
            result.frame_count = len(frames_since(staging_dir, existing))
            if not options.images:
                backends.transcoder.transcode(staging_dir, output, options.bit_rate)
    except ExportError as e:
        return _fail(result, str(e))

    result.success = True
    return result
