"""
sozi_export/backends/transcoder.py -- Encode staged frames as a video

Tries ffmpeg first and falls back to avconv (libav) with the same
arguments when ffmpeg is not installed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from sozi_export.backends.base import ToolFailedError, ToolNotFoundError, run_tool

logger = logging.getLogger(__name__)

FRAME_RATE = 50
FRAME_PATTERN = "img%d.png"
TRANSCODER_HINT = "Check that FFMPEG or libav is installed."


class FFmpegTranscoder:
    """Transcoder backed by ffmpeg, or avconv when ffmpeg is missing."""

    def __init__(self, executables: Sequence[str] = ("ffmpeg", "avconv")):
        self.executables = tuple(executables)

    def arguments(self, staging_dir: Path, output: Path, bit_rate: str) -> list:
        return [
            # Frames per second
            "-r", FRAME_RATE,
            # Read a numbered sequence of image files
            "-f", "image2",
            "-i", Path(staging_dir) / FRAME_PATTERN,
            "-b:v", bit_rate,
            # Overwrite the output file without asking
            "-y",
            output,
        ]  # fmt: skip

    def transcode(self, staging_dir: Path, output: Path, bit_rate: str) -> Path:
        args = self.arguments(staging_dir, output, bit_rate)
        for i, executable in enumerate(self.executables):
            try:
                returncode = run_tool([executable, *args])
            except ToolNotFoundError:
                if i + 1 < len(self.executables):
                    logger.info(
                        "%s executable not found. Trying %s.",
                        executable,
                        self.executables[i + 1],
                    )
                continue
            if returncode != 0:
                raise ToolFailedError(executable, returncode)
            return output

        raise ToolNotFoundError(" or ".join(self.executables), TRANSCODER_HINT)
