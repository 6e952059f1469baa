"""
sozi_export/backends/renderer.py -- Headless browser frame export (PhantomJS)

Launches PhantomJS on one of the two export scripts:

  - frames script: one PNG per presentation frame, with include/exclude
    filters (used for PDF and PPTX)
  - video script: one PNG per animation step, named img<N>.png (video)

The scripts themselves are external; only their argument order matters here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from sozi_export.backends.base import RenderRequest, RenderResult, run_tool

logger = logging.getLogger(__name__)

PHANTOMJS_HINT = "Check that PhantomJS is installed and on the PATH."


class PhantomRenderer:
    """FrameRenderer backed by the PhantomJS export scripts."""

    def __init__(
        self,
        executable: str = "phantomjs",
        frames_script: Union[str, Path] = "export-frames.js",
        video_script: Union[str, Path] = "export-video.js",
    ):
        self.executable = executable
        self.frames_script = Path(frames_script)
        self.video_script = Path(video_script)

    def command(self, request: RenderRequest) -> list:
        """Build the renderer command line for a request."""
        script = self.video_script if request.video else self.frames_script
        cmd = [
            self.executable,
            script,
            request.input_path,
            request.staging_dir,
            request.width,
            request.height,
            request.png_compression,
        ]
        if not request.video:
            cmd += [request.include, request.exclude]
        return cmd

    def render(self, request: RenderRequest) -> RenderResult:
        returncode = run_tool(self.command(request), hint=PHANTOMJS_HINT)
        if returncode != 0:
            logger.warning("Renderer exited with status %d", returncode)
        return RenderResult(staging_dir=request.staging_dir, returncode=returncode)
