"""
sozi_export/backends/base.py -- External tool interfaces

Each external collaborator (headless renderer, page joiner, transcoder) is
reached through a small protocol so the pipelines never build a command
line themselves. The subprocess-backed implementations live next to this
module; tests and alternate backends only need to match the protocols.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


# ── Errors ────────────────────────────────────────────────────────


class ExportError(Exception):
    """Base class for conversion failures."""


class ToolNotFoundError(ExportError):
    """An external executable is missing or could not be started."""

    def __init__(self, tool: str, hint: str = ""):
        self.tool = tool
        self.hint = hint
        message = f"{tool} executable not found."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)


class ToolFailedError(ExportError):
    """An external executable ran but exited with a non-zero status."""

    def __init__(self, tool: str, returncode: int):
        self.tool = tool
        self.returncode = returncode
        super().__init__(f"{tool} exited with status {returncode}")


# ── Requests / Results ────────────────────────────────────────────


@dataclass
class RenderRequest:
    """Everything the headless renderer needs to export one presentation."""

    input_path: Path
    staging_dir: Path
    width: float
    height: float
    png_compression: int
    include: Optional[str] = None
    exclude: Optional[str] = None
    video: bool = False  # step through animations instead of frames


@dataclass
class RenderResult:
    staging_dir: Path
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


# ── Protocols ─────────────────────────────────────────────────────


class FrameRenderer(Protocol):
    """Rasterizes a presentation into numbered PNG files."""

    def render(self, request: RenderRequest) -> RenderResult: ...


class PageJoiner(Protocol):
    """Joins frame images into a single PDF document."""

    def join(
        self,
        images: Sequence[Path],
        output: Path,
        paper: str,
        portrait: bool = False,
    ) -> Path: ...


class Transcoder(Protocol):
    """Encodes the ``img%d.png`` sequence of a staging directory as a video."""

    def transcode(self, staging_dir: Path, output: Path, bit_rate: str) -> Path: ...


# ── Subprocess Helpers ────────────────────────────────────────────


def format_arg(value) -> str:
    """Stringify a command line value, writing whole floats without ``.0``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def run_tool(command: Sequence, hint: str = "") -> int:
    """
    Run an external tool and wait for it to exit.

    The child inherits this process's standard streams, so its output shows
    up live on the caller's console. Returns the exit status.

    Raises:
        ToolNotFoundError: if the executable cannot be found or started.
    """
    args = [format_arg(a) for a in command]
    logger.debug("Running: %s", " ".join(args))
    try:
        completed = subprocess.run(args, check=False)
    except OSError as e:  # missing, not executable, bad path
        raise ToolNotFoundError(args[0], hint) from e
    return completed.returncode
