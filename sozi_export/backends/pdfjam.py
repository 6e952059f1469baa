"""
sozi_export/backends/pdfjam.py -- Join frame images into a PDF with pdfjam.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from sozi_export.backends.base import ToolFailedError, run_tool

PDFJAM_HINT = "Check that texlive-extra-utils is installed."


class PdfJamJoiner:
    """PageJoiner that shells out to pdfjam, one page per image."""

    def __init__(self, executable: str = "pdfjam"):
        self.executable = executable

    def command(
        self,
        images: Sequence[Path],
        output: Path,
        paper: str,
        portrait: bool = False,
    ) -> list:
        return [
            self.executable,
            # The desired page size
            "--paper", paper,
            # Fit images to pages, do not override page size
            "--rotateoversize", False,
            "--no-landscape" if portrait else "--landscape",
            "--outfile", output,
            *images,
            # Page selector: first page of the preceding source
            1,
        ]  # fmt: skip

    def join(
        self,
        images: Sequence[Path],
        output: Path,
        paper: str,
        portrait: bool = False,
    ) -> Path:
        returncode = run_tool(self.command(images, output, paper, portrait), hint=PDFJAM_HINT)
        if returncode != 0:
            raise ToolFailedError(self.executable, returncode)
        return output
