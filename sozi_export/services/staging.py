"""
sozi_export/services/staging.py -- Staging directories for rendered frames

One staging directory per conversion. Temporary ones are removed, with
whatever they contain, when the `with` block exits; a caller-owned
directory (raw video frames) is left in place.
"""

from __future__ import annotations

import logging
import re
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

STAGING_PREFIX = "sozi-export-"

_FRAME_INDEX = re.compile(r"(\d+)")


@contextmanager
def staging_directory(keep_in: Optional[Path] = None) -> Iterator[Path]:
    """Yield a directory for the renderer to write frames into."""
    if keep_in is not None:
        keep_in = Path(keep_in)
        keep_in.mkdir(parents=True, exist_ok=True)
        logger.debug("Rendering frames into %s (kept)", keep_in)
        yield keep_in
        return

    with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX) as tmp:
        logger.debug("Created staging directory %s", tmp)
        yield Path(tmp)
    logger.debug("Removed staging directory %s", tmp)


def _frame_sort_key(path: Path) -> tuple:
    """img2.png before img10.png; names without digits sort last."""
    match = _FRAME_INDEX.search(path.stem)
    index = int(match.group(1)) if match else float("inf")
    return index, path.name


def list_frames(staging_dir: Path) -> list[Path]:
    """Return the staged PNG frames in frame-index order."""
    return sorted(Path(staging_dir).glob("*.png"), key=_frame_sort_key)


def snapshot_frames(staging_dir: Path) -> dict:
    """Map each PNG already in `staging_dir` to its modification time."""
    return {p: p.stat().st_mtime_ns for p in list_frames(staging_dir)}


def frames_since(staging_dir: Path, snapshot: dict) -> list[Path]:
    """Frames created or rewritten after `snapshot` was taken."""
    return [
        p
        for p in list_frames(staging_dir)
        if snapshot.get(p) != p.stat().st_mtime_ns
    ]
