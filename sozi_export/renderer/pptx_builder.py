"""
sozi_export/renderer/pptx_builder.py -- Frame images to .pptx

Builds a deck with python-pptx: one blank slide per frame, the frame
stretched over the whole slide.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from pptx import Presentation
from pptx.util import Inches

logger = logging.getLogger(__name__)

# ── Geometry Constants ────────────────────────────────────────────

WIDE_SLIDE_WIDTH = Inches(13.333)  # 16:9
WIDE_SLIDE_HEIGHT = Inches(7.5)

BLANK_LAYOUT = 6


def new_deck(wide: bool = False):
    """Create an empty presentation, 4:3 unless `wide`."""
    prs = Presentation()
    if wide:
        prs.slide_width = WIDE_SLIDE_WIDTH
        prs.slide_height = WIDE_SLIDE_HEIGHT
    return prs


def add_frame_slide(prs, image: Path):
    """Append a slide showing `image` at the origin, sized to the slide."""
    slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
    slide.shapes.add_picture(
        str(image),
        0,
        0,
        width=prs.slide_width,
        height=prs.slide_height,
    )
    return slide


def build_deck(frames: Sequence[Path], output: Path, wide: bool = False) -> Path:
    """
    Write a .pptx with one slide per frame image.

    Args:
        frames: Frame images in slide order.
        output: Destination file, overwritten if present.
        wide: Use the 16:9 slide size instead of 4:3.

    Returns:
        Path to the written file.
    """
    prs = new_deck(wide=wide)
    for frame in frames:
        add_frame_slide(prs, frame)

    output = Path(output)
    prs.save(str(output))
    logger.info("Finished creating PowerPoint file: %s", output)
    return output
