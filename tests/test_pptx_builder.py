"""
tests/test_pptx_builder.py -- Tests for the frame → .pptx builder
"""

from pathlib import Path

import pytest
from PIL import Image
from pptx import Presentation as PptxPresentation
from pptx.util import Inches

from sozi_export.renderer.pptx_builder import (
    WIDE_SLIDE_HEIGHT,
    WIDE_SLIDE_WIDTH,
    add_frame_slide,
    build_deck,
    new_deck,
)


@pytest.fixture
def frames(tmp_path):
    paths = []
    for i in range(1, 4):
        p = tmp_path / f"frame{i}.png"
        Image.new("RGB", (40, 30), (i * 60, 0, 0)).save(p)
        paths.append(p)
    return paths


class TestNewDeck:
    def test_default_is_4_3(self):
        prs = new_deck()
        assert prs.slide_width == Inches(10)
        assert prs.slide_height == Inches(7.5)

    def test_wide(self):
        prs = new_deck(wide=True)
        assert prs.slide_width == WIDE_SLIDE_WIDTH
        assert prs.slide_height == WIDE_SLIDE_HEIGHT


class TestAddFrameSlide:
    def test_picture_fills_slide(self, frames):
        prs = new_deck()
        slide = add_frame_slide(prs, frames[0])
        pictures = list(slide.shapes)
        assert len(pictures) == 1
        pic = pictures[0]
        assert (pic.left, pic.top) == (0, 0)
        assert pic.width == prs.slide_width
        assert pic.height == prs.slide_height


class TestBuildDeck:
    def test_one_slide_per_frame(self, frames, tmp_path):
        out = build_deck(frames, tmp_path / "deck.pptx")
        assert out.exists()
        assert len(PptxPresentation(str(out)).slides) == 3

    def test_wide_with_zero_slides(self, tmp_path):
        out = build_deck([], tmp_path / "empty.pptx", wide=True)
        prs = PptxPresentation(str(out))
        assert len(prs.slides) == 0
        assert prs.slide_width == WIDE_SLIDE_WIDTH
        assert prs.slide_height == WIDE_SLIDE_HEIGHT

    def test_overwrites_existing_file(self, frames, tmp_path):
        target = tmp_path / "deck.pptx"
        target.write_bytes(b"stale")
        build_deck(frames[:1], target)
        assert len(PptxPresentation(str(target)).slides) == 1

    def test_missing_frame_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_deck([Path(tmp_path / "nope.png")], tmp_path / "deck.pptx")
