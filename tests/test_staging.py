"""
tests/test_staging.py -- Tests for staging directories and frame ordering
"""

import os
from pathlib import Path

import pytest

from sozi_export.services.staging import (
    STAGING_PREFIX,
    frames_since,
    list_frames,
    snapshot_frames,
    staging_directory,
)


class TestStagingDirectory:
    def test_temporary_dir_removed_with_contents(self):
        with staging_directory() as d:
            assert d.is_dir()
            assert d.name.startswith(STAGING_PREFIX)
            (d / "img1.png").write_bytes(b"x")
            (d / "nested").mkdir()
            (d / "nested" / "leftover").write_text("y")
        assert not d.exists()

    def test_removed_on_error(self):
        with pytest.raises(RuntimeError):
            with staging_directory() as d:
                raise RuntimeError("boom")
        assert not d.exists()

    def test_unique_per_call(self):
        with staging_directory() as a, staging_directory() as b:
            assert a != b

    def test_kept_directory_survives(self, tmp_path):
        target = tmp_path / "frames"
        with staging_directory(keep_in=target) as d:
            assert d == target
            (d / "img1.png").write_bytes(b"x")
        assert (target / "img1.png").exists()


class TestListFrames:
    def test_numeric_order(self, tmp_path):
        for i in (10, 2, 1, 9):
            (tmp_path / f"img{i}.png").write_bytes(b"x")
        assert [p.name for p in list_frames(tmp_path)] == [
            "img1.png",
            "img2.png",
            "img9.png",
            "img10.png",
        ]

    def test_only_png(self, tmp_path):
        (tmp_path / "frame1.png").write_bytes(b"x")
        (tmp_path / "notes.txt").write_text("n")
        assert list_frames(tmp_path) == [tmp_path / "frame1.png"]

    def test_names_without_index_last(self, tmp_path):
        (tmp_path / "cover.png").write_bytes(b"x")
        (tmp_path / "frame3.png").write_bytes(b"x")
        assert [p.name for p in list_frames(tmp_path)] == ["frame3.png", "cover.png"]

    def test_empty(self, tmp_path):
        assert list_frames(Path(tmp_path)) == []


class TestFramesSince:
    def test_only_new_frames(self, tmp_path):
        (tmp_path / "cover.png").write_bytes(b"x")
        before = snapshot_frames(tmp_path)
        (tmp_path / "img1.png").write_bytes(b"x")
        (tmp_path / "img2.png").write_bytes(b"x")
        assert [p.name for p in frames_since(tmp_path, before)] == ["img1.png", "img2.png"]

    def test_rewritten_frame_counts(self, tmp_path):
        frame = tmp_path / "img1.png"
        frame.write_bytes(b"old")
        before = snapshot_frames(tmp_path)
        os.utime(frame, ns=(before[frame] + 10**9, before[frame] + 10**9))
        assert frames_since(tmp_path, before) == [frame]
