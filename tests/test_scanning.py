import os

import pytest

from photo_sorter.scanning.filesystem import DiskScanner

symlinks = pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt",
                              reason="symlinks not available")


def test_scanner_iterates_in_stable_order(tmp_path):
    root = tmp_path
    sub = root / "a"
    sub.mkdir()
    (sub / "b.txt").write_text("b")
    (root / "c.txt").write_text("c")
    (root / "empty").mkdir()

    files = list(DiskScanner().iter_files(root))

    assert files == [root / "c.txt", sub / "b.txt"]


def test_scanner_skips_dirs(tmp_path):
    skip_dir = tmp_path / "skip"
    skip_dir.mkdir()
    (skip_dir / "skip.txt").write_text("skip")
    (tmp_path / "keep.txt").write_text("keep")

    files = list(DiskScanner().iter_files(tmp_path, skip_dirs={skip_dir}))

    assert files == [tmp_path / "keep.txt"]


@symlinks
def test_scanner_follows_links(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "x.jpg").write_text("x")
    root = tmp_path / "root"
    root.mkdir()
    (root / "linked").symlink_to(outside, target_is_directory=True)
    (root / "file_link.jpg").symlink_to(outside / "x.jpg")

    files = list(DiskScanner().iter_files(root))

    assert root / "file_link.jpg" in files
    assert root / "linked" / "x.jpg" in files


@symlinks
def test_scanner_survives_link_loop(tmp_path):
    root = tmp_path / "root"
    (root / "a").mkdir(parents=True)
    (root / "a" / "x.txt").write_text("x")
    (root / "a" / "back").symlink_to(root, target_is_directory=True)

    files = list(DiskScanner().iter_files(root))

    assert files == [root / "a" / "x.txt"]


@symlinks
def test_scanner_skips_broken_links(tmp_path):
    (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")
    (tmp_path / "real.txt").write_text("r")

    assert list(DiskScanner().iter_files(tmp_path)) == [tmp_path / "real.txt"]
