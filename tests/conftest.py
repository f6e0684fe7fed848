"""Shared fixtures for fsops tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def fs_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def sample_tree(fs_tmp: Path) -> Path:
    """Build tree/{x.txt, sub/y.txt, sub/deeper/z.bin} under the temp dir."""
    root = fs_tmp / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "x.txt").write_text("x content")
    (root / "sub" / "y.txt").write_text("y content")
    (root / "sub" / "deeper" / "z.bin").write_bytes(b"\x00\x01\xff")
    return root
