"""Tests for directory listing."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from fsops.errors import ListError
from fsops.listing.lister import list_entries
from fsops.listing.types import ListOptions

if TYPE_CHECKING:
    from pathlib import Path


class TestListOptions:
    def test_defaults(self) -> None:
        opts = ListOptions()
        assert opts.extensions is None
        assert opts.recursive is False
        assert opts.full_path is False

    def test_single_extension_string(self) -> None:
        assert ListOptions(extensions="js").extensions == frozenset({"js"})

    def test_strips_dots_and_lowercases(self) -> None:
        assert ListOptions(extensions=[".JS", "..ts"]).extensions == frozenset({"js", "ts"})

    def test_empty_collection_means_no_filter(self) -> None:
        assert ListOptions(extensions=[]).extensions is None

    def test_rejects_non_string_extensions(self) -> None:
        with pytest.raises(ValidationError):
            ListOptions(extensions=[1, 2])

    def test_matches(self) -> None:
        opts = ListOptions(extensions="js")
        assert opts.matches("a.js")
        assert opts.matches("A.JS")
        assert not opts.matches("a.ts")
        assert not opts.matches("js")
        assert not opts.matches(".js")


class TestListEntries:
    @pytest.fixture(autouse=True)
    def _setup(self, fs_tmp: Path) -> None:
        self.tmp_dir = fs_tmp
        self.root = fs_tmp / "proj"
        (self.root / "sub" / "nested").mkdir(parents=True)
        (self.root / "a.js").write_text("a")
        (self.root / "b.ts").write_text("b")
        (self.root / "c.txt").write_text("c")
        (self.root / "sub" / "y.js").write_text("y")
        (self.root / "sub" / "nested" / "z.JS").write_text("z")

    @pytest.mark.asyncio
    async def test_lists_direct_children(self) -> None:
        result = await list_entries(self.root)
        assert set(result) == {"a.js", "b.ts", "c.txt", "sub"}

    @pytest.mark.asyncio
    async def test_filters_single_extension(self) -> None:
        assert await list_entries(self.root, extensions="js") == ["a.js"]

    @pytest.mark.asyncio
    async def test_filters_multiple_extensions(self) -> None:
        result = await list_entries(self.root, extensions=["js", "ts"])
        assert sorted(result) == ["a.js", "b.ts"]

    @pytest.mark.asyncio
    async def test_extension_filter_excludes_directories(self) -> None:
        result = await list_entries(self.root, ListOptions(extensions="txt"))
        assert result == ["c.txt"]

    @pytest.mark.asyncio
    async def test_recursive_emits_only_leaf_files(self) -> None:
        result = await list_entries(self.root, recursive=True)
        assert sorted(result) == ["a.js", "b.ts", "c.txt", "y.js", "z.JS"]
        assert "sub" not in result
        assert "nested" not in result

    @pytest.mark.asyncio
    async def test_recursive_with_extension_filter(self) -> None:
        result = await list_entries(self.root, recursive=True, extensions="js")
        assert sorted(result) == ["a.js", "y.js", "z.JS"]

    @pytest.mark.asyncio
    async def test_full_path(self) -> None:
        result = await list_entries("proj", recursive=True, full_path=True, extensions="js")
        base = os.path.abspath("proj").replace("\\", "/")
        assert sorted(result) == sorted(
            [f"{base}/a.js", f"{base}/sub/y.js", f"{base}/sub/nested/z.JS"]
        )

    @pytest.mark.asyncio
    async def test_full_path_non_recursive(self) -> None:
        result = await list_entries(self.root, full_path=True, extensions="ts")
        assert result == [str(self.root / "b.ts").replace("\\", "/")]

    @pytest.mark.asyncio
    async def test_empty_directory(self) -> None:
        (self.tmp_dir / "empty").mkdir()
        assert await list_entries(self.tmp_dir / "empty", recursive=True) == []

    @pytest.mark.asyncio
    async def test_missing_root_raises_list_error(self) -> None:
        with pytest.raises(ListError) as exc_info:
            await list_entries(self.tmp_dir / "missing")
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.path == str(self.tmp_dir / "missing")

    @pytest.mark.asyncio
    async def test_file_root_raises_list_error(self) -> None:
        with pytest.raises(ListError):
            await list_entries(self.root / "a.js")

    @pytest.mark.asyncio
    async def test_options_and_keywords_together_rejected(self) -> None:
        with pytest.raises(TypeError):
            await list_entries(self.root, ListOptions(), recursive=True)

    @pytest.mark.asyncio
    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    async def test_broken_entry_fails_whole_recursive_listing(self) -> None:
        os.symlink(self.tmp_dir / "nowhere", self.root / "sub" / "dangling.js")
        with pytest.raises(ListError) as exc_info:
            await list_entries(self.root, recursive=True)
        assert exc_info.value.path.endswith("dangling.js")

    @pytest.mark.asyncio
    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    async def test_symlink_loop_is_walked_once(self) -> None:
        os.symlink(self.root, self.root / "sub" / "loop")
        result = await list_entries(self.root, recursive=True, extensions="ts")
        assert result == ["b.ts"]
