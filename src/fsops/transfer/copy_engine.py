"""Recursive copy of files and directory trees."""

from __future__ import annotations

import asyncio
import os
import stat

import aiofiles
import aiofiles.os

from fsops.errors import CopyError, SourceNotFoundError
from fsops.infrastructure.config import EngineConfig
from fsops.infrastructure.logger import logger
from fsops.paths.normalizer import join, normalize, resolve_destination
from fsops.probe.prober import classify, is_within, same_entry, stat_safe
from fsops.probe.types import NodeKind
from fsops.transfer.remover import ensure_directory, remove_recursive


class CopyEngine:
    """Copies a file or a directory tree, replacing whatever sits at the destination.

    Directory trees are walked level by level from an explicit frontier:
    every directory on a level is read concurrently, its subdirectories are
    created, and then its files are streamed concurrently. Directories always
    exist before any file is written into them. The first failure aborts the
    copy; work already in flight is not undone. A directory link that leads
    back to one of its own ancestors fails the copy before anything is
    created for it.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()

    async def copy(self, source: str | os.PathLike[str], dest_raw: str | os.PathLike[str]) -> str:
        """Copy ``source`` to ``dest_raw`` and return the path that was written.

        A file lands at ``dest_raw`` when it has an extension, otherwise at
        ``dest_raw/<source name>``. A directory's contents land in
        ``dest_raw`` itself.

        Raises:
            SourceNotFoundError: If ``source`` does not exist.
            CopyError: If any read, write, or delete fails mid-copy.
        """
        src = normalize(source)
        kind = await classify(src.path)
        if kind is NodeKind.MISSING:
            raise SourceNotFoundError(f"Source not found: {src.path}", path=src.path)

        if kind is NodeKind.DIRECTORY:
            final_path = normalize(dest_raw).path or "."
        else:
            final_path = resolve_destination(src.basename, dest_raw).final_path

        logger.debug("Copying", source=src.path, destination=final_path, kind=kind.value)
        return await self.copy_node(src.path, final_path, kind)

    async def copy_node(self, source: str, final_path: str, kind: NodeKind | None = None) -> str:
        """Copy ``source`` to exactly ``final_path``, with no destination resolution."""
        if kind is None:
            kind = await classify(source)
        if kind is NodeKind.MISSING:
            raise SourceNotFoundError(f"Source not found: {source}", path=source)

        # Bound per call so no loop-bound state outlives it
        semaphore = asyncio.Semaphore(self._config.max_concurrent_io)

        if kind is NodeKind.DIRECTORY:
            await self._copy_tree(source, final_path, semaphore)
        else:
            await self._ensure_dir(os.path.dirname(final_path) or ".")
            await self._copy_file(source, final_path, semaphore)
        return final_path

    async def _ensure_dir(self, path: str, replace_file: bool = False) -> None:
        try:
            if replace_file and await classify(path) is NodeKind.FILE:
                await remove_recursive(path)
            await ensure_directory(path)
        except OSError as err:
            raise CopyError(f"Cannot create directory: {path}", path=path) from err

    async def _read_children(self, directory: str) -> list[str]:
        try:
            return await aiofiles.os.listdir(directory)
        except OSError as err:
            raise CopyError(f"Cannot read directory: {directory}", path=directory) from err

    async def _copy_tree(self, source: str, dest: str, semaphore: asyncio.Semaphore) -> None:
        if same_entry(source, dest):
            return
        if is_within(dest, source):
            raise CopyError(
                f"Cannot copy a directory into itself: {source} -> {dest}",
                path=source,
                details={"destination": dest},
            )

        root_info = await stat_safe(source)
        if root_info is None:
            raise CopyError(f"Entry disappeared during copy: {source}", path=source)

        await self._ensure_dir(dest, replace_file=True)
        # Each directory carries the (device, inode) pairs of itself and its ancestors
        frontier: list[tuple[str, str, frozenset[tuple[int, int]]]] = [
            (source, dest, frozenset({(root_info.st_dev, root_info.st_ino)}))
        ]

        while frontier:
            listings = await asyncio.gather(*(self._read_children(src_dir) for src_dir, _, _ in frontier))
            children = [
                (join(src_dir, name), join(dest_dir, name), ancestors)
                for (src_dir, dest_dir, ancestors), names in zip(frontier, listings)
                for name in names
            ]
            infos = await asyncio.gather(*(stat_safe(child_src) for child_src, _, _ in children))

            subdirs: list[tuple[str, str, frozenset[tuple[int, int]]]] = []
            files: list[tuple[str, str]] = []
            for (child_src, child_dest, ancestors), info in zip(children, infos):
                if info is None:
                    raise CopyError(f"Entry disappeared during copy: {child_src}", path=child_src)
                if stat.S_ISDIR(info.st_mode):
                    identity = (info.st_dev, info.st_ino)
                    if identity in ancestors:
                        raise CopyError(
                            f"Directory link loops back to an ancestor: {child_src}",
                            path=child_src,
                            details={"destination": child_dest},
                        )
                    subdirs.append((child_src, child_dest, ancestors | {identity}))
                else:
                    files.append((child_src, child_dest))

            await asyncio.gather(*(self._ensure_dir(child_dest, replace_file=True) for _, child_dest, _ in subdirs))
            await asyncio.gather(*(self._copy_file(child_src, child_dest, semaphore) for child_src, child_dest in files))
            frontier = subdirs

    async def _copy_file(self, source: str, dest: str, semaphore: asyncio.Semaphore) -> None:
        if same_entry(source, dest):
            return

        async with semaphore:
            try:
                # Replace rather than truncate an existing destination
                await remove_recursive(dest)
                async with aiofiles.open(source, "rb") as reader, aiofiles.open(dest, "wb") as writer:
                    while chunk := await reader.read(self._config.chunk_size):
                        await writer.write(chunk)
            except OSError as err:
                raise CopyError(
                    f"Failed to copy {source} -> {dest}",
                    path=source,
                    details={"destination": dest},
                ) from err
