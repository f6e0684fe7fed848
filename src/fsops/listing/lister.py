"""Directory listing with extension filtering and optional recursion."""

from __future__ import annotations

import asyncio
import os
import stat
from typing import Any

import aiofiles.os

from fsops.errors import ListError
from fsops.infrastructure.logger import logger
from fsops.listing.types import ListOptions
from fsops.paths.normalizer import join, normalize_separators


def _identify(directory: str, name: str, options: ListOptions) -> str:
    if options.full_path:
        return normalize_separators(os.path.abspath(join(directory, name)))
    return name


async def _read_dir(directory: str) -> tuple[str, list[str]]:
    try:
        return directory, await aiofiles.os.listdir(directory)
    except OSError as err:
        raise ListError(f"Cannot list directory: {directory}", path=directory) from err


async def _stat_entry(path: str) -> os.stat_result:
    try:
        return await aiofiles.os.stat(path)
    except OSError as err:
        raise ListError(f"Cannot stat entry: {path}", path=path) from err


async def list_entries(
    dir_path: str | os.PathLike[str],
    options: ListOptions | None = None,
    **kwargs: Any,
) -> list[str]:
    """List the entries of ``dir_path``.

    Pass either a ``ListOptions`` or its fields as keywords. In recursive mode
    directories are walked but never returned; only leaf files are. Sibling
    directories are read concurrently, so the order of the result is not
    defined.

    Raises:
        ListError: If the root, or any directory or entry under it in
            recursive mode, cannot be read.
    """
    if options is not None and kwargs:
        raise TypeError("Pass either a ListOptions or keyword options, not both")
    opts = options if options is not None else ListOptions(**kwargs)

    root = os.fspath(dir_path)
    _, names = await _read_dir(root)

    if not opts.recursive:
        return [_identify(root, name, opts) for name in names if opts.matches(name)]

    root_info = await _stat_entry(root)
    entries: list[str] = []
    visited: set[tuple[int, int]] = {(root_info.st_dev, root_info.st_ino)}
    frontier: list[tuple[str, list[str]]] = [(root, names)]

    while frontier:
        children = [(directory, name) for directory, listing in frontier for name in listing]
        infos = await asyncio.gather(*(_stat_entry(join(directory, name)) for directory, name in children))

        subdirs: list[str] = []
        for (directory, name), info in zip(children, infos):
            if stat.S_ISDIR(info.st_mode):
                # Symlinked directories can loop back onto an ancestor
                key = (info.st_dev, info.st_ino)
                if key not in visited:
                    visited.add(key)
                    subdirs.append(join(directory, name))
            elif opts.matches(name):
                entries.append(_identify(directory, name, opts))

        frontier = list(await asyncio.gather(*(_read_dir(subdir) for subdir in subdirs)))

    logger.debug("Listed directory", path=root, entries=len(entries), recursive=True)
    return entries
