"""Recursive removal and recursive directory creation."""

from __future__ import annotations

import asyncio
import contextlib
import os
import shutil
import stat

import aiofiles.os


async def remove_recursive(path: str | os.PathLike[str]) -> None:
    """Delete a file, symlink, or directory tree. A missing path is not an error."""
    loop = asyncio.get_running_loop()
    try:
        info = await loop.run_in_executor(None, os.lstat, path)
    except FileNotFoundError:
        return

    if stat.S_ISDIR(info.st_mode):
        await loop.run_in_executor(None, _rmtree, os.fspath(path))
        return

    with contextlib.suppress(FileNotFoundError):
        await aiofiles.os.remove(path)


def _rmtree(path: str) -> None:
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        # Removed by someone else while we were deleting
        if os.path.lexists(path):
            raise


async def ensure_directory(path: str | os.PathLike[str]) -> None:
    """Create ``path`` and any missing ancestors. An existing directory is not an error."""
    await aiofiles.os.makedirs(path, exist_ok=True)
