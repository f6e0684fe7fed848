"""Whole-file text and binary reads and writes."""

from __future__ import annotations

import os

import aiofiles

from fsops.infrastructure.config import DEFAULT_ENCODING
from fsops.transfer.remover import ensure_directory


async def read_file_contents(path: str | os.PathLike[str], encoding: str | None = DEFAULT_ENCODING) -> str | bytes:
    """Read a whole file. ``encoding=None`` returns raw bytes."""
    if encoding is None:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()
    async with aiofiles.open(path, "r", encoding=encoding) as f:
        return await f.read()


async def write_file_contents(
    path: str | os.PathLike[str],
    content: str | bytes,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write a whole file, creating parent directories first."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        await ensure_directory(parent)

    if isinstance(content, bytes):
        async with aiofiles.open(path, "wb") as f:
            await f.write(content)
        return
    async with aiofiles.open(path, "w", encoding=encoding) as f:
        await f.write(content)
