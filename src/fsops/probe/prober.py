"""Existence and type queries that never raise."""

from __future__ import annotations

import os
import stat

import aiofiles.os

from fsops.probe.types import NodeKind


async def stat_safe(path: str | os.PathLike[str]) -> os.stat_result | None:
    """Return stat info for ``path`` or None if it cannot be stat'ed."""
    try:
        return await aiofiles.os.stat(path)
    except (OSError, ValueError):
        return None


async def exists(path: str | os.PathLike[str]) -> bool:
    return await stat_safe(path) is not None


async def classify(path: str | os.PathLike[str]) -> NodeKind:
    """Probe ``path`` and report whether it is a file, a directory, or missing.

    Results are never cached: the tree can change between two probes.
    Anything that is neither a directory nor missing (sockets, fifos, devices)
    is reported as a file.
    """
    info = await stat_safe(path)
    if info is None:
        return NodeKind.MISSING
    if stat.S_ISDIR(info.st_mode):
        return NodeKind.DIRECTORY
    return NodeKind.FILE


async def is_dir(path: str | os.PathLike[str]) -> bool:
    return await classify(path) is NodeKind.DIRECTORY


async def is_file(path: str | os.PathLike[str]) -> bool:
    info = await stat_safe(path)
    return info is not None and stat.S_ISREG(info.st_mode)


# Sync checks use lstat, so a symlink is neither a file nor a directory here.


def is_dir_sync(path: str | os.PathLike[str]) -> bool:
    try:
        return stat.S_ISDIR(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def is_file_sync(path: str | os.PathLike[str]) -> bool:
    try:
        return stat.S_ISREG(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def entry_path(path: str | os.PathLike[str]) -> str:
    """Absolute form of ``path`` with its parent resolved and its last component kept.

    Two paths with equal entry paths name the same directory entry. A symlink
    or hard link elsewhere that reaches the same node does not.
    """
    absolute = os.path.abspath(path)
    return os.path.join(os.path.realpath(os.path.dirname(absolute)), os.path.basename(absolute))


def same_entry(first: str | os.PathLike[str], second: str | os.PathLike[str]) -> bool:
    """Check whether two paths name the same directory entry."""
    return entry_path(first) == entry_path(second)


def is_within(
    path: str | os.PathLike[str],
    ancestor: str | os.PathLike[str],
    follow_links: bool = True,
) -> bool:
    """Check whether ``path`` is ``ancestor`` or lies below it.

    With ``follow_links`` off, the last component of either path is not resolved.
    """
    resolve = os.path.realpath if follow_links else entry_path
    resolved = resolve(path)
    root = resolve(ancestor)
    return resolved == root or resolved.startswith(root.rstrip(os.sep) + os.sep)
