"""Module-level copy and move using the configured defaults."""

from __future__ import annotations

import os

from fsops.transfer.copy_engine import CopyEngine
from fsops.transfer.move_engine import MoveEngine


async def copy(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> str:
    """Copy a file or directory tree. See ``CopyEngine.copy``."""
    return await CopyEngine().copy(source, destination)


async def move(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> str:
    """Move a file or directory tree. See ``MoveEngine.move``."""
    return await MoveEngine().move(source, destination)
