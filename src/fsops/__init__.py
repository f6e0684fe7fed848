"""Async filesystem utilities: normalize, probe, list, copy, move, remove, read, write."""

from __future__ import annotations

from .content.file_io import read_file_contents, write_file_contents
from .errors import CopyError, FsOpsError, ListError, MoveError, SourceNotFoundError
from .infrastructure.config import EngineConfig
from .listing.lister import list_entries
from .listing.types import ListOptions
from .paths.normalizer import (
    get_working_directory,
    normalize,
    normalize_separators,
    resolve_destination,
)
from .paths.types import DestinationResolution, PathSpec
from .probe.prober import classify, exists, is_dir, is_dir_sync, is_file, is_file_sync
from .probe.types import NodeKind
from .transfer.copy_engine import CopyEngine
from .transfer.move_engine import MoveEngine
from .transfer.operations import copy, move
from .transfer.remover import ensure_directory, remove_recursive

__all__ = [
    "CopyEngine",
    "CopyError",
    "DestinationResolution",
    "EngineConfig",
    "FsOpsError",
    "ListError",
    "ListOptions",
    "MoveEngine",
    "MoveError",
    "NodeKind",
    "PathSpec",
    "SourceNotFoundError",
    "classify",
    "copy",
    "ensure_directory",
    "exists",
    "get_working_directory",
    "is_dir",
    "is_dir_sync",
    "is_file",
    "is_file_sync",
    "list_entries",
    "move",
    "normalize",
    "normalize_separators",
    "read_file_contents",
    "remove_recursive",
    "resolve_destination",
    "write_file_contents",
]
