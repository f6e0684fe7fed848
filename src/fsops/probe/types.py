"""Probe domain types."""

from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    """Classification of a path at the moment it was probed."""

    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"
