"""Listing domain types."""

from __future__ import annotations

import os
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator


class ListOptions(BaseModel):
    """Options for ``list_entries``.

    ``extensions`` accepts a single extension or a collection of them, with or
    without the leading dot and in any case. An empty collection means no
    filtering.
    """

    model_config = ConfigDict(frozen=True)

    extensions: frozenset[str] | None = None
    recursive: bool = False
    full_path: bool = False

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: object) -> frozenset[str] | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, Iterable):
            raise ValueError("extensions must be a string or a collection of strings")

        normalized: set[str] = set()
        for ext in value:
            if not isinstance(ext, str):
                raise ValueError(f"extension must be a string, got {type(ext).__name__}")
            cleaned = ext.lstrip(".").lower()
            if cleaned:
                normalized.add(cleaned)
        return frozenset(normalized) or None

    def matches(self, name: str) -> bool:
        """Check whether an entry name passes the extension filter."""
        if self.extensions is None:
            return True
        # splitext treats dotfiles like ".env" as having no extension
        ext = os.path.splitext(name)[1].lstrip(".").lower()
        return bool(ext) and ext in self.extensions
