"""Path domain types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PathSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str  # Separator-normalized, no trailing separator
    basename: str
    extension: str = ""  # Includes the leading dot, "" when absent


class DestinationResolution(BaseModel):
    model_config = ConfigDict(frozen=True)

    final_path: str
    parent_dir: str
