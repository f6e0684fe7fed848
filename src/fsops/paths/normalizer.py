"""Separator normalization and destination resolution.

Everything here is pure string work: no call touches the filesystem, except
``get_working_directory`` which reads the process cwd.
"""

from __future__ import annotations

import os
import re

from fsops.paths.types import DestinationResolution, PathSpec

_SEPARATOR_RUN = re.compile(r"[\\/]+")


def normalize_separators(path: str | os.PathLike[str], sep: str = "/") -> str:
    """Replace every run of ``/`` or ``\\`` with a single ``sep``."""
    return _SEPARATOR_RUN.sub(lambda _m: sep, os.fspath(path))


def _split(path: str, sep: str) -> tuple[str, str]:
    idx = path.rfind(sep)
    if idx == -1:
        return "", path
    head = path[:idx] or sep  # keep the root for "/name"
    return head, path[idx + 1 :]


def normalize(path: str | os.PathLike[str], sep: str = os.sep) -> PathSpec:
    """Normalize separators, strip trailing ones, and derive basename/extension."""
    normalized = normalize_separators(path, sep)
    if len(normalized) > 1:
        normalized = normalized.rstrip(sep) or sep

    basename = "" if normalized == sep else _split(normalized, sep)[1]
    return PathSpec(
        path=normalized,
        basename=basename,
        extension=os.path.splitext(basename)[1],
    )


def join(directory: str, name: str, sep: str = os.sep) -> str:
    """Join a normalized directory and a single entry name."""
    if not directory:
        return name
    if directory.endswith(sep):
        return directory + name
    return f"{directory}{sep}{name}"


def resolve_destination(
    source_basename: str,
    dest_raw: str | os.PathLike[str],
    sep: str = os.sep,
) -> DestinationResolution:
    """Work out where a node named ``source_basename`` lands for ``dest_raw``.

    A destination with an extension is a literal file target. Anything else
    is a directory, and the source basename is appended to it.
    """
    dest = normalize(dest_raw, sep)

    if dest.extension:
        parent = _split(dest.path, sep)[0] or "."
        return DestinationResolution(final_path=dest.path, parent_dir=parent)

    parent = dest.path or "."
    return DestinationResolution(final_path=join(dest.path, source_basename, sep), parent_dir=parent)


def get_working_directory() -> str:
    """Return the process working directory, read fresh on every call."""
    return os.getcwd()
