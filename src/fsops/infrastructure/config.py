"""Configuration constants, .env parsing, and engine settings."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ; callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def _read_int(name: str, default: int, env_config: dict[str, str]) -> int:
    raw = os.environ.get(name) or env_config.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Read config values from .env (falls back to os.environ).
_env_config = read_env_file(["FSOPS_CHUNK_SIZE", "FSOPS_MAX_CONCURRENT_IO", "FSOPS_ENCODING"])

CHUNK_SIZE: int = max(1, _read_int("FSOPS_CHUNK_SIZE", 64 * 1024, _env_config))  # 64KB
MAX_CONCURRENT_IO: int = max(1, _read_int("FSOPS_MAX_CONCURRENT_IO", 32, _env_config))
DEFAULT_ENCODING: str = os.environ.get("FSOPS_ENCODING") or _env_config.get("FSOPS_ENCODING", "utf-8")


class EngineConfig:
    """Per-engine I/O settings for copy and move."""

    def __init__(self, chunk_size: int = CHUNK_SIZE, max_concurrent_io: int = MAX_CONCURRENT_IO) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if max_concurrent_io < 1:
            raise ValueError(f"max_concurrent_io must be positive, got {max_concurrent_io}")
        self.chunk_size = chunk_size
        self.max_concurrent_io = max_concurrent_io
