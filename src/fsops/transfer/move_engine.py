"""Move files and directory trees, with a copy+delete fallback across devices."""

from __future__ import annotations

import errno
import os

import aiofiles.os

from fsops.errors import CopyError, MoveError, SourceNotFoundError
from fsops.infrastructure.logger import logger
from fsops.paths.normalizer import normalize, resolve_destination
from fsops.probe.prober import classify, is_within, same_entry
from fsops.probe.types import NodeKind
from fsops.transfer.copy_engine import CopyEngine
from fsops.transfer.remover import ensure_directory, remove_recursive


class MoveEngine:
    """Relocates a file or directory tree.

    Tries a single atomic rename of the whole node. Only when the platform
    reports a cross-device rename (EXDEV) does it copy the node and then
    delete the source; that fallback is not atomic and an interruption can
    leave both copies in place.
    """

    def __init__(self, copier: CopyEngine | None = None) -> None:
        self._copier = copier or CopyEngine()

    async def move(self, source: str | os.PathLike[str], dest_raw: str | os.PathLike[str]) -> str:
        """Move ``source`` to ``dest_raw`` and return the final path.

        ``dest_raw`` with an extension is the literal target; otherwise the
        source keeps its name inside ``dest_raw``. Anything already at the
        final path is removed first.

        Raises:
            SourceNotFoundError: If ``source`` does not exist.
            MoveError: If the rename fails for any reason other than a
                cross-device move, or the fallback copy/delete fails.
        """
        src = normalize(source)
        kind = await classify(src.path)
        if kind is NodeKind.MISSING:
            raise SourceNotFoundError(f"Source not found: {src.path}", path=src.path)

        resolution = resolve_destination(src.basename, dest_raw)
        final_path = resolution.final_path

        if same_entry(src.path, final_path):
            return final_path
        if is_within(src.path, final_path, follow_links=False):
            # Clearing the destination would delete the source
            raise MoveError(
                f"Cannot move {src.path} onto its own ancestor {final_path}",
                path=src.path,
                details={"destination": final_path},
            )
        if is_within(final_path, src.path, follow_links=False):
            raise MoveError(
                f"Cannot move {src.path} into its own subtree {final_path}",
                path=src.path,
                details={"destination": final_path},
            )

        try:
            await ensure_directory(resolution.parent_dir)
            await remove_recursive(final_path)
        except OSError as err:
            raise MoveError(f"Cannot prepare destination: {final_path}", path=src.path) from err

        logger.debug("Moving", source=src.path, destination=final_path, kind=kind.value)
        try:
            await aiofiles.os.rename(src.path, final_path)
        except OSError as err:
            if err.errno != errno.EXDEV:
                raise MoveError(
                    f"Failed to move {src.path} -> {final_path}",
                    path=src.path,
                    details={"destination": final_path, "errno": err.errno},
                ) from err
            logger.info("Cross-device move, falling back to copy and delete", source=src.path, destination=final_path)
            await self._copy_then_delete(src.path, final_path, kind)

        return final_path

    async def _copy_then_delete(self, source: str, final_path: str, kind: NodeKind) -> None:
        try:
            await self._copier.copy_node(source, final_path, kind)
            await remove_recursive(source)
        except (CopyError, SourceNotFoundError, OSError) as err:
            raise MoveError(
                f"Cross-device move failed: {source} -> {final_path}",
                path=source,
                details={"destination": final_path},
            ) from err
