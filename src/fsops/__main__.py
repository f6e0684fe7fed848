"""Entry point: python -m fsops <command> ..."""

from __future__ import annotations

import argparse
import asyncio
import sys

from fsops.errors import FsOpsError
from fsops.infrastructure.logger import install_exception_hooks, logger, setup_logging
from fsops.listing.lister import list_entries
from fsops.listing.types import ListOptions
from fsops.transfer.operations import copy, move
from fsops.transfer.remover import ensure_directory, remove_recursive


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fsops", description="Async filesystem utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("copy", "Copy a file or directory tree"), ("move", "Move a file or directory tree")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("source")
        cmd.add_argument("destination")

    ls = sub.add_parser("ls", help="List directory entries")
    ls.add_argument("path")
    ls.add_argument("--ext", action="append", dest="extensions", help="Only list this extension (repeatable)")
    ls.add_argument("--recursive", "-r", action="store_true", help="Walk subdirectories, listing files only")
    ls.add_argument("--full-path", action="store_true", help="Print absolute paths instead of names")

    rm = sub.add_parser("rm", help="Remove a file or directory tree")
    rm.add_argument("path")

    mkdir = sub.add_parser("mkdir", help="Create a directory and its parents")
    mkdir.add_argument("path")

    return parser


async def main(args: argparse.Namespace) -> None:
    if args.command == "copy":
        print(await copy(args.source, args.destination))
    elif args.command == "move":
        print(await move(args.source, args.destination))
    elif args.command == "ls":
        options = ListOptions(extensions=args.extensions, recursive=args.recursive, full_path=args.full_path)
        for entry in sorted(await list_entries(args.path, options)):
            print(entry)
    elif args.command == "rm":
        await remove_recursive(args.path)
    elif args.command == "mkdir":
        await ensure_directory(args.path)


def run(argv: list[str] | None = None) -> int:
    setup_logging()
    install_exception_hooks()
    args = build_parser().parse_args(argv)

    try:
        asyncio.run(main(args))
    except (FsOpsError, OSError) as err:
        logger.error(str(err), command=args.command, path=getattr(err, "filename", None) or getattr(err, "path", None))
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(run())
