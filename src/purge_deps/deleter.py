"""Recursive removal of dependency artifacts beneath a root directory.

The walk is depth-first and pre-order. For every entry the ignore list is
checked before the target list, so an ignored name is never deleted and
never descended into. The first failure aborts the whole walk; anything
deleted before it stays deleted.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from purge_deps.config.schema import Config
from purge_deps.errors import FileSystemError
from purge_deps.logging import get_logger

log = get_logger("walk")

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


@dataclass
class PurgeResult:
    """Paths touched by one walk."""

    files: list[Path] = field(default_factory=list)
    folders: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)  # Undecodable names

    @property
    def removed(self) -> list[Path]:
        return self.folders + self.files


def _is_undecodable(name: str) -> bool:
    """True for names the filesystem encoding could not decode.

    Such names carry lone surrogates from the ``surrogateescape`` handler.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def purge(config: Config) -> PurgeResult:
    """Delete every target under ``config.root``.

    Raises:
        FileSystemError: On the first listing or deletion failure.
    """
    result = PurgeResult()
    _walk(Path(config.root), config, result)
    return result


def _walk(directory: Path, config: Config, result: PurgeResult) -> None:
    log.debug("Scanning %s", directory)
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise FileSystemError("reading directory", directory, e) from e

    for entry in entries:
        path = Path(entry.path)
        name = entry.name

        if _is_undecodable(name):
            err_console.print(
                f"Skipping entry with undecodable name: {escape(repr(str(path)))}"
            )
            result.skipped.append(path)
            continue

        if config.is_ignored(name):
            log.debug("Ignoring %s", path)
            continue

        if config.is_target(name):
            _delete(entry, path, result)
        elif entry.is_dir(follow_symlinks=False):
            _walk(path, config, result)


def _delete(entry: os.DirEntry[str], path: Path, result: PurgeResult) -> None:
    """Remove a matched entry. Symlinks are unlinked, never followed."""
    if entry.is_symlink():
        kind = "link"
    elif entry.is_dir():
        kind = "folder"
    elif entry.is_file():
        kind = "file"
    else:
        log.debug("Not a file or folder, leaving %s", path)
        return

    console.print(f"Deleting {kind}: {escape(str(path))}")
    try:
        if kind == "folder":
            shutil.rmtree(path)
        else:
            os.unlink(path)
    except OSError as e:
        raise FileSystemError(f"deleting {kind}", path, e) from e

    if kind == "folder":
        result.folders.append(path)
    else:
        result.files.append(path)
