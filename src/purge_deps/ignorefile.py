"""Fold .gitignore lines into the ignore list."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from purge_deps.errors import FileSystemError
from purge_deps.logging import get_logger

log = get_logger("ignorefile")

GITIGNORE = Path(".gitignore")


def parse_ignore_lines(lines: Iterable[str], targets: Iterable[str] = ()) -> list[str]:
    """Return the trimmed lines that should join the ignore list.

    Blank lines, ``#`` comments and lines naming an existing target are
    dropped. Order is kept and duplicates are not removed. Lines are taken
    as exact bare names, not glob patterns.
    """
    target_names = set(targets)
    names: list[str] = []
    for line in lines:
        name = line.strip()
        if not name or name.startswith("#") or name in target_names:
            continue
        names.append(name)
    return names


def load_ignore_file(
    path: Path = GITIGNORE, targets: Iterable[str] = ()
) -> list[str] | None:
    """Read ignore names from ``path``, relative to the working directory.

    A missing file is not an error: None is returned so the caller can
    tell the user.

    Raises:
        FileSystemError: If the file exists but cannot be read.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            names = parse_ignore_lines(f, targets)
    except FileNotFoundError:
        log.debug("No ignore file at %s", path)
        return None
    except OSError as e:
        raise FileSystemError("reading", path, e) from e

    log.debug("Loaded %d ignore entries from %s", len(names), path)
    return names
