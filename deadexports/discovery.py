"""File discovery for dead export scans."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Collection, Iterator, List


def discover_files(
    root: Path,
    extensions: Collection[str],
    ignored_dir_names: Collection[str],
) -> List[Path]:
    """Return candidate source files below ``root`` in a stable order.

    Directory entries are visited in sorted name order. Any directory whose base
    name is in ``ignored_dir_names`` is skipped wherever it appears in the tree,
    and a file is included when its final suffix is one of ``extensions``.
    Symlinked directories are treated as files and never descended into.
    """
    extension_set = set(extensions)
    ignored = set(ignored_dir_names)
    return list(_walk(Path(root), extension_set, ignored))


def _walk(current: Path, extensions: set[str], ignored: set[str]) -> Iterator[Path]:
    with os.scandir(current) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            if entry.name in ignored:
                continue
            yield from _walk(Path(entry.path), extensions, ignored)
        elif Path(entry.name).suffix in extensions:
            yield Path(entry.path)


def relative_posix(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` using forward slashes."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["discover_files", "relative_posix"]
