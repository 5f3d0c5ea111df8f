from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


def _list_directory(path: str) -> tuple[list[str], list[str]]:
    files: list[str] = []
    directories: list[str] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        directories.append(entry.name)
                    else:
                        files.append(entry.name)
                except OSError:
                    files.append(entry.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return [], []
    return files, directories


def walk_files(root: str) -> Iterator[str]:
    """Yield every file below ``root``, files of a directory before its children."""
    files, directories = _list_directory(root)
    for name in files:
        yield os.path.join(root, name)
    for name in directories:
        if name in (".", ".."):
            continue
        yield from walk_files(os.path.join(root, name))


def iter_candidates(roots: Iterable[str]) -> Iterator[str]:
    for root in roots:
        yield from walk_files(root)
