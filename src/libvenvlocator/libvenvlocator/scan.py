"""
bounded-depth scanning for marked directories.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .models import EnvironmentRef
from .utils import MARKER_DIR, has_marker, is_directory

logger = logging.getLogger(__name__)


def _child_directories(directory: Path, follow_symlinks: bool = False) -> list[Path]:
    """list child directories, skipping unreadable ones and, unless asked, symlinks."""
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        logger.debug("cannot read directory %s: %s", directory, e)
        return []

    return [
        child
        for child in children
        if child.name != MARKER_DIR
        and is_directory(child)
        and (follow_symlinks or not child.is_symlink())
    ]


def _is_under(path: Path, parent: Path) -> bool:
    """check whether path is parent itself or lies beneath it."""
    return path == parent or parent in path.parents


def iter_marked_directories(
    root: str | Path,
    min_depth: int = 1,
    max_depth: int = 1,
    exclude: Path | None = None,
    follow_top_symlinks: bool = False,
) -> Iterator[EnvironmentRef]:
    """
    lazily yield marked directories between two fixed depths below a root.

    depth 1 is the root's immediate children. symlinked directories are not
    followed, and `.venv` directories themselves are never descended into.
    with `follow_top_symlinks`, symlinked children of the root are checked for
    a marker too, but never descended into.

    arguments:
        `root: str | Path`
            directory to scan; a missing or unreadable root yields nothing
        `min_depth: int`
            shallowest depth at which a marked directory is reported
        `max_depth: int`
            deepest depth that is examined
        `exclude: Path | None`
            canonical directory whose subtree is skipped entirely
        `follow_top_symlinks: bool`
            also report symlinked directories at depth 1

    returns: `Iterator[EnvironmentRef]`
        references in breadth-first, name-sorted order; a symlinked child is
        reported under its link path
    """
    try:
        root_path = Path(root).resolve(strict=True)
    except (OSError, RuntimeError):
        logger.debug("skipping missing scan root: %s", root)
        return

    if not is_directory(root_path):
        return

    level = [root_path]
    for depth in range(1, max_depth + 1):
        follow = follow_top_symlinks and depth == 1
        next_level: list[Path] = []
        for directory in level:
            for child in _child_directories(directory, follow_symlinks=follow):
                if exclude is not None and _is_under(child, exclude):
                    logger.debug("excluding %s (under %s)", child, exclude)
                    continue
                if depth >= min_depth and has_marker(child):
                    yield EnvironmentRef(root_directory=child)
                if not child.is_symlink():
                    next_level.append(child)
        level = next_level
