"""
core upward-search logic for libvenvlocator.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .models import EnvironmentRef
from .utils import has_marker, is_directory

logger = logging.getLogger(__name__)


def canonicalize(path: str | Path) -> Path | None:
    """
    resolve a path to its absolute, symlink-free form.

    arguments:
        `path: str | Path`
            path to canonicalize, taken literally (no `~` expansion); relative
            paths are taken from the process cwd

    returns: `Path | None`
        canonical directory path, or None if the path cannot be resolved
        or is not an existing directory
    """
    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        # RuntimeError covers symlink loops on older interpreters
        return None

    if not is_directory(resolved):
        return None

    return resolved


def locate(start_directory: str | Path) -> EnvironmentRef | None:
    """
    find the nearest environment at or above a starting directory.

    walks strictly upwards, one parent at a time, and never descends into
    sibling directories. each call re-walks from scratch.

    arguments:
        `start_directory: str | Path`
            directory to start searching from

    returns: `EnvironmentRef | None`
        reference to the nearest marked directory, None if the walk reaches
        the filesystem root without finding one or the start is invalid
    """
    current = canonicalize(start_directory)
    if current is None:
        logger.debug("cannot canonicalize start directory: %s", start_directory)
        return None

    while True:
        logger.debug("checking for marker in: %s", current)
        if has_marker(current):
            return EnvironmentRef(root_directory=current)

        parent = current.parent
        # reached the filesystem (or drive) root
        if parent == current:
            logger.debug("reached filesystem root without a marker")
            return None

        current = parent
