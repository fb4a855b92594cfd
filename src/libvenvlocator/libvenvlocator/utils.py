"""
marker layout helpers for libvenvlocator.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Final

# name of the environment directory beneath a project or named root
MARKER_DIR: Final[str] = ".venv"


def get_activate_script(venv_path: Path, suffix: str = "") -> Path:
    """
    get the activation script path for a virtual environment.

    handles cross-platform differences between windows and unix.

    arguments:
        `venv_path: Path`
            path to the virtual environment
        `suffix: str`
            script suffix, e.g. ".fish" or ".ps1" (default: posix script)

    returns: `Path`
        path to the activation script (which may not exist)
    """
    if sys.platform == "win32":
        # windows: scripts/activate
        return venv_path.joinpath("Scripts", f"activate{suffix}")

    # unix: bin/activate
    return venv_path.joinpath("bin", f"activate{suffix}")


def marker_path(directory: Path) -> Path:
    """return the marker path for a candidate environment root."""
    return get_activate_script(directory.joinpath(MARKER_DIR))


def has_marker(directory: Path) -> bool:
    """
    check whether a directory carries the environment marker.

    arguments:
        `directory: Path`
            candidate environment root

    returns: `bool`
        true if `<directory>/.venv/bin/activate` is a regular file
    """
    try:
        return marker_path(directory).is_file()
    except OSError:
        # unreadable parents behave like a missing marker
        return False


def is_directory(path: Path) -> bool:
    """
    check whether a path is a directory, following symlinks.

    arguments:
        `path: Path`
            path to check

    returns: `bool`
        true if `path` is a directory; unreadable paths are not
    """
    try:
        return path.is_dir()
    except OSError:
        return False
