"""
upward virtual environment locator.

libvenvlocator finds the nearest directory carrying a `.venv/bin/activate`
marker by walking up from a starting directory, and scans directory trees
for marked directories at fixed depths.

functions:
    `def locate(start_directory: str | Path) -> EnvironmentRef | None`
        find the nearest marked directory at or above a starting directory
    `def iter_marked_directories(root, min_depth, max_depth, exclude) -> Iterator[EnvironmentRef]`
        yield marked directories between two depths below a root
    `def has_marker(directory: Path) -> bool`
        check whether a directory carries the marker
"""

from __future__ import annotations

from .core import canonicalize, locate
from .metadata import get_python_version
from .models import EnvironmentRef
from .scan import iter_marked_directories
from .utils import MARKER_DIR, get_activate_script, has_marker, is_directory, marker_path

__version__ = "0.1.0"
__all__ = [
    "MARKER_DIR",
    "EnvironmentRef",
    "canonicalize",
    "get_activate_script",
    "get_python_version",
    "has_marker",
    "is_directory",
    "iter_marked_directories",
    "locate",
    "marker_path",
]
