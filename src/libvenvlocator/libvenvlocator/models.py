"""
models for libvenvlocator.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from .utils import MARKER_DIR, get_activate_script


@final
@dataclass(frozen=True)
class EnvironmentRef:
    """
    reference to a discovered, activatable virtual environment.

    attributes:
        `root_directory: Path`
            absolute, canonical path to the directory that contains the
            environment marker (the project or named environment root)
    """

    root_directory: Path

    @property
    def display_name(self) -> str:
        """base name of the root directory, or the full path for a filesystem root."""
        return self.root_directory.name or str(self.root_directory)

    @property
    def venv_path(self) -> Path:
        """path to the `.venv` directory beneath the root."""
        return self.root_directory.joinpath(MARKER_DIR)

    @property
    def activate_script(self) -> Path:
        """path to the marker file (the posix activation script)."""
        return get_activate_script(self.venv_path)
