"""
conftest for libvenvlocator tests.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest


def _write_marker(root: Path, python_version: str | None = None) -> Path:
    """create a fake .venv with an activation script under root."""
    venv = root / ".venv"
    bin_dir = venv / ("Scripts" if sys.platform == "win32" else "bin")
    bin_dir.mkdir(parents=True, exist_ok=True)
    (bin_dir / "activate").write_text("# activate\n")
    if python_version is not None:
        (venv / "pyvenv.cfg").write_text(
            f"home = /usr/bin\nimplementation = CPython\nversion_info = {python_version}\n"
        )
    return root


@pytest.fixture
def make_env() -> Callable[..., Path]:
    """factory fixture creating a marked environment root."""

    def factory(root: Path, python_version: str | None = None) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        return _write_marker(root, python_version)

    return factory


@pytest.fixture
def project(tmp_path: Path, make_env: Callable[..., Path]) -> Path:
    """create a marked project with a nested source tree."""
    root = make_env(tmp_path / "work" / "app")
    (root / "src" / "pkg" / "sub").mkdir(parents=True)
    return root.resolve()
