"""
conftest for uvhelpers tests.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest import mock

import pytest

from uvhelpers.config import Config

_CONFIG_ENV_VARS = (
    "UV_CACHE_DIR",
    "UVHELPERS_CONFIG",
    "UVHELPERS_BASE_DIR",
    "UVHELPERS_SEARCH_PATHS",
    "UVHELPERS_TOOL",
    "XDG_CONFIG_HOME",
)


@pytest.fixture(autouse=True)
def clean_environment(tmp_path: Path) -> Iterator[None]:
    """isolate tests from the user's uv and uvhelpers settings."""
    env = {key: value for key, value in os.environ.items() if key not in _CONFIG_ENV_VARS}
    env["HOME"] = str(tmp_path / "home")
    with mock.patch.dict(os.environ, env, clear=True):
        yield


def write_marker(root: Path, python_version: str | None = None) -> Path:
    """create a fake .venv with an activation script under root."""
    venv = root / ".venv"
    bin_dir = venv / ("Scripts" if sys.platform == "win32" else "bin")
    bin_dir.mkdir(parents=True, exist_ok=True)
    (bin_dir / "activate").write_text("# activate\n")
    (bin_dir / "activate.fish").write_text("# activate.fish\n")
    if python_version is not None:
        (venv / "pyvenv.cfg").write_text(f"home = /usr/bin\nversion_info = {python_version}\n")
    return root


@pytest.fixture
def make_env() -> Callable[..., Path]:
    """factory fixture creating a marked environment root."""

    def factory(root: Path, python_version: str | None = None) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        return write_marker(root, python_version)

    return factory


@pytest.fixture
def envs_dir(tmp_path: Path) -> Path:
    """create the named environment base directory."""
    base = tmp_path / "envs"
    base.mkdir()
    return base.resolve()


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """create a project search root."""
    work = tmp_path / "work"
    work.mkdir()
    return work.resolve()


@pytest.fixture
def config(tmp_path: Path, envs_dir: Path, work_dir: Path) -> Config:
    """configuration pointing at the temporary base and search root."""
    return Config(
        cache_dir=tmp_path / "cache",
        base_directory=envs_dir,
        search_roots=(work_dir,),
    )


@pytest.fixture
def app(work_dir: Path, make_env: Callable[..., Path]) -> Path:
    """create a marked project `work/app` with a nested source tree."""
    root = make_env(work_dir / "app")
    (root / "src" / "pkg").mkdir(parents=True)
    return root
