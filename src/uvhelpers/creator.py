"""
creation of named environments with uv.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from libvenvlocator import MARKER_DIR, EnvironmentRef, canonicalize, is_directory

from .config import Config
from .errors import (
    AlreadyExists,
    DirectoryCreationFailed,
    ExternalToolFailure,
    ExternalToolMissing,
    InvalidName,
    Unresolvable,
)

logger = logging.getLogger(__name__)

Runner = Callable[[list[str]], int]


def run_tool(command: list[str]) -> int:
    """
    run the environment tool, letting its output through to the terminal.

    arguments:
        `command: list[str]`
            full command line

    returns: `int`
        the tool's exit status
    """
    logger.debug("running: %s", command)
    return subprocess.run(command, check=False).returncode


def validate_name(name: str) -> None:
    """
    check that a name addresses exactly one directory below the base.

    arguments:
        `name: str`
            proposed environment name

    raises:
        `InvalidName`
            name is empty, '.', '..', or contains a path separator
    """
    if name in ("", ".", ".."):
        raise InvalidName(name)

    if any(sep in name for sep in ("/", os.sep, os.altsep) if sep):
        raise InvalidName(name)


def check_target(name: str, config: Config) -> tuple[Path, str]:
    """
    run every check that can fail before anything is created.

    arguments:
        `name: str`
            environment name
        `config: Config`
            configuration

    returns: `tuple[Path, str]`
        the environment root `<base>/<name>` and the resolved tool executable

    raises:
        `InvalidName`, `Unresolvable`, `AlreadyExists`, `ExternalToolMissing`
    """
    validate_name(name)

    base_directory = config.base_directory
    if base_directory is None:
        raise Unresolvable(name, "no named environment base directory is configured")

    parent = base_directory.joinpath(name)
    venv_path = parent.joinpath(MARKER_DIR)

    if venv_path.exists():
        raise AlreadyExists(venv_path)
    if parent.exists() and not is_directory(parent):
        raise AlreadyExists(parent, "exists but is not a directory")

    tool = shutil.which(config.tool)
    if tool is None:
        raise ExternalToolMissing(config.tool)

    return parent, tool


def create(
    name: str,
    extra_args: Sequence[str],
    config: Config,
    *,
    runner: Runner | None = None,
) -> EnvironmentRef:
    """
    create a named environment at `<base>/<name>/.venv`.

    the existence check and the creation are not atomic; two concurrent
    creations of the same name may both pass the check.

    arguments:
        `name: str`
            environment name
        `extra_args: Sequence[str]`
            options passed through to `uv venv` (e.g. `-p 3.11`)
        `config: Config`
            configuration
        `runner: Runner | None`
            callable running the tool and returning its exit status
            (default: `run_tool`)

    returns: `EnvironmentRef`
        reference rooted at `<base>/<name>`

    raises:
        `InvalidName`, `Unresolvable`, `AlreadyExists`, `ExternalToolMissing`,
        `DirectoryCreationFailed`, `ExternalToolFailure`
    """
    parent, tool = check_target(name, config)

    logger.debug("creating directory: %s", parent)
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailed(parent, e) from e

    command = [tool, "venv", str(parent.joinpath(MARKER_DIR)), *extra_args]
    returncode = (runner if runner is not None else run_tool)(command)
    if returncode != 0:
        raise ExternalToolFailure(command, returncode)

    root = canonicalize(parent)
    if root is None:
        # the tool succeeded but the directory vanished underneath us
        raise DirectoryCreationFailed(parent, FileNotFoundError(2, "directory disappeared"))

    return EnvironmentRef(root_directory=root)
