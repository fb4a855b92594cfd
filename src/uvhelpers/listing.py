"""
enumeration of named and project environments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, final

from libvenvlocator import EnvironmentRef, canonicalize, get_python_version, iter_marked_directories
from packaging.version import Version

from .config import Config

logger = logging.getLogger(__name__)

# project environments sit directly under a search root or one level deeper
PROJECT_MIN_DEPTH = 1
PROJECT_MAX_DEPTH = 2


@final
@dataclass(frozen=True)
class ListedEnvironment:
    """
    a single listing entry.

    attributes:
        `environment: EnvironmentRef`
            the discovered environment
        `display_path: str`
            name (named) or `(<root>)/<relative>` path (projects)
        `python_version: Version | None`
            python version recorded in pyvenv.cfg
    """

    environment: EnvironmentRef
    display_path: str
    python_version: Version | None = None

    def to_dict(self) -> dict[str, Any]:
        """convert to a json-serialisable dictionary."""
        return {
            "name": self.environment.display_name,
            "display_path": self.display_path,
            "root_directory": str(self.environment.root_directory),
            "python_version": str(self.python_version) if self.python_version else None,
        }


@dataclass
class Listing:
    """
    result of enumerating environments.

    attributes:
        `base_directory: Path | None`
            named environment base directory
        `base_exists: bool`
            whether the base directory exists
        `search_roots: tuple[Path, ...]`
            project search roots that were scanned
        `named: list[ListedEnvironment]`
            named environments
        `projects: list[ListedEnvironment]`
            project environments found under the search roots
    """

    base_directory: Path | None
    base_exists: bool
    search_roots: tuple[Path, ...]
    named: list[ListedEnvironment] = field(default_factory=list)
    projects: list[ListedEnvironment] = field(default_factory=list)

    @property
    def found_any(self) -> bool:
        return bool(self.named or self.projects)

    def to_dict(self) -> dict[str, Any]:
        """convert to a json-serialisable dictionary."""
        return {
            "base_directory": str(self.base_directory) if self.base_directory else None,
            "search_roots": [str(p) for p in self.search_roots],
            "named": [entry.to_dict() for entry in self.named],
            "projects": [entry.to_dict() for entry in self.projects],
        }


def project_display_path(root: Path, search_roots: list[Path]) -> str:
    """
    format a project root relative to the search root containing it.

    arguments:
        `root: Path`
            canonical environment root
        `search_roots: list[Path]`
            canonical search roots, in configured order

    returns: `str`
        `(<search-root name>)/<relative path>`, or the absolute path when
        the root is not under any search root
    """
    for search_root in search_roots:
        try:
            relative = root.relative_to(search_root)
        except ValueError:
            continue
        return f"({search_root.name})/{relative.as_posix()}"

    return str(root)


def list_named(config: Config) -> list[ListedEnvironment]:
    """
    list named environments in the base directory.

    arguments:
        `config: Config`
            configuration

    returns: `list[ListedEnvironment]`
        entries sorted by name (empty if the base directory is missing)
    """
    if config.base_directory is None:
        return []

    entries = [
        ListedEnvironment(env, env.display_name, get_python_version(env))
        for env in iter_marked_directories(
            config.base_directory, min_depth=1, max_depth=1, follow_top_symlinks=True
        )
    ]
    return sorted(entries, key=lambda e: e.display_path)


def list_projects(config: Config) -> list[ListedEnvironment]:
    """
    list project environments under the configured search roots.

    anything under the named base directory is excluded, and roots reached
    through several search roots are reported once.

    arguments:
        `config: Config`
            configuration

    returns: `list[ListedEnvironment]`
        entries sorted by display path
    """
    exclude = canonicalize(config.base_directory) if config.base_directory else None
    canonical_roots = [root for p in config.search_roots if (root := canonicalize(p)) is not None]

    seen: set[Path] = set()
    entries: list[ListedEnvironment] = []
    for search_root in canonical_roots:
        logger.debug("scanning search root: %s", search_root)
        for env in iter_marked_directories(
            search_root,
            min_depth=PROJECT_MIN_DEPTH,
            max_depth=PROJECT_MAX_DEPTH,
            exclude=exclude,
        ):
            if env.root_directory in seen:
                continue
            seen.add(env.root_directory)
            entries.append(
                ListedEnvironment(
                    env,
                    project_display_path(env.root_directory, canonical_roots),
                    get_python_version(env),
                )
            )

    return sorted(entries, key=lambda e: e.display_path)


def list_environments(config: Config) -> Listing:
    """
    enumerate named and project environments.

    arguments:
        `config: Config`
            configuration

    returns: `Listing`
        everything that was found, plus the locations that were searched
    """
    return Listing(
        base_directory=config.base_directory,
        base_exists=config.base_directory_exists(),
        search_roots=config.search_roots,
        named=list_named(config),
        projects=list_projects(config),
    )
