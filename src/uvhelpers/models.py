"""
resolution request and result models for uvhelpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias, final

from libvenvlocator import EnvironmentRef


@final
@dataclass(frozen=True)
class Implicit:
    """no token given: search from the working directory."""


@final
@dataclass(frozen=True)
class PathLike:
    """
    token interpreted as a directory to search upwards from.

    attributes:
        `value: str`
            the token as given, relative to the working directory unless absolute
    """

    value: str


@final
@dataclass(frozen=True)
class NamedLookup:
    """
    token interpreted as the name of an environment in the base directory.

    attributes:
        `value: str`
            the environment name
    """

    value: str


ResolutionRequest: TypeAlias = Implicit | PathLike | NamedLookup


@final
@dataclass(frozen=True)
class Resolution:
    """
    detailed result of resolving a token.

    attributes:
        `environment: EnvironmentRef`
            the resolved environment
        `request: ResolutionRequest`
            the request that produced the match, after any fallback
        `fast_path: bool`
            whether the working directory matched without an upward search
    """

    environment: EnvironmentRef
    request: ResolutionRequest
    fast_path: bool = False

    def describe(self, base_directory: Path | None = None) -> str:
        """human-readable description of where the environment was found."""
        request = self.request
        if isinstance(request, Implicit):
            if self.fast_path:
                return "current directory './.venv'"
            return "current directory or parents"
        if isinstance(request, PathLike):
            return f"specified path ({request.value}) or parents"
        if base_directory is not None:
            return f"named environment '{request.value}' in {base_directory}"
        return f"named environment '{request.value}'"
