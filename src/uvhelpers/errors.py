"""
error types for uvhelpers.

every error is an expected, recoverable condition: the cli reports the
message and returns a nonzero exit code.
"""

from __future__ import annotations

from pathlib import Path


class UvHelpersError(Exception):
    """base class for all uvhelpers errors."""


class ResolutionError(UvHelpersError):
    """a token could not be resolved to an environment."""


class EnvironmentNotFound(ResolutionError):
    """
    no marker was found walking upwards from a valid start directory.

    attributes:
        `start: Path`
            directory the upward search started from
        `source: str`
            human-readable description of where the search was rooted
    """

    def __init__(self, start: Path, source: str) -> None:
        self.start = start
        self.source = source
        super().__init__(f"could not find a uv environment (.venv) for {source}")


class PathNotFound(ResolutionError):
    """a path-like token does not name an existing directory."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"path '{value}' not found")


class NamedEnvironmentNotFound(ResolutionError):
    """a named lookup missed and no local directory fallback applied."""

    def __init__(self, name: str, base_directory: Path) -> None:
        self.name = name
        self.base_directory = base_directory
        super().__init__(
            f"named environment '{name}' not found in {base_directory}"
            f" and '{name}' is not a directory in the current location"
        )


class Unresolvable(ResolutionError):
    """a bare token with no base directory and no matching local directory."""

    def __init__(self, value: str, reason: str = "no named environment base directory exists") -> None:
        self.value = value
        super().__init__(f"cannot resolve '{value}': {reason}")


class CreationError(UvHelpersError):
    """a named environment could not be created."""


class InvalidName(CreationError):
    """an environment name is empty, '.', '..', or contains a separator."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid environment name '{name}'")


class AlreadyExists(CreationError):
    """the creation target is already present."""

    def __init__(self, path: Path, detail: str = "already exists") -> None:
        self.path = path
        super().__init__(f"environment path '{path}' {detail}")


class DirectoryCreationFailed(CreationError):
    """the parent directory of a new environment could not be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"failed to create directory '{path}': {cause.strerror or cause}")


class ExternalToolMissing(CreationError):
    """the environment tool is not on the execution path."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(
            f"'{tool}' command not found, please ensure it is installed and in your PATH"
        )


class ExternalToolFailure(CreationError):
    """the environment tool exited with a nonzero status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"'{' '.join(command[:2])}' failed with exit status {returncode}")
