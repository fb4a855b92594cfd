"""
uvhelpers: shell shortcuts for uv virtual environments.

this package resolves project-local and named uv environments, lists what
exists, and creates named environments, with a shell integration that
performs the activation in the calling shell.
"""

from __future__ import annotations

from libvenvlocator import EnvironmentRef

from .activation import activation_command, shell_integration
from .config import Config
from .creator import check_target, create, validate_name
from .errors import (
    AlreadyExists,
    CreationError,
    DirectoryCreationFailed,
    EnvironmentNotFound,
    ExternalToolFailure,
    ExternalToolMissing,
    InvalidName,
    NamedEnvironmentNotFound,
    PathNotFound,
    ResolutionError,
    Unresolvable,
    UvHelpersError,
)
from .listing import Listing, ListedEnvironment, list_environments
from .models import Implicit, NamedLookup, PathLike, Resolution, ResolutionRequest
from .resolver import classify, resolve, resolve_target

__version__ = "0.1.0"
__all__ = [
    "AlreadyExists",
    "Config",
    "CreationError",
    "DirectoryCreationFailed",
    "EnvironmentNotFound",
    "EnvironmentRef",
    "ExternalToolFailure",
    "ExternalToolMissing",
    "Implicit",
    "InvalidName",
    "ListedEnvironment",
    "Listing",
    "NamedEnvironmentNotFound",
    "NamedLookup",
    "PathLike",
    "PathNotFound",
    "Resolution",
    "ResolutionError",
    "ResolutionRequest",
    "Unresolvable",
    "UvHelpersError",
    "activation_command",
    "check_target",
    "classify",
    "create",
    "list_environments",
    "resolve",
    "resolve_target",
    "shell_integration",
    "validate_name",
]
