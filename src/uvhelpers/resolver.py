"""
target resolution for uvhelpers.

turns a user-supplied token (nothing, a path, or a bare name) into an
environment reference. resolution is read-only: it performs existence
checks and canonicalization, never activation.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from libvenvlocator import EnvironmentRef, canonicalize, has_marker, is_directory, locate

from .config import Config
from .errors import (
    EnvironmentNotFound,
    NamedEnvironmentNotFound,
    PathNotFound,
    Unresolvable,
)
from .models import Implicit, NamedLookup, PathLike, Resolution, ResolutionRequest

logger = logging.getLogger(__name__)

Locator = Callable[[Path], EnvironmentRef | None]

_SEPARATORS = tuple(sep for sep in {"/", os.sep, os.altsep} if sep)


def is_path_like(token: str) -> bool:
    """
    check whether a token is syntactically a path.

    arguments:
        `token: str`
            user-supplied token

    returns: `bool`
        true if the token contains a path separator or is '.' or '..'
    """
    return token in (".", "..") or any(sep in token for sep in _SEPARATORS)


def _local_path(token: str, cwd: Path) -> Path:
    """interpret a token literally, relative to the working directory."""
    path = Path(token)
    if path.is_absolute():
        return path
    return cwd.joinpath(path)


def classify(token: str | None, cwd: Path, config: Config) -> ResolutionRequest:
    """
    classify a token into a resolution request.

    precedence (first match wins):
    1. empty or absent token: `Implicit`
    2. token containing a separator, or '.' or '..': `PathLike`
    3. base directory configured and existing: `NamedLookup`
       (the resolver falls back to a local directory on a named miss)
    4. token naming an existing directory under cwd: `PathLike`

    arguments:
        `token: str | None`
            user-supplied token
        `cwd: Path`
            working directory relative tokens are interpreted against
        `config: Config`
            configuration

    returns: `ResolutionRequest`
        the classified request

    raises:
        `Unresolvable`
            bare token, no usable base directory, and no local directory
    """
    if not token:
        return Implicit()

    if is_path_like(token):
        return PathLike(token)

    if config.base_directory_exists():
        return NamedLookup(token)

    if is_directory(_local_path(token, cwd)):
        return PathLike(token)

    raise Unresolvable(token)


def _resolve_implicit(cwd: Path, locator: Locator) -> Resolution:
    # zero-hop check before walking any ancestors
    if has_marker(cwd):
        root = canonicalize(cwd)
        if root is not None:
            logger.debug("fast path: marker in working directory %s", root)
            return Resolution(EnvironmentRef(root_directory=root), Implicit(), fast_path=True)

    env = locator(cwd)
    if env is None:
        raise EnvironmentNotFound(cwd, "current directory or parents")
    return Resolution(env, Implicit())


def _resolve_path(request: PathLike, cwd: Path, locator: Locator) -> Resolution:
    path = _local_path(request.value, cwd)
    if not is_directory(path):
        raise PathNotFound(request.value)

    env = locator(path)
    if env is None:
        raise EnvironmentNotFound(path, f"specified path ({request.value}) or parents")
    return Resolution(env, request)


def _resolve_named(
    request: NamedLookup, cwd: Path, config: Config, locator: Locator
) -> Resolution:
    base_directory = config.base_directory
    if base_directory is None:
        raise Unresolvable(request.value)

    candidate = base_directory.joinpath(request.value)
    if has_marker(candidate):
        root = canonicalize(candidate)
        if root is not None:
            logger.debug("named environment '%s' found at %s", request.value, root)
            return Resolution(EnvironmentRef(root_directory=root), request)

    # a bare word is ambiguous between a named environment and a local directory
    if is_directory(_local_path(request.value, cwd)):
        logger.debug("named lookup missed, falling back to local directory '%s'", request.value)
        return _resolve_path(PathLike(request.value), cwd, locator)

    raise NamedEnvironmentNotFound(request.value, base_directory)


def resolve_target(
    token: str | None,
    cwd: str | Path,
    config: Config,
    *,
    locator: Locator = locate,
) -> Resolution:
    """
    resolve a token to an environment, keeping details of how it matched.

    arguments:
        `token: str | None`
            user-supplied token (None or empty for the working directory)
        `cwd: str | Path`
            working directory
        `config: Config`
            configuration
        `locator: Locator`
            upward search function (default: `libvenvlocator.locate`)

    returns: `Resolution`
        the resolved environment and the request that produced it

    raises:
        `ResolutionError`
            one of `EnvironmentNotFound`, `PathNotFound`,
            `NamedEnvironmentNotFound`, or `Unresolvable`
    """
    cwd_path = Path(cwd)
    request = classify(token, cwd_path, config)
    logger.debug("classified %r as %s", token, request)

    if isinstance(request, Implicit):
        return _resolve_implicit(cwd_path, locator)
    if isinstance(request, PathLike):
        return _resolve_path(request, cwd_path, locator)
    return _resolve_named(request, cwd_path, config, locator)


def resolve(
    token: str | None,
    cwd: str | Path,
    config: Config,
    *,
    locator: Locator = locate,
) -> EnvironmentRef:
    """
    resolve a token to an environment reference.

    see `resolve_target()` for arguments and errors.

    returns: `EnvironmentRef`
        the resolved environment
    """
    return resolve_target(token, cwd, config, locator=locator).environment
