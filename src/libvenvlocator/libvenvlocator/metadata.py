"""
environment metadata read from pyvenv.cfg.
"""

from __future__ import annotations

import logging
from pathlib import Path

from packaging.version import InvalidVersion, Version

from .models import EnvironmentRef

logger = logging.getLogger(__name__)

# uv writes `version_info`, the stdlib venv module writes `version`
_VERSION_KEYS = ("version_info", "version")


def read_pyvenv_cfg(venv_path: Path) -> dict[str, str]:
    """
    parse a pyvenv.cfg file into a dictionary.

    arguments:
        `venv_path: Path`
            path to the virtual environment directory

    returns: `dict[str, str]`
        lowercased keys mapped to stripped values, empty if the file is
        missing or unreadable
    """
    cfg = venv_path.joinpath("pyvenv.cfg")
    try:
        text = cfg.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}

    values: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        values[key.strip().lower()] = value.strip()

    return values


def get_python_version(env: EnvironmentRef) -> Version | None:
    """
    get the python version recorded for an environment.

    arguments:
        `env: EnvironmentRef`
            environment to inspect

    returns: `Version | None`
        parsed version, or None if absent or unparseable
    """
    values = read_pyvenv_cfg(env.venv_path)
    for key in _VERSION_KEYS:
        raw = values.get(key)
        if not raw:
            continue
        try:
            return Version(raw)
        except InvalidVersion:
            logger.debug("unparseable %s in %s: %r", key, env.venv_path, raw)

    return None
