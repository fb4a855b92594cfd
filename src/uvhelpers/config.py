"""
configuration loading for uvhelpers.

this module builds the read-once configuration record from defaults,
a toml config file, and environment variables. the resulting `Config` is
frozen and passed explicitly to every operation.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from libvenvlocator import is_directory

logger = logging.getLogger(__name__)

# name of the subdirectory of the uv cache that holds named environments
NAMED_ENVS_SUBDIR = "venvs"


def _default_cache_dir() -> Path:
    """uv cache directory, from UV_CACHE_DIR or the default location."""
    if cache_dir := os.environ.get("UV_CACHE_DIR"):
        return Path(cache_dir).expanduser()
    return Path.home().joinpath(".cache", "uv")


def _default_search_roots() -> tuple[Path, ...]:
    home = Path.home()
    return (home.joinpath("projects"), home.joinpath("dev"))


def default_config_file() -> Path:
    """
    location of the user configuration file.

    returns: `Path`
        `$UVHELPERS_CONFIG` if set, else `$XDG_CONFIG_HOME/uvhelpers/config.toml`
    """
    if config_file := os.environ.get("UVHELPERS_CONFIG"):
        return Path(config_file).expanduser()

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    config_home = Path(xdg_config_home) if xdg_config_home else Path.home().joinpath(".config")
    return config_home.joinpath("uvhelpers", "config.toml")


@dataclass(frozen=True)
class Config:
    """
    configuration record for uvhelpers.

    attributes:
        `cache_dir: Path`
            uv cache directory, the default parent of the named environment base
        `base_directory: Path | None`
            directory holding named environments (`<base>/<name>/.venv`)
        `search_roots: tuple[Path, ...]`
            ordered project parent directories scanned by listing
        `tool: str`
            environment tool executable used for creation
    """

    cache_dir: Path = field(default_factory=_default_cache_dir)
    base_directory: Path | None = None
    search_roots: tuple[Path, ...] = field(default_factory=_default_search_roots)
    tool: str = "uv"

    def __post_init__(self) -> None:
        """Ensure path fields are path objects."""
        object.__setattr__(self, "cache_dir", Path(self.cache_dir))
        if self.base_directory is not None:
            object.__setattr__(self, "base_directory", Path(self.base_directory))
        object.__setattr__(self, "search_roots", tuple(Path(p) for p in self.search_roots))

    @classmethod
    def defaults(cls) -> Config:
        """
        Build the default configuration.

        returns: `Config`
            configuration with the named base under `<uv cache>/venvs`
        """
        cache_dir = _default_cache_dir()
        return cls(cache_dir=cache_dir, base_directory=cache_dir.joinpath(NAMED_ENVS_SUBDIR))

    @classmethod
    def from_toml(cls, config_file: str | Path, base: Config | None = None) -> Config | None:
        """
        Load configuration from a toml file.

        arguments:
            `config_file: str | Path`
                path to the toml file
            `base: Config | None`
                configuration the file values are applied on top of

        returns: `Config | None`
            configuration object if the file was read, none otherwise
        """
        config_path = Path(config_file)

        if not config_path.is_file():
            return None

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("ignoring unreadable config file %s: %s", config_path, e)
            return None

        logger.debug("loaded config file: %s", config_path)
        return cls._from_dict(data, base if base is not None else cls.defaults())

    @classmethod
    def from_environment(cls, base: Config | None = None) -> Config:
        """
        Apply configuration from environment variables.

        arguments:
            `base: Config | None`
                configuration the environment values are applied on top of

        returns: `Config`
            configuration with values from environment
        """
        config = base if base is not None else cls.defaults()

        if base_dir := os.environ.get("UVHELPERS_BASE_DIR"):
            config = replace(config, base_directory=Path(base_dir).expanduser())

        if search_paths := os.environ.get("UVHELPERS_SEARCH_PATHS"):
            roots = tuple(Path(p).expanduser() for p in search_paths.split(os.pathsep) if p)
            config = replace(config, search_roots=roots)

        if tool := os.environ.get("UVHELPERS_TOOL"):
            config = replace(config, tool=tool)

        return config

    @classmethod
    def load(cls, config_file: str | Path | None = None) -> Config:
        """
        Load configuration from all available sources.

        sources are loaded in order of priority (later overrides earlier):
        1. default values (derived from UV_CACHE_DIR)
        2. the toml config file
        3. environment variables

        arguments:
            `config_file: str | Path | None`
                config file to read (default: `default_config_file()`)

        returns: `Config`
            merged configuration from all sources
        """
        config = cls.defaults()

        path = Path(config_file) if config_file is not None else default_config_file()
        if file_config := cls.from_toml(path, base=config):
            config = file_config

        config = cls.from_environment(base=config)

        logger.debug(
            "configuration: base_directory=%s search_roots=%s tool=%s",
            config.base_directory,
            [str(p) for p in config.search_roots],
            config.tool,
        )
        return config

    @classmethod
    def _from_dict(cls, data: dict[str, Any], base: Config) -> Config:
        """
        Apply configuration from a dictionary.

        arguments:
            `data: dict[str, Any]`
                configuration dictionary
            `base: Config`
                configuration the values are applied on top of

        returns: `Config`
            configuration object
        """
        config = base

        if "cache_dir" in data:
            cache_dir = Path(str(data["cache_dir"])).expanduser()  # pyright: ignore[reportAny]
            config = replace(config, cache_dir=cache_dir)
            # the named base follows the cache unless set explicitly
            if "base_directory" not in data:
                config = replace(config, base_directory=cache_dir.joinpath(NAMED_ENVS_SUBDIR))

        if "base_directory" in data:
            config = replace(
                config,
                base_directory=Path(str(data["base_directory"])).expanduser(),  # pyright: ignore[reportAny]
            )

        if "search_roots" in data:
            roots = data["search_roots"]  # pyright: ignore[reportAny]
            if isinstance(roots, str):
                roots = [roots]
            config = replace(
                config,
                search_roots=tuple(Path(str(p)).expanduser() for p in roots),  # pyright: ignore[reportAny]
            )

        if "tool" in data:
            config = replace(config, tool=str(data["tool"]))  # pyright: ignore[reportAny]

        return config

    def base_directory_exists(self) -> bool:
        """check whether the named environment base directory is usable."""
        return self.base_directory is not None and is_directory(self.base_directory)
