"""tests for environment enumeration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from packaging.version import Version

from uvhelpers.config import Config
from uvhelpers.listing import list_environments, list_named, list_projects, project_display_path
from uvhelpers.resolver import resolve


class TestListNamed:
    """tests for list_named()."""

    def test_named_environments(
        self, config: Config, envs_dir: Path, make_env: Callable[..., Path]
    ) -> None:
        """Test that marked children of the base directory are listed."""
        make_env(envs_dir / "tools", python_version="3.12.4")
        make_env(envs_dir / "data")
        (envs_dir / "not-an-env").mkdir()

        entries = list_named(config)

        assert {e.display_path for e in entries} == {"tools", "data"}
        versions = {e.display_path: e.python_version for e in entries}
        assert versions["tools"] == Version("3.12.4")
        assert versions["data"] is None

    def test_symlinked_named_environment(
        self, config: Config, envs_dir: Path, tmp_path: Path, make_env: Callable[..., Path]
    ) -> None:
        """Test that a symlink in the base directory is listed like uvgo resolves it."""
        target = make_env(tmp_path / "elsewhere" / "shared")
        (envs_dir / "shared").symlink_to(target, target_is_directory=True)

        entries = list_named(config)

        assert [e.display_path for e in entries] == ["shared"]
        assert resolve("shared", tmp_path, config).root_directory == target.resolve()

    def test_missing_base(self, config: Config, tmp_path: Path) -> None:
        """Test that a missing base directory lists nothing."""
        config = replace(config, base_directory=tmp_path / "missing")
        assert list_named(config) == []


class TestListProjects:
    """tests for list_projects()."""

    def test_one_and_two_levels(
        self, config: Config, work_dir: Path, make_env: Callable[..., Path]
    ) -> None:
        """Test projects directly under a root and one level deeper."""
        make_env(work_dir / "app")
        make_env(work_dir / "clients" / "acme")
        make_env(work_dir / "a" / "b" / "too_deep")

        paths = {e.display_path for e in list_projects(config)}

        assert paths == {"(work)/app", "(work)/clients/acme"}

    def test_excludes_base_directory(
        self, tmp_path: Path, work_dir: Path, make_env: Callable[..., Path]
    ) -> None:
        """Test that a base directory inside a search root is not double-reported."""
        base = work_dir / "named"
        make_env(base / "shared")
        make_env(work_dir / "app")
        config = Config(base_directory=base, search_roots=(work_dir,))

        projects = {e.display_path for e in list_projects(config)}
        named = {e.display_path for e in list_named(config)}

        assert projects == {"(work)/app"}
        assert named == {"shared"}

    def test_overlapping_roots_report_once(
        self, config: Config, work_dir: Path, make_env: Callable[..., Path]
    ) -> None:
        """Test that an environment reachable from two roots appears once."""
        make_env(work_dir / "group" / "svc")
        config = replace(config, search_roots=(work_dir, work_dir / "group"))

        entries = list_projects(config)

        assert len(entries) == 1
        assert entries[0].environment.root_directory == work_dir / "group" / "svc"

    def test_missing_roots_are_skipped(self, config: Config, tmp_path: Path) -> None:
        """Test that missing search roots are not fatal."""
        config = replace(config, search_roots=(tmp_path / "nope",))
        assert list_projects(config) == []


class TestListEnvironments:
    """tests for list_environments()."""

    def test_listing(
        self, config: Config, envs_dir: Path, work_dir: Path, make_env: Callable[..., Path]
    ) -> None:
        """Test the combined listing and its json form."""
        make_env(envs_dir / "tools")
        make_env(work_dir / "app")

        listing = list_environments(config)
        data = listing.to_dict()

        assert listing.found_any
        assert listing.base_exists
        assert [e["name"] for e in data["named"]] == ["tools"]
        assert [e["display_path"] for e in data["projects"]] == ["(work)/app"]
        assert data["base_directory"] == str(envs_dir)

    def test_empty(self, config: Config) -> None:
        """Test that nothing found is reported as such."""
        listing = list_environments(config)
        assert not listing.found_any


class TestProjectDisplayPath:
    """tests for project_display_path()."""

    def test_relative_to_first_matching_root(self) -> None:
        """Test display relative to the containing root."""
        roots = [Path("/home/u/projects"), Path("/home/u/dev")]
        assert project_display_path(Path("/home/u/dev/x/y"), roots) == "(dev)/x/y"

    def test_outside_roots(self) -> None:
        """Test that paths outside every root are shown absolute."""
        assert project_display_path(Path("/srv/app"), [Path("/home")]) == str(Path("/srv/app"))
