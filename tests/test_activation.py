"""tests for the shell activation helpers."""

from __future__ import annotations

import shlex
from pathlib import Path

import pytest

from libvenvlocator import EnvironmentRef
from uvhelpers.activation import SUPPORTED_SHELLS, activation_command, shell_integration


class TestActivationCommand:
    """tests for activation_command()."""

    def test_posix(self, app: Path) -> None:
        """Test the bash source command."""
        env = EnvironmentRef(root_directory=app)
        command = activation_command(env, "bash")

        assert command == f"source {shlex.quote(str(env.activate_script))}"

    def test_fish(self, app: Path) -> None:
        """Test that fish sources activate.fish."""
        command = activation_command(EnvironmentRef(root_directory=app), "fish")
        assert command.endswith("activate.fish")

    def test_quoting(self, tmp_path: Path) -> None:
        """Test that paths with spaces survive shell evaluation."""
        env = EnvironmentRef(root_directory=tmp_path / "my project")
        command = activation_command(env, "zsh")

        assert shlex.split(command) == ["source", str(env.activate_script)]

    def test_unsupported_shell(self, app: Path) -> None:
        """Test that unknown shells are rejected."""
        with pytest.raises(ValueError, match="unsupported shell"):
            activation_command(EnvironmentRef(root_directory=app), "tcsh")


class TestShellIntegration:
    """tests for shell_integration()."""

    @pytest.mark.parametrize("shell", SUPPORTED_SHELLS)
    def test_defines_all_commands(self, shell: str) -> None:
        """Test that every wrapper function is defined."""
        text = shell_integration(shell)

        for name in ("uvgo", "uvls", "uvmk", "uvhelp"):
            assert name in text
        assert f"uvhelpers go --shell {shell}" in text

    def test_program_name(self) -> None:
        """Test that a custom program name is used."""
        assert "command my-uvhelpers ls" in shell_integration("bash", "my-uvhelpers")

    def test_unsupported_shell(self) -> None:
        """Test that unknown shells are rejected."""
        with pytest.raises(ValueError):
            shell_integration("powershell")
