"""
shell activation for uvhelpers.

a python process cannot modify its parent shell, so `uvhelpers go` prints
a command that the shell integration evaluates in the calling shell.
"""

from __future__ import annotations

import shlex
from typing import Final

from libvenvlocator import EnvironmentRef, get_activate_script

SUPPORTED_SHELLS: Final[tuple[str, ...]] = ("bash", "zsh", "fish")

_POSIX_INTEGRATION: Final[str] = """\
# uvhelpers shell integration ({shell})
# add to your shell rc file:  eval "$({program} init {shell})"
unset -f uvgo uvls uvmk uvhelp >/dev/null 2>&1 || true
unalias uvgo uvls uvmk uvhelp >/dev/null 2>&1 || true

uvgo() {{
  local __uvhelpers_cmd
  __uvhelpers_cmd="$(command {program} go --shell {shell} "$@")" || return $?
  eval "$__uvhelpers_cmd"
}}

uvls() {{ command {program} ls "$@"; }}
uvmk() {{ command {program} mk "$@"; }}
uvhelp() {{ command {program} help "$@"; }}
"""

_FISH_INTEGRATION: Final[str] = """\
# uvhelpers shell integration (fish)
# add to config.fish:  {program} init fish | source
function uvgo
    set -l __uvhelpers_cmd (command {program} go --shell fish $argv)
    or return $status
    eval $__uvhelpers_cmd
end

function uvls; command {program} ls $argv; end
function uvmk; command {program} mk $argv; end
function uvhelp; command {program} help $argv; end
"""


def _check_shell(shell: str) -> None:
    if shell not in SUPPORTED_SHELLS:
        raise ValueError(
            f"unsupported shell '{shell}' (expected one of: {', '.join(SUPPORTED_SHELLS)})"
        )


def activation_command(env: EnvironmentRef, shell: str = "bash") -> str:
    """
    render the command that activates an environment in the given shell.

    arguments:
        `env: EnvironmentRef`
            environment to activate
        `shell: str`
            target shell, one of `SUPPORTED_SHELLS`

    returns: `str`
        a `source` command with the script path quoted for the shell

    raises:
        `ValueError`
            unsupported shell
    """
    _check_shell(shell)

    if shell == "fish":
        script = get_activate_script(env.venv_path, ".fish")
    else:
        script = env.activate_script

    return f"source {shlex.quote(str(script))}"


def shell_integration(shell: str = "bash", program: str = "uvhelpers") -> str:
    """
    render shell functions wrapping the uvhelpers commands.

    defines `uvgo`, `uvls`, `uvmk` and `uvhelp`; `uvgo` evaluates the
    activation command in the calling shell.

    arguments:
        `shell: str`
            target shell, one of `SUPPORTED_SHELLS`
        `program: str`
            name of the uvhelpers executable

    returns: `str`
        shell source text

    raises:
        `ValueError`
            unsupported shell
    """
    _check_shell(shell)

    if shell == "fish":
        return _FISH_INTEGRATION.format(program=program)
    return _POSIX_INTEGRATION.format(shell=shell, program=program)
