"""
command-line interface for uvhelpers.

provides commands for activating, listing, and creating uv virtual
environments, and for installing the shell integration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .activation import SUPPORTED_SHELLS, activation_command, shell_integration
from .config import Config, default_config_file
from .creator import check_target, create
from .errors import ResolutionError, UvHelpersError
from .listing import ListedEnvironment, list_environments
from .resolver import resolve_target

PROG = "uvhelpers"


def create_parser() -> argparse.ArgumentParser:
    """
    create the argument parser for the cli.

    returns: `argparse.ArgumentParser`
        configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="shortcuts for activating, listing, and creating uv environments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  eval "$(uvhelpers init bash)"     # install uvgo/uvls/uvmk/uvhelp
  uvhelpers go                       # environment for the current project
  uvhelpers go ../sibling_project    # environment for another project
  uvhelpers go shared_tools          # named environment
  uvhelpers ls                       # list environments
  uvhelpers mk web_py311 -p 3.11     # create a named environment
        """,
    )
    _ = parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging for troubleshooting",
    )

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    # go command
    go_parser = subparsers.add_parser(
        "go",
        help="print the command that activates an environment",
    )
    _ = go_parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="project path or named environment (default: current directory or parents)",
    )
    _ = go_parser.add_argument(
        "--shell",
        choices=SUPPORTED_SHELLS,
        default="bash",
        help="shell to render the activation command for (default: bash)",
    )
    _ = go_parser.add_argument(
        "--print-path",
        action="store_true",
        help="print the environment root directory instead of a source command",
    )

    # ls command
    ls_parser = subparsers.add_parser(
        "ls",
        help="list named and project environments",
    )
    _ = ls_parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="output in json format (default: text)",
    )

    # mk command
    mk_parser = subparsers.add_parser(
        "mk",
        help="make (create) a new named environment",
    )
    _ = mk_parser.add_argument(
        "name",
        help="name of the environment to create",
    )
    _ = mk_parser.add_argument(
        "tool_args",
        nargs=argparse.REMAINDER,
        help="options passed through to 'uv venv' (e.g. -p 3.11)",
    )

    # help command
    _ = subparsers.add_parser(
        "help",
        help="show usage patterns and the active configuration",
    )

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="print the shell integration (uvgo, uvls, uvmk, uvhelp)",
    )
    _ = init_parser.add_argument(
        "shell",
        nargs="?",
        choices=SUPPORTED_SHELLS,
        default="bash",
        help="target shell (default: bash)",
    )

    return parser


def handle_go(args: argparse.Namespace, config: Config) -> int:
    """
    handle the go command.

    arguments:
        `args: argparse.Namespace`
            parsed arguments
        `config: Config`
            configuration

    returns: `int`
        exit code (0 = resolved, 1 = not resolved)
    """
    token_raw = getattr(args, "token", None)
    token = str(token_raw) if token_raw is not None else None  # pyright: ignore[reportAny]
    shell = str(getattr(args, "shell", "bash"))
    print_path = bool(getattr(args, "print_path", False))

    try:
        cwd = Path.cwd()
    except OSError as e:
        print(f"error: cannot determine the current directory: {e}", file=sys.stderr)
        return 1

    try:
        resolution = resolve_target(token, cwd, config)
    except ResolutionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    env = resolution.environment
    if print_path:
        print(env.root_directory)
    else:
        print(activation_command(env, shell))

    print(
        f"activating uv environment: {env.display_name}"
        f" (found via {resolution.describe(config.base_directory)})",
        file=sys.stderr,
    )
    return 0


def _format_entry(entry: ListedEnvironment) -> str:
    if entry.python_version is not None:
        return f"  - {entry.display_path} (python {entry.python_version})"
    return f"  - {entry.display_path}"


def handle_ls(args: argparse.Namespace, config: Config) -> int:
    """
    handle the ls command.

    arguments:
        `args: argparse.Namespace`
            parsed arguments
        `config: Config`
            configuration

    returns: `int`
        exit code (always 0, finding nothing is not an error)
    """
    json_output = bool(getattr(args, "json_output", False))

    listing = list_environments(config)

    if json_output:
        print(json.dumps(listing.to_dict(), indent=2))
        return 0

    print("--- uv environments ---")

    # section 1: named environments
    print(f"[named environments in {config.base_directory or '(not set)'}]:")
    if not listing.base_exists:
        print("  (directory does not exist or is not accessible)")
    elif listing.named:
        for entry in listing.named:
            print(_format_entry(entry))
    else:
        print("  (none found)")
    print()

    # section 2: project environments
    if config.search_roots:
        roots = " ".join(str(p) for p in config.search_roots)
        print(f"[project environments in {roots}]:")
        if listing.projects:
            for entry in listing.projects:
                print(_format_entry(entry))
        else:
            print("  (none found in configured search paths)")
        print()

    if not listing.found_any:
        print("(no environments found in project search paths or the named location)")
    print("-----------------------")
    return 0


def handle_mk(args: argparse.Namespace, config: Config) -> int:
    """
    handle the mk command.

    arguments:
        `args: argparse.Namespace`
            parsed arguments
        `config: Config`
            configuration

    returns: `int`
        exit code (0 = created, 1 = error)
    """
    name = str(getattr(args, "name", ""))
    tool_args_raw = getattr(args, "tool_args", None)
    tool_args: list[str] = [str(a) for a in tool_args_raw] if tool_args_raw else []  # pyright: ignore[reportAny]

    try:
        target, _ = check_target(name, config)
        print(f"creating uv environment '{name}' within '{target}'...")
        env = create(name, tool_args, config)
    except UvHelpersError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"successfully created environment '{env.display_name}'.")
    print(f"activate with: uvgo {name}")
    return 0


def render_help(config: Config) -> str:
    """
    render usage patterns with the live configuration values.

    arguments:
        `config: Config`
            configuration

    returns: `str`
        help text
    """
    base = config.base_directory or "(not set)"
    roots = " ".join(str(p) for p in config.search_roots) or "(not set)"

    return f"""\
-------------------------------------
uv environment helper commands - usage patterns
-------------------------------------

core commands (after installing the shell integration):
  uvgo    activate an environment (project-local or named)
  uvls    list detected environments
  uvmk    make (create) a new named environment
  uvhelp  show this help message

--- common usage patterns ---

1. activate the environment for the current project:
   cd /path/to/my_project/src
   uvgo                        # uses ./.venv or the nearest parent's .venv

2. activate the environment of another project by path:
   uvgo /path/to/another_project
   uvgo ../sibling_project

3. activate a named environment:
   uvgo shared_data_tools      # looks for '{base}/shared_data_tools/.venv'

4. list all detected environments:
   uvls

5. create a named environment (default python):
   uvmk general_utils          # created in '{base}/general_utils/.venv'

6. create a named environment (specific python):
   uvmk web_py311 -p 3.11      # any 'uv venv' options go after the name

--- configuration & locations ---

named environment base directory: '{base}'
  - derived from UV_CACHE_DIR ('<cache>/venvs'), default '~/.cache/uv/venvs'
  - override with UVHELPERS_BASE_DIR or 'base_directory' in the config file

project search paths (for uvls): {roots}
  - override with UVHELPERS_SEARCH_PATHS or 'search_roots' in the config file

uv cache directory: '{config.cache_dir}'
environment tool: '{config.tool}'
config file: '{default_config_file()}'

install the shell integration by adding this to ~/.bashrc:
  eval "$({PROG} init bash)"
-------------------------------------"""


def handle_help(_args: argparse.Namespace, config: Config) -> int:
    """
    handle the help command.

    arguments:
        `_args: argparse.Namespace`
            parsed arguments (unused)
        `config: Config`
            configuration

    returns: `int`
        exit code
    """
    print(render_help(config))
    return 0


def handle_init(args: argparse.Namespace, _config: Config) -> int:
    """
    handle the init command.

    arguments:
        `args: argparse.Namespace`
            parsed arguments
        `_config: Config`
            configuration (unused)

    returns: `int`
        exit code
    """
    shell = str(getattr(args, "shell", "bash"))
    print(shell_integration(shell, PROG), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """
    run the cli main entry point.

    arguments:
        `argv: Sequence[str] | None`
            command-line arguments (default: sys.argv[1:])

    returns: `int`
        exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # enable debug logging if requested
    if bool(getattr(args, "debug", False)):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(message)s",
        )

    cmd_raw = getattr(args, "command", None)
    command = str(cmd_raw) if cmd_raw is not None else None  # pyright: ignore[reportAny]

    if not command:
        parser.print_help()
        return 2

    # load configuration once, it is never re-read
    config = Config.load()

    # dispatch to handler
    if command == "go":
        return handle_go(args, config)
    elif command == "ls":
        return handle_ls(args, config)
    elif command == "mk":
        return handle_mk(args, config)
    elif command == "help":
        return handle_help(args, config)
    elif command == "init":
        return handle_init(args, config)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
