"""
cli for venvlocate.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from .core import canonicalize, locate
from .metadata import get_python_version
from .models import EnvironmentRef


def create_parser() -> argparse.ArgumentParser:
    """
    create the argument parser for venvlocate.

    returns: `argparse.ArgumentParser`
        configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="venvlocate",
        description="find the nearest .venv at or above a directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  venvlocate                       # search upwards from the current directory
  venvlocate /path/to/project/src  # search upwards from a given directory
  venvlocate --json                # output as json
        """,
    )

    _ = parser.add_argument(
        "start",
        nargs="?",
        default=".",
        help="directory to start searching from (default: current directory)",
    )

    _ = parser.add_argument(
        "--json",
        action="store_true",
        help="output as json",
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    return parser


def format_output(env: EnvironmentRef | None, json_output: bool = False) -> str:
    """
    format a located environment for output.

    arguments:
        `env: EnvironmentRef | None`
            located environment, or None
        `json_output: bool`
            whether to output as json

    returns: `str`
        formatted output string
    """
    if env is None:
        return "null" if json_output else "no virtual environment found"

    version = get_python_version(env)

    if json_output:
        return json.dumps(
            {
                "name": env.display_name,
                "root_directory": str(env.root_directory),
                "venv_path": str(env.venv_path),
                "activate_script": str(env.activate_script),
                "python_version": str(version) if version else None,
            },
            indent=2,
        )

    lines = [
        f"name: {env.display_name}",
        f"root_directory: {env.root_directory}",
        f"activate_script: {env.activate_script}",
    ]
    if version:
        lines.append(f"python_version: {version}")

    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """
    main entry point for venvlocate cli.

    arguments:
        `argv: Sequence[str] | None`
            command line arguments. if None, uses sys.argv.

    returns: `int`
        exit code (0 if found, 1 if not found or the start is invalid)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    start = str(getattr(args, "start", "."))
    json_output = bool(getattr(args, "json", False))

    if canonicalize(start) is None:
        print(f"error: not a directory: {start}", file=sys.stderr)
        return 1

    env = locate(start)
    print(format_output(env, json_output=json_output))

    if env is None:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
