"""Top-level option handling and command dispatch for the command-line tool."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from accelutil.help import MAN_VIEWER_ENV, show_man_page
from accelutil.usage import usage


@dataclass(frozen=True)
class Command:
    """A named subcommand; ``fn`` is called as ``fn(argv, ctx)``."""

    name: str
    fn: Callable[[list[str], Any], Any]


def _show_help(cmd: str | None, util_name: str) -> None:
    try:
        show_man_page(cmd, util_name, MAN_VIEWER_ENV)
    except RuntimeError:
        pass


def handle_options(
    argv: Sequence[str], usage_msg: str, commands: Sequence[Command], version: str
) -> None:
    """Handle the global options that come before a subcommand.

    Returns only when ``argv[1]`` names a known command to be run.  Version
    and command listing exit with status 0; everything else ends in the
    usage message and status 129.
    """
    argv = list(argv)
    util_name = argv[0]

    if len(argv) < 2:
        _show_help(None, util_name)
        usage(usage_msg)
        return

    first = argv[1]
    if first in ("--version", "-v"):
        print(version)
        sys.exit(0)

    if not first.startswith("-"):
        if any(command.name == first for command in commands):
            if len(argv) > 2 and argv[2] in ("--help", "-h"):
                _show_help(first, util_name)
                usage(usage_msg)
            return
        sys.stderr.write(f"Unknown command: '{first}'\n")
        usage(usage_msg)
        return

    if first in ("--help", "-h"):
        _show_help(argv[2] if len(argv) > 2 else None, util_name)

    if first == "--list-cmds":
        for command in commands:
            print(f"{util_name} {command.name}")
        sys.exit(0)

    usage(usage_msg)


def handle_internal_command(
    argv: Sequence[str], ctx: Any, commands: Sequence[Command]
) -> Any:
    """Run the command named by ``argv[0]`` and return its result.

    Raises :class:`ValueError` when no command has that name.
    """
    argv = list(argv)
    for command in commands:
        if command.name == argv[0]:
            return command.fn(argv, ctx)
    message = f"Unknown command: '{argv[0]}'"
    sys.stderr.write(message + "\n")
    raise ValueError(message)