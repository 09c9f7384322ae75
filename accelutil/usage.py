"""Diagnostic reporting helpers: fatal errors, errors, warnings and usage."""

from __future__ import annotations

import sys
from typing import Callable

_MESSAGE_LIMIT = 1024

DieRoutine = Callable[[str], None]


def report(prefix: str, message: str) -> None:
    """Write a prefixed diagnostic line to standard error."""
    text = message[: _MESSAGE_LIMIT - 1]
    sys.stderr.write(f" {prefix}{text}\n")


def _die_builtin(message: str) -> None:
    report(" Fatal: ", message)
    sys.exit(128)


_die_routine: DieRoutine = _die_builtin


def set_die_routine(routine: DieRoutine | None) -> DieRoutine:
    """Install the handler used by :func:`die`; return the previous one.

    Passing ``None`` restores the built-in handler.
    """
    global _die_routine
    previous = _die_routine
    _die_routine = routine if routine is not None else _die_builtin
    return previous


def die(message: str) -> None:
    """Report a fatal error through the current die routine.

    The built-in routine exits the process with status 128.
    """
    _die_routine(message)


def error(message: str) -> int:
    """Report an error and return -1 so callers can ``return error(...)``."""
    report(" Error: ", message)
    return -1


def warning(message: str) -> None:
    """Report a warning."""
    report(" Warning: ", message)


def usage(message: str) -> None:
    """Print a usage message and exit with status 129."""
    sys.stderr.write(f"\n Usage: {message}\n")
    sys.exit(129)