"""Priority-filtered logging to standard error."""

from __future__ import annotations

import enum
import os
import re
import sys
from typing import Callable

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class Priority(enum.IntEnum):
    """Syslog-style priorities; higher numbers are more verbose."""

    ERR = 3
    NOTICE = 5
    INFO = 6
    DEBUG = 7


def parse_log_priority(text: str) -> int:
    """Parse a priority given as a number or as err/info/debug/notice.

    Anything unrecognised gives 0.
    """
    match = _LEADING_INT.match(text)
    if match is not None:
        rest = text[match.end():]
        if not rest or rest[0].isspace():
            return int(match.group(1))
    elif not text:
        return 0
    for name, priority in (
        ("err", Priority.ERR),
        ("info", Priority.INFO),
        ("debug", Priority.DEBUG),
        ("notice", Priority.NOTICE),
    ):
        if text.startswith(name):
            return int(priority)
    return 0


def _log_stderr(ctx: "LogContext", priority: int, fn: str, message: str) -> None:
    sys.stderr.write(f"{ctx.owner}: {fn}: {message}")


class LogContext:
    """Logging state for one owner.

    The threshold starts at ``Priority.ERR`` and is overridden by the
    environment variable ``log_env`` when it is set.
    """

    def __init__(self, owner: str, log_env: str | None = None) -> None:
        self.owner = owner
        self.log_fn: Callable[["LogContext", int, str, str], None] = _log_stderr
        self.priority = int(Priority.ERR)
        if log_env is not None:
            env = os.environ.get(log_env)
            if env is not None:
                self.priority = parse_log_priority(env)

    def log(self, priority: int, fn: str, message: str) -> None:
        """Emit ``message`` if ``priority`` is within the threshold."""
        if self.priority >= priority:
            self.log_fn(self, priority, fn, message)

    def err(self, fn: str, message: str) -> None:
        self.log(Priority.ERR, fn, message)

    def info(self, fn: str, message: str) -> None:
        self.log(Priority.INFO, fn, message)

    def notice(self, fn: str, message: str) -> None:
        self.log(Priority.NOTICE, fn, message)

    def dbg(self, fn: str, message: str) -> None:
        self.log(Priority.DEBUG, fn, message)