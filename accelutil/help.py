"""Showing manual pages for the tool and its commands."""

from __future__ import annotations

import os
import sys

from accelutil.paths import is_absolute_path
from accelutil.usage import warning

PREFIX = "/usr"
MAN_PATH = "share/man"
MAN_VIEWER_ENV = "ACCFG_MAN_VIEWER"


def cmd_to_page(cmd: str | None, util_name: str) -> str:
    """Return the manual page name for ``cmd`` of the tool ``util_name``.

    With no command the tool's own page is used; a command that already
    starts with the tool name is used as is.
    """
    if cmd is None:
        return util_name
    if cmd.startswith(util_name):
        return cmd
    return f"{util_name}-{cmd}"


def system_path(path: str, prefix: str = PREFIX) -> str:
    """Return ``path`` placed under ``prefix`` unless it is absolute."""
    if is_absolute_path(path):
        return path
    return f"{prefix}/{path}"


def build_man_path(
    man_path: str = MAN_PATH, old_path: str | None = None, prefix: str = PREFIX
) -> str:
    """Return a MANPATH value with the tool's pages first.

    A trailing ``:`` is always kept so that ``man`` still searches the
    system-wide paths after ours.
    """
    return f"{system_path(man_path, prefix)}:{old_path or ''}"


def _try_exec(path: str, args: list[str]) -> None:
    try:
        os.execvp(path, args)
    except OSError as exc:
        warning(f"failed to exec '{path}': {exc.strerror or exc}")


def _exec_man_konqueror(page: str) -> None:
    if os.environ.get("DISPLAY"):
        _try_exec("kfmclient", ["kfmclient", "newTab", f"man:{page}(1)"])


def _exec_man_man(page: str) -> None:
    _try_exec("man", ["man", page])


def _exec_viewer(name: str, page: str) -> None:
    lowered = name.lower()
    if lowered == "man":
        _exec_man_man(page)
    elif lowered == "konqueror":
        _exec_man_konqueror(page)
    else:
        warning(f"'{name}': unknown man viewer.")


def show_man_page(
    cmd: str | None, util_name: str, viewer_env: str = MAN_VIEWER_ENV
) -> None:
    """Replace the process with a manual page viewer.

    The viewer named by the environment variable ``viewer_env`` is tried
    first, then ``man``.  Returns only by raising :class:`RuntimeError`
    when no viewer could be started.
    """
    page = cmd_to_page(cmd, util_name)
    os.environ["MANPATH"] = build_man_path(
        MAN_PATH, os.environ.get("MANPATH"), PREFIX
    )
    fallback = os.environ.get(viewer_env)
    if fallback is not None:
        _exec_viewer(fallback, page)
    _exec_viewer("man", page)
    sys.stderr.write("no man viewer handled the request")
    raise RuntimeError("no man viewer handled the request")