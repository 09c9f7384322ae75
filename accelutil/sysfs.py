"""Reading and writing sysfs attribute files and scanning device directories."""

from __future__ import annotations

import errno
import os
import re
from typing import Any, Callable

from accelutil.log import LogContext

SYSFS_ATTR_SIZE = 1024

_DEVICE_ID = re.compile(r"[a-z]+([+-]?[0-9]+)")

AddDevice = Callable[[Any, int, str, str, str], Any]


def read_attr(path: str, log: LogContext | None = None) -> str:
    """Return the contents of an attribute file without its trailing newline.

    Raises :class:`OSError` when the file cannot be read or is too large.
    """
    fd = os.open(path, os.O_RDONLY | os.O_CLOEXEC)
    try:
        data = os.read(fd, SYSFS_ATTR_SIZE)
    except OSError as exc:
        if log is not None:
            log.dbg("read_attr", f"failed to read {path}: {exc.strerror}\n")
        raise
    finally:
        os.close(fd)
    if len(data) >= SYSFS_ATTR_SIZE:
        if log is not None:
            log.dbg("read_attr", f"failed to read {path}: too large\n")
        raise OSError(errno.EFBIG, "attribute too large", path)
    if data.endswith(b"\n"):
        data = data[:-1]
    return data.decode("utf-8", errors="surrogateescape")


def write_attr(path: str, value: str, log: LogContext | None = None,
               quiet: bool = False) -> None:
    """Write ``value`` to an attribute file; raise :class:`OSError` on failure."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CLOEXEC)
    except OSError as exc:
        if log is not None:
            log.dbg("write_attr", f"failed to open {path}: {exc.strerror}\n")
        raise
    data = value.encode("utf-8", errors="surrogateescape")
    try:
        written = os.write(fd, data)
    except OSError as exc:
        if log is not None and not quiet:
            log.dbg("write_attr",
                    f"failed to write {value} to {path}: {exc.strerror}\n")
        raise
    finally:
        os.close(fd)
    if written < len(data):
        if log is not None and not quiet:
            log.dbg("write_attr", f"failed to write {value} to {path}: short write\n")
        raise OSError(errno.EIO, "short write", path)


def device_parse(base_path: str, dev_prefix: str, bus_type: str, parent: Any,
                 add_dev: AddDevice,
                 name_filter: Callable[[str], bool] | None = None,
                 log: LogContext | None = None) -> int:
    """Call ``add_dev`` for each device entry under ``base_path``.

    Entries are visited in sorted order; names containing ``!`` are skipped.
    Returns how many ``add_dev`` calls returned None.  Raises
    :class:`OSError` with ENODEV when the directory cannot be listed.
    """
    try:
        names = sorted(os.listdir(base_path))
    except OSError as exc:
        raise OSError(errno.ENODEV, "cannot scan devices", base_path) from exc
    if name_filter is not None:
        names = [name for name in names if name_filter(name)]

    add_errors = 0
    for name in names:
        match = _DEVICE_ID.match(name)
        dev_id = int(match.group(1)) if match else -1
        if "!" in name:
            continue
        dev = add_dev(parent, dev_id, f"{base_path}/{name}", dev_prefix, bus_type)
        if dev is None:
            add_errors += 1
            if log is not None:
                log.err("device_parse", f"{dev_id}: add_dev() failed\n")
        elif log is not None:
            log.dbg("device_parse", f"{dev_id}: processed\n")
    return add_errors


def devpath_to_devname(devpath: str) -> str:
    """Return the last component of a device path."""
    if "/" not in devpath:
        raise ValueError(f"not a device path: {devpath!r}")
    return devpath.rsplit("/", 1)[1]