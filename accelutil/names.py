"""Parsing of device, work queue, group and engine names."""

from __future__ import annotations

import re

_U32_MASK = (1 << 32) - 1

_WS = r"[ \t\n\v\f\r]*"
_UINT = _WS + r"([+-]?[0-9]+)"

_TYPE_ID = re.compile(r"([a-z]+)" + _UINT)
_PARENT_CHILD = re.compile(r"([^/]+)/" + _WS + r"([^ \t\n\v\f\r]+)")
_PARENT_CHILD_IDS = re.compile(r"[a-z]+" + _UINT + r"\." + _UINT)


def _unsigned(digits: str) -> int:
    return int(digits) & _U32_MASK


def scan_device_type_id(name: str) -> tuple[str, int]:
    """Split a device name such as ``dsa0`` into its type and number.

    Raises :class:`ValueError` when the name does not have that form.
    """
    match = _TYPE_ID.match(name)
    if match is None:
        raise ValueError(f"invalid device name: {name!r}")
    return match.group(1), _unsigned(match.group(2))


def scan_parent_child_names(name: str) -> tuple[str, str]:
    """Split ``parent/child`` (for example ``dsa0/wq0.1``) into its two parts.

    Raises :class:`ValueError` when the name does not have that form.
    """
    match = _PARENT_CHILD.match(name)
    if match is None:
        raise ValueError(f"invalid parent/child name: {name!r}")
    return match.group(1), match.group(2)


def scan_parent_child_ids(name: str) -> tuple[int, int]:
    """Return the two numbers of a child name such as ``wq0.1``.

    Raises :class:`ValueError` when the name does not have that form.
    """
    match = _PARENT_CHILD_IDS.match(name)
    if match is None:
        raise ValueError(f"invalid child name: {name!r}")
    return _unsigned(match.group(1)), _unsigned(match.group(2))