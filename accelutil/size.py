"""Parsing of size strings with K/M/G/T suffixes and alignment helpers."""

from __future__ import annotations

import re

SZ_1K = 0x00000400
SZ_4K = 0x00001000
SZ_1M = 0x00100000
SZ_2M = 0x00200000
SZ_4M = 0x00400000
SZ_16M = 0x01000000
SZ_64M = 0x04000000
SZ_1G = 0x40000000
SZ_1T = 0x10000000000

BITS_PER_LONG = 64
HPAGE_SIZE = 2 << 20

U64_MAX = (1 << 64) - 1

_SUFFIXES = {"k": SZ_1K, "m": SZ_1M, "g": SZ_1G, "t": SZ_1T}

_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)


def _strtoull(text: str) -> tuple[int, str]:
    """Parse an unsigned integer with base auto-detection; return it and the rest."""
    match = _NUMBER.match(text)
    if match is None:
        return 0, text
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    rest = text[match.end():]
    if value > U64_MAX:
        return U64_MAX, rest
    if sign == "-":
        value = (-value) & U64_MAX
    return value, rest


def parse_size64_with_units(text: str) -> tuple[int, int]:
    """Parse a size such as ``"4k"`` or ``"0x10M"``.

    Returns ``(bytes, unit)`` where ``unit`` is the multiplier of the suffix
    (1 when there is none).  Raises :class:`ValueError` on trailing garbage
    or when the value does not fit in 64 bits.
    """
    value, rest = _strtoull(text)
    if value == U64_MAX:
        raise ValueError(f"invalid size: {text!r}")
    unit = _SUFFIXES.get(rest[:1].lower(), 1) if rest else 1
    if unit != 1:
        rest = rest[1:]
    result = value * unit
    if rest or result > U64_MAX:
        raise ValueError(f"invalid size: {text!r}")
    return result, unit


def parse_size64(text: str) -> int:
    """Parse a size string and return the number of bytes."""
    return parse_size64_with_units(text)[0]


def align(x: int, a: int) -> int:
    """Round ``x`` up to a multiple of the power of two ``a``."""
    return ((x & U64_MAX) + (a - 1)) & ~(a - 1) & U64_MAX


def align_down(x: int, a: int) -> int:
    """Round ``x`` down to the multiple of ``a`` strictly below ``x + a``."""
    return ((((x & U64_MAX) + a) & ~(a - 1)) - a) & U64_MAX