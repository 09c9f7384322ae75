"""Path, prefix and small arithmetic helpers used across the tools."""

from __future__ import annotations

import os

_DEFAULT_READ_CHUNK = 8192


def is_absolute_path(path: str) -> bool:
    """Return True when ``path`` starts with a slash."""
    return path.startswith("/")


def skip_prefix(text: str, prefix: str) -> str | None:
    """Return ``text`` without ``prefix``, or None if it does not start with it."""
    if text.startswith(prefix):
        return text[len(prefix):]
    return None


def prefixcmp(text: str, prefix: str) -> int:
    """Compare ``text`` against ``prefix``.

    Returns 0 when ``text`` starts with ``prefix``; otherwise the difference
    between the first mismatching bytes (prefix byte minus text byte), a
    missing text byte counting as zero.
    """
    text_bytes = text.encode()
    for index, want in enumerate(prefix.encode()):
        have = text_bytes[index] if index < len(text_bytes) else 0
        if have != want:
            return want - have
    return 0


def prefix_filename(pfx: str | None, arg: str) -> str:
    """Join ``pfx`` in front of ``arg`` unless ``arg`` is absolute."""
    if pfx and not is_absolute_path(arg):
        return pfx + arg
    return arg


def fix_filename(prefix: str | None, file: str | None) -> str | None:
    """Return ``file`` relative to ``prefix``.

    ``None``, empty names, absolute paths and ``-`` (standard stream) are
    returned unchanged, as is everything when there is no prefix.
    """
    if not file or prefix is None or is_absolute_path(file) or file == "-":
        return file
    return prefix_filename(prefix, file)


def round_up(x: int, y: int) -> int:
    """Round ``x`` up to a multiple of the power of two ``y``."""
    return ((x - 1) | (y - 1)) + 1


def round_down(x: int, y: int) -> int:
    """Round ``x`` down to a multiple of the power of two ``y``."""
    return x & ~(y - 1)


def read_fd(fd: int, hint: int = 0) -> bytes:
    """Read everything from file descriptor ``fd`` until end of file.

    ``hint`` is the size of the first read; later reads use a default chunk.
    Errors from the underlying read are raised as :class:`OSError`.
    """
    chunks = []
    size = hint if hint > 0 else _DEFAULT_READ_CHUNK
    while True:
        data = os.read(fd, size)
        if not data:
            break
        chunks.append(data)
        size = _DEFAULT_READ_CHUNK
    return b"".join(chunks)