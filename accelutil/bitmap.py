"""Fixed-size bitmap with range set/clear and next-bit searches."""

from __future__ import annotations


class Bitmap:
    """A bitmap of ``nbits`` bits, all initially clear."""

    def __init__(self, nbits: int) -> None:
        if nbits < 0:
            raise ValueError("bitmap size must not be negative")
        self._nbits = nbits
        self._bits = 0
        self._all = (1 << nbits) - 1

    def __len__(self) -> int:
        return self._nbits

    def __repr__(self) -> str:
        return f"Bitmap(nbits={self._nbits}, bits={self._bits:#x})"

    def _range_mask(self, start: int, length: int) -> int:
        if start < 0 or length < 0:
            raise ValueError("start and length must not be negative")
        if start + length > self._nbits:
            raise IndexError("bit range exceeds bitmap size")
        return ((1 << length) - 1) << start

    def set(self, start: int, length: int) -> None:
        """Set ``length`` bits beginning at ``start``."""
        self._bits |= self._range_mask(start, length)

    def clear(self, start: int, length: int) -> None:
        """Clear ``length`` bits beginning at ``start``."""
        self._bits &= ~self._range_mask(start, length)

    def test(self, nr: int) -> bool:
        """Return whether bit ``nr`` is set."""
        if not 0 <= nr < self._nbits:
            raise IndexError("bit number out of range")
        return bool((self._bits >> nr) & 1)

    def _find_next(self, words: int, offset: int) -> int:
        if offset < 0:
            raise ValueError("offset must not be negative")
        if offset >= self._nbits:
            return self._nbits
        rest = words >> offset
        if not rest:
            return self._nbits
        return min(offset + (rest & -rest).bit_length() - 1, self._nbits)

    def find_next_bit(self, offset: int) -> int:
        """Index of the first set bit at or after ``offset``, or ``len(self)``."""
        return self._find_next(self._bits, offset)

    def find_next_zero_bit(self, offset: int) -> int:
        """Index of the first clear bit at or after ``offset``, or ``len(self)``."""
        return self._find_next(~self._bits & self._all, offset)

    def full(self) -> bool:
        """Return True when every bit is set."""
        return self.find_next_zero_bit(0) == self._nbits