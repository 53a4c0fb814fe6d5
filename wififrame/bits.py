"""A reader that takes bit fields out of a byte string."""

from __future__ import annotations

from .errors import Incomplete, ParseFailure

_EOF_MESSAGE = "An error occurred while parsing the data: Eof"


class BitReader:
    """Reads bit fields from bytes.

    ``take`` reads the most significant bits of each byte first.
    ``flag`` reads the bit at the current in-byte offset counted from the
    least significant end, which is how the single-bit flags of 802.11
    control fields are laid out.
    """

    def __init__(self, data):
        self._data = bytes(data)
        self._value = int.from_bytes(self._data, "big")
        self._total = len(self._data) * 8
        self._pos = 0

    def take(self, count):
        """Read ``count`` bits as an unsigned integer."""
        if count < 0:
            raise ValueError("bit count must not be negative")
        if self._pos + count > self._total:
            raise ParseFailure(_EOF_MESSAGE, self._data[self._pos // 8 :])
        shift = self._total - self._pos - count
        self._pos += count
        return (self._value >> shift) & ((1 << count) - 1)

    def flag(self):
        """Read a single flag bit at the current offset."""
        index, offset = divmod(self._pos, 8)
        if index >= len(self._data):
            raise Incomplete(1)
        self._pos += 1
        return bool((self._data[index] >> offset) & 1)

    def remaining(self):
        """The bytes after the current position; a partly read byte is dropped."""
        return self._data[(self._pos + 7) // 8 :]