"""Fixed-length boolean vectors with bitwise logic, shifts and rotations."""

from __future__ import annotations

import sys
from typing import TextIO

_UINT64_LIMIT = 1 << 64


class BigBoolError(ValueError):
    """Base error for boolean vector operations."""


class InvalidBitStringError(BigBoolError):
    """Raised when a text is not a non-empty string of '0' and '1'."""


def check_bits(text: str) -> None:
    """Raise InvalidBitStringError unless text is a non-empty run of 0/1 digits."""
    if not text:
        raise InvalidBitStringError("bit string is empty")
    bad = next((ch for ch in text if ch not in "01"), None)
    if bad is not None:
        raise InvalidBitStringError(f"invalid bit character {bad!r} in {text!r}")


def read_bits(stream: TextIO | None = None) -> str:
    """Read one line from stream (stdin by default) without its newline."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if not line:
        raise EOFError("no input line to read")
    return line[:-1] if line.endswith("\n") else line


class BigBool:
    """An immutable vector of bits with a fixed length.

    Bit 0 is the least significant one and is printed rightmost.
    """

    __slots__ = ("_length", "_bits")

    def __init__(self, length: int) -> None:
        if not isinstance(length, int) or length < 0:
            raise BigBoolError(f"length must be a non-negative integer, got {length!r}")
        self._length = length
        self._bits = 0

    @classmethod
    def _with_bits(cls, length: int, bits: int) -> BigBool:
        vector = cls(length)
        vector._bits = bits & ((1 << length) - 1)
        return vector

    @classmethod
    def empty(cls, length: int) -> BigBool:
        """Return an all-zero vector of the given length."""
        return cls(length)

    @classmethod
    def from_string(cls, text: str) -> BigBool:
        """Build a vector from a string of '0' and '1', most significant first."""
        check_bits(text)
        return cls._with_bits(len(text), int(text, 2))

    @classmethod
    def from_int(cls, number: int) -> BigBool:
        """Build the shortest vector (at least one bit) holding an unsigned 64-bit number."""
        if not isinstance(number, int) or not 0 <= number < _UINT64_LIMIT:
            raise BigBoolError(f"number must be an unsigned 64-bit integer, got {number!r}")
        return cls._with_bits(max(number.bit_length(), 1), number)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        if self._length == 0:
            return ""
        return format(self._bits, f"0{self._length}b")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigBool):
            return NotImplemented
        return self._length == other._length and self._bits == other._bits

    def __hash__(self) -> int:
        return hash((self._length, self._bits))

    def __invert__(self) -> BigBool:
        return self._with_bits(self._length, ~self._bits)

    def _combine(self, other: object, op) -> BigBool:
        if not isinstance(other, BigBool):
            return NotImplemented
        length = max(self._length, other._length)
        return self._with_bits(length, op(self._bits, other._bits))

    def __xor__(self, other: BigBool) -> BigBool:
        return self._combine(other, lambda a, b: a ^ b)

    def __or__(self, other: BigBool) -> BigBool:
        return self._combine(other, lambda a, b: a | b)

    def __and__(self, other: BigBool) -> BigBool:
        return self._combine(other, lambda a, b: a & b)

    def __lshift__(self, count: int) -> BigBool:
        """Shift left, growing the vector by count bits; negative counts shift right."""
        if not isinstance(count, int):
            return NotImplemented
        if count < 0:
            return self >> -count
        return self._with_bits(self._length + count, self._bits << count)

    def __rshift__(self, count: int) -> BigBool:
        """Shift right, shrinking the vector; a single zero bit if nothing is left."""
        if not isinstance(count, int):
            return NotImplemented
        if count < 0:
            return self << -count
        if count >= self._length:
            return type(self)(1)
        return self._with_bits(self._length - count, self._bits >> count)

    def rotate_left(self, count: int) -> BigBool:
        """Rotate left keeping the length; negative counts rotate right."""
        if count < 0:
            return self.rotate_right(-count)
        return ((self << count) | (self >> (self._length - count))).resized(self._length)

    def rotate_right(self, count: int) -> BigBool:
        """Rotate right keeping the length; negative counts rotate left."""
        if count < 0:
            return self.rotate_left(-count)
        return ((self >> count) | (self << (self._length - count))).resized(self._length)

    def resized(self, length: int) -> BigBool:
        """Return a copy zero-extended or truncated to the given length."""
        if not isinstance(length, int) or length < 0:
            raise BigBoolError(f"length must be a non-negative integer, got {length!r}")
        return self._with_bits(length, self._bits)


def equalize(first: BigBool, second: BigBool) -> tuple[BigBool, BigBool]:
    """Return both vectors zero-extended to the longer of the two lengths."""
    length = max(len(first), len(second))
    return first.resized(length), second.resized(length)