"""64-bit random identifiers."""

from __future__ import annotations

import functools
import secrets
import string

_HEX = frozenset(string.hexdigits)
_MAX = (1 << 64) - 1


@functools.total_ordering
class UUID:
    """A 64-bit identifier, random unless a value is given."""

    __slots__ = ("_value",)

    def __init__(self, value=None):
        if value is None:
            value = secrets.randbits(64)
        value = int(value)
        if not 0 <= value <= _MAX:
            raise ValueError(f"UUID value out of 64-bit range: {value}")
        self._value = value

    def __str__(self) -> str:
        return f"{self._value:016x}"

    def __repr__(self) -> str:
        return f"UUID({self})"

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def from_string(cls, text: str) -> "UUID":
        """Parse exactly 16 hexadecimal digits; raise ValueError otherwise."""
        if len(text) != 16:
            raise ValueError(f"UUID string must be 16 characters, got {len(text)}")
        if not all(c in _HEX for c in text):
            raise ValueError(f"UUID string is not hexadecimal: {text!r}")
        return cls(int(text, 16))