"""Strings reduced to a stable djb2 hash, usable as cheap lookup keys."""

from __future__ import annotations

_SEED = 5381
_MASK = (1 << 64) - 1


def _djb2(text: str) -> int:
    value = _SEED
    for byte in text.encode("utf-8"):
        if byte == 0:
            break
        signed = byte - 256 if byte > 127 else byte
        value = ((value << 5) + value + signed) & _MASK
    return value


class HashedString:
    """An immutable key holding only the 64-bit djb2 hash of a string."""

    __slots__ = ("_hash",)

    def __init__(self, text: str) -> None:
        self._hash = _djb2(text)

    def __int__(self) -> int:
        return self._hash

    def __index__(self) -> int:
        return self._hash

    def __hash__(self) -> int:
        return hash(self._hash)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HashedString):
            return self._hash == other._hash
        return NotImplemented

    def __repr__(self) -> str:
        return f"HashedString(0x{self._hash:016x})"