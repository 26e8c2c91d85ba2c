"""Fixed-size byte containers used for hashes, boundaries and headers."""

from __future__ import annotations

import enum
import secrets
import sys
from collections.abc import Iterable
from typing import TypeVar

from devcore.common_data import BadHexCharacter, from_big_endian, from_hex, to_big_endian, to_hex

__all__ = [
    "Align",
    "FixedHash",
    "H64",
    "H128",
    "H160",
    "H256",
    "H512",
    "H520",
    "H1024",
    "H2048",
    "format_hashes",
]

_ELLIPSIS = "..." if sys.platform == "win32" else "\u2026"

_H = TypeVar("_H", bound="FixedHash")


class Align(enum.Enum):
    """How data of a different length is placed into a fixed-size hash."""

    LEFT = "left"
    RIGHT = "right"
    FAIL_IF_DIFFERENT = "fail_if_different"


def _place(data: bytes, size: int, align: Align) -> bytearray:
    """Copy ``data`` into a zeroed buffer of ``size`` bytes according to ``align``."""
    if len(data) == size:
        return bytearray(data)
    out = bytearray(size)
    if align is Align.FAIL_IF_DIFFERENT:
        return out
    count = min(len(data), size)
    if count == 0:
        return out
    if align is Align.RIGHT:
        out[size - count :] = data[len(data) - count :]
    else:
        out[:count] = data[:count]
    return out


class FixedHash:
    """A big-endian byte array of fixed length.

    Concrete sizes are declared by subclassing with a ``size`` keyword,
    e.g. ``class H256(FixedHash, size=32)``.
    """

    SIZE: int = 0

    __slots__ = ("_data",)

    def __init_subclass__(cls, size: int | None = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if size is not None:
            if size <= 0:
                raise ValueError("size must be positive")
            cls.SIZE = size

    def __init__(self, data: bytes | bytearray | Iterable[int] | None = None) -> None:
        if self.SIZE <= 0:
            raise TypeError(f"{type(self).__name__} has no fixed size")
        if data is None:
            self._data = bytearray(self.SIZE)
            return
        raw = bytearray(data)
        if len(raw) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE} bytes, got {len(raw)}"
            )
        self._data = raw

    # Construction helpers -------------------------------------------------

    @classmethod
    def from_bytes(
        cls: type[_H], data: bytes | bytearray, align: Align = Align.FAIL_IF_DIFFERENT
    ) -> _H:
        """Build from bytes; a length mismatch gives zeros unless aligned left or right."""
        return cls(_place(bytes(data), cls.SIZE, align))

    @classmethod
    def from_hash(cls: type[_H], other: FixedHash, align: Align = Align.LEFT) -> _H:
        """Build from a hash of any size, cropping or zero-filling as needed."""
        if align is Align.FAIL_IF_DIFFERENT:
            raise ValueError("from_hash aligns left or right")
        return cls(_place(bytes(other), cls.SIZE, align))

    @classmethod
    def from_hex(cls: type[_H], text: str) -> _H:
        """Build from a hex string; bad digits raise, a wrong length gives zeros."""
        return cls.from_bytes(from_hex(text, strict=True), Align.FAIL_IF_DIFFERENT)

    @classmethod
    def from_int(cls: type[_H], value: int) -> _H:
        """Build from an unsigned integer, keeping its low ``SIZE`` bytes."""
        return cls(to_big_endian(value, cls.SIZE))

    @classmethod
    def random(cls: type[_H]) -> _H:
        """Return a hash filled with random bytes."""
        return cls(secrets.token_bytes(cls.SIZE))

    # Conversions ------------------------------------------------------------

    def __int__(self) -> int:
        return from_big_endian(self._data)

    def __index__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        return any(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return self.SIZE

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex(prefix=True)!r})"

    # Comparison -------------------------------------------------------------

    def _same_kind(self, other: object) -> bool:
        return isinstance(other, FixedHash) and other.SIZE == self.SIZE

    def __eq__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._data == other._data  # type: ignore[union-attr]

    def __lt__(self, other: FixedHash) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bytes(self._data) < bytes(other._data)

    def __le__(self, other: FixedHash) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bytes(self._data) <= bytes(other._data)

    def __gt__(self, other: FixedHash) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bytes(self._data) > bytes(other._data)

    def __ge__(self, other: FixedHash) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bytes(self._data) >= bytes(other._data)

    def __hash__(self) -> int:
        return hash((self.SIZE, bytes(self._data)))

    # Bitwise operators ------------------------------------------------------

    def _combine(self: _H, other: FixedHash, op) -> _H:
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(op(a, b) for a, b in zip(self._data, other._data))

    def __xor__(self: _H, other: FixedHash) -> _H:
        return self._combine(other, lambda a, b: a ^ b)

    def __or__(self: _H, other: FixedHash) -> _H:
        return self._combine(other, lambda a, b: a | b)

    def __and__(self: _H, other: FixedHash) -> _H:
        return self._combine(other, lambda a, b: a & b)

    def __invert__(self: _H) -> _H:
        return type(self)(~b & 0xFF for b in self._data)

    # Element access ---------------------------------------------------------

    def __getitem__(self, index: int | slice) -> int | bytes:
        if isinstance(index, slice):
            return bytes(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError("byte value must be in 0..255")
        self._data[index] = value

    def __iter__(self):
        return iter(self._data)

    # Mutation ---------------------------------------------------------------

    def increment(self: _H) -> _H:
        """Add one, treating the bytes as a big-endian number that wraps to zero."""
        for pos in reversed(range(self.SIZE)):
            self._data[pos] = (self._data[pos] + 1) & 0xFF
            if self._data[pos]:
                break
        return self

    def clear(self) -> None:
        """Set every byte to zero."""
        self._data[:] = bytes(self.SIZE)

    # Presentation -----------------------------------------------------------

    def abridged(self) -> str:
        """The first four bytes in hex followed by an ellipsis."""
        return to_hex(self._data[:4]) + _ELLIPSIS

    def hex(self, prefix: bool = False) -> str:
        """The whole hash as lower-case hex."""
        return to_hex(self._data, 2, prefix)


class H64(FixedHash, size=8):
    """An 8-byte hash."""

    __slots__ = ()


class H128(FixedHash, size=16):
    """A 16-byte hash."""

    __slots__ = ()


class H160(FixedHash, size=20):
    """A 20-byte hash."""

    __slots__ = ()


class H256(FixedHash, size=32):
    """A 32-byte hash."""

    __slots__ = ()


class H512(FixedHash, size=64):
    """A 64-byte hash."""

    __slots__ = ()


class H520(FixedHash, size=65):
    """A 65-byte hash."""

    __slots__ = ()


class H1024(FixedHash, size=128):
    """A 128-byte hash."""

    __slots__ = ()


class H2048(FixedHash, size=256):
    """A 256-byte hash."""

    __slots__ = ()


def format_hashes(hashes: Iterable[FixedHash]) -> str:
    """Render a list of hashes in abridged form, e.g. ``[ 0102abcd…, ]``."""
    return "[ " + "".join(f"{h.abridged()}, " for h in hashes) + "]"


# Keep the error type reachable for callers handling ``from_hex`` failures.
FixedHash.BadHexCharacter = BadHexCharacter  # type: ignore[attr-defined]