"""Hex and big-endian conversions, difficulty targets and value formatting."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

__all__ = [
    "INVALID_256",
    "DevError",
    "BadHexCharacter",
    "ExternalFunctionFailure",
    "from_hex_char",
    "from_hex",
    "to_hex",
    "int_to_hex",
    "to_compact_hex",
    "to_big_endian",
    "from_big_endian",
    "to_compact_big_endian",
    "bytes_required",
    "setenv",
    "get_target_from_diff",
    "get_hashes_to_target",
    "get_scaled_size",
    "get_formatted_hashes",
    "get_formatted_memory",
    "get_formatted_elapsed",
    "pad_left",
    "pad_right",
]

INVALID_256 = (1 << 256) - 1

_TARGET_BASE = 0x00000000FFFF0000000000000000000000000000000000000000000000000000
_TARGET_MAX = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF
_HASHES_DIVIDEND = 0xFFFF000000000000000000000000000000000000000000000000000000000000

_HASH_SUFFIXES = ("h", "Kh", "Mh", "Gh")
_MEMORY_SUFFIXES = ("B", "KB", "MB", "GB")
_ELAPSED_SUFFIXES = ("ms", "sec")


class DevError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message or type(self).__name__


class BadHexCharacter(DevError):
    """A character that is not a hexadecimal digit was met."""

    def __init__(self, symbol: str | None = None) -> None:
        super().__init__()
        self.symbol = symbol

    def __str__(self) -> str:
        return "BadHexCharacter"


class ExternalFunctionFailure(DevError):
    """A call into an outside facility failed."""

    def __init__(self, function: str) -> None:
        super().__init__(f"Function {function}() failed.")
        self.function = function


def from_hex_char(char: str, strict: bool = False) -> int | None:
    """Return the value of one hex digit, or None (raise if strict) when invalid."""
    if len(char) == 1:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "a" <= char <= "f":
            return ord(char) - ord("a") + 10
        if "A" <= char <= "F":
            return ord(char) - ord("A") + 10
    if strict:
        raise BadHexCharacter(char)
    return None


def from_hex(text: str, strict: bool = False) -> bytes:
    """Decode a hex string (optionally "0x"-prefixed) into bytes.

    An odd-length string takes its first digit as a lone nibble. On a bad
    character an empty result is returned, or BadHexCharacter is raised if
    strict.
    """
    start = 2 if text.startswith("0x") else 0
    out = bytearray()
    if len(text) % 2:
        nibble = from_hex_char(text[start])
        if nibble is None:
            if strict:
                raise BadHexCharacter(text[start])
            return b""
        out.append(nibble)
        start += 1
    for pos in range(start, len(text), 2):
        high = from_hex_char(text[pos])
        low = from_hex_char(text[pos + 1])
        if high is None or low is None:
            if strict:
                raise BadHexCharacter()
            return b""
        out.append(high * 16 + low)
    return bytes(out)


def to_hex(data: Iterable[int], width: int = 2, prefix: bool = False) -> str:
    """Encode bytes as hex duplets; the first element is padded to ``width``."""
    parts = [
        format(byte & 0xFF, f"0{width if index == 0 else 2}x")
        for index, byte in enumerate(data)
    ]
    text = "".join(parts)
    return "0x" + text if prefix else text


def int_to_hex(value: int, width: int = 16, prefix: bool = False) -> str:
    """Format an unsigned integer as hex, zero padded to ``width`` digits."""
    if value < 0:
        raise ValueError("value must be non-negative")
    text = format(value, f"0{width}x")
    return "0x" + text if prefix else text


def to_compact_hex(value: int, prefix: bool = False) -> str:
    """Format an unsigned integer as hex without padding."""
    if value < 0:
        raise ValueError("value must be non-negative")
    text = format(value, "x")
    return "0x" + text if prefix else text


def to_big_endian(value: int, length: int = 32) -> bytes:
    """Encode ``value`` big-endian into exactly ``length`` bytes, dropping high bytes."""
    if value < 0:
        raise ValueError("value must be non-negative")
    mask = (1 << (8 * length)) - 1
    return (value & mask).to_bytes(length, "big")


def from_big_endian(data: bytes | Sequence[int]) -> int:
    """Decode a big-endian byte sequence into an integer."""
    return int.from_bytes(bytes(data), "big")


def bytes_required(value: int) -> int:
    """Number of bytes needed to hold ``value``; 0 for zero."""
    if value < 0:
        raise ValueError("value must be non-negative")
    return (value.bit_length() + 7) // 8


def to_compact_big_endian(value: int, min_length: int = 0) -> bytes:
    """Encode ``value`` big-endian in as few bytes as needed, at least ``min_length``."""
    return to_big_endian(value, max(min_length, bytes_required(value)))


def setenv(name: str, value: str, override: bool = False) -> bool:
    """Set an environment variable; keep an existing one unless ``override``."""
    if not override and name in os.environ:
        return True
    try:
        os.environ[name] = value
    except (ValueError, OSError):
        return False
    return True


def get_target_from_diff(diff: float, prefix: bool = True) -> str:
    """Return the 64-digit hex boundary for a share difficulty."""
    if diff == 0:
        product = _TARGET_MAX
    else:
        inverse = 1 / diff
        product = _TARGET_BASE * int(inverse)
        text = format(inverse, ".17g")
        offset = text.find(".")
        if offset != -1:
            precision = len(text) - 1 - offset
            decimals = text[offset + 1 :].lstrip("0")
            if decimals and not (decimals.isascii() and decimals.isdigit()):
                raise ValueError(f"cannot parse decimal part of {text!r}")
            multiplier = int(decimals) if decimals else 0
            divisor = 10**precision
            product += _TARGET_BASE * multiplier // divisor
    target = format(product, "064x")
    return "0x" + target if prefix else target


def _parse_big_int(text: str) -> int:
    if text.startswith(("0x", "0X")):
        return int(text[2:], 16)
    if text.startswith("0") and len(text) > 1:
        return int(text[1:], 8)
    return int(text, 10)


def get_hashes_to_target(target: str) -> float:
    """Return the difficulty, in hashes, that a hex (or decimal) target stands for."""
    return float(_HASHES_DIVIDEND // _parse_big_int(target))


def get_scaled_size(
    value: float,
    divisor: float,
    precision: int,
    sizes: Sequence[str],
    suffix: bool = True,
) -> str:
    """Scale ``value`` down by ``divisor`` steps and format it with a unit."""
    scaled = value
    index = 0
    while scaled > divisor and index < len(sizes) - 1:
        scaled /= divisor
        index += 1
    text = f"{scaled:.{precision}f}"
    if suffix:
        text += " " + sizes[index]
    return text


def get_formatted_hashes(hashrate: float, suffix: bool = True, precision: int = 2) -> str:
    """Format a hash rate."""
    return get_scaled_size(hashrate, 1000.0, precision, _HASH_SUFFIXES, suffix)


def get_formatted_memory(memory: float, suffix: bool = True, precision: int = 2) -> str:
    """Format an amount of memory in bytes."""
    return get_scaled_size(memory, 1024.0, precision, _MEMORY_SUFFIXES, suffix)


def get_formatted_elapsed(elapsed: float, suffix: bool = True, precision: int = 2) -> str:
    """Format an elapsed time given in milliseconds."""
    return get_scaled_size(elapsed, 1000.0, precision, _ELAPSED_SUFFIXES, suffix)


def pad_left(value: str, length: int, fill: str) -> str:
    """Pad ``value`` on the left with ``fill`` up to ``length``."""
    return value.rjust(length, fill)


def pad_right(value: str, length: int, fill: str) -> str:
    """Pad ``value`` on the right with ``fill`` up to ``length``."""
    return value.ljust(length, fill)