"""CRC-32 (the reflected 0xEDB88320 polynomial), one byte at a time."""

from __future__ import annotations

from typing import Iterable

_MASK = 0xFFFFFFFF
_POLY = 0xEDB88320


def _entry(n: int) -> int:
    for _ in range(8):
        n = (n >> 1) ^ _POLY if n & 1 else n >> 1
    return n


_TABLE = tuple(_entry(n) for n in range(256))


def begin() -> int:
    """Return the initial running CRC value."""
    return 0 ^ _MASK


def update(crc: int, value: int) -> int:
    """Fold one byte into the running CRC value."""
    return _TABLE[(crc ^ value) & 0xFF] ^ (crc >> 8)


def end(crc: int) -> int:
    """Turn a running CRC value into the final checksum."""
    return crc ^ _MASK


def checksum(data: Iterable[int]) -> int:
    """Return the CRC-32 of a sequence of bytes."""
    crc = begin()
    for byte in data:
        crc = update(crc, byte)
    return end(crc)