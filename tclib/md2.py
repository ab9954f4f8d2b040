"""The MD2 message digest."""

from __future__ import annotations

from typing import Iterator, Union

_BLOCK_SIZE = 16
_STATE_SIZE = 48
_ROUNDS = 18

# The MD2 substitution table, a permutation of 0..255 built from the digits of pi.
_S = bytes.fromhex(
    "292e43c9a2d87c013d3654a1ecf00613"
    "62a705f3c0c7738c98932bd9bc4c82ca"
    "1e9b573cfdd4e01667426f188a17e512"
    "be4ec4d6da9ede49a0fbf58ebb2fee7a"
    "a968799115b2073f94c210890b225f21"
    "807f5d9a5a903227353ecce7bff79703"
    "ff1930b348a5b5d1d75e922aac56aac6"
    "4fb838d296a47db676fc6be29c7404f1"
    "459d705964718720865bcf65e62da802"
    "1b6025adaeb0b9f61c46616934407e0f"
    "5547a323dd51af3ac35cf9cebac5ea26"
    "2c530d6e85288409d3dfcdf441814d52"
    "6adc37c86cc1abfa24e17b080cbdb14a"
    "7888958be363e86de9cbd5fe3b001d39"
    "f2efb70e6658d0e4a67772f8eb754b0a"
    "314450b48fed1f1adb998d339f118314"
)


def _padded_blocks(data: bytes) -> Iterator[bytes]:
    """Yield the message in 16-byte blocks, the last padded as MD2 requires."""
    pad = _BLOCK_SIZE - len(data) % _BLOCK_SIZE
    padded = data + bytes([pad]) * pad
    for start in range(0, len(padded), _BLOCK_SIZE):
        yield padded[start:start + _BLOCK_SIZE]


def _process(state: bytearray, block: bytes) -> None:
    """Mix one 16-byte block into the 48-byte state."""
    for i, value in enumerate(block):
        state[_BLOCK_SIZE + i] = value
        state[2 * _BLOCK_SIZE + i] = value ^ state[i]
    t = 0
    for round_number in range(_ROUNDS):
        for j in range(_STATE_SIZE):
            t = state[j] ^ _S[t]
            state[j] = t
        t = (t + round_number) % 256


def md2_hexdigest(data: Union[bytes, bytearray, memoryview, str]) -> str:
    """Return the MD2 digest of data as 32 lower-case hexadecimal digits.

    Text is encoded as UTF-8 first.
    """
    message = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    state = bytearray(_STATE_SIZE)
    checksum = bytearray(_BLOCK_SIZE)
    last = 0
    for block in _padded_blocks(message):
        for i, value in enumerate(block):
            last = _S[value ^ last] ^ checksum[i]
            checksum[i] = last
        _process(state, block)
    _process(state, bytes(checksum))
    return state[:_BLOCK_SIZE].hex()