# -*- coding: utf-8 -*-
"""
QR Bit-Stream Encoder Module

Builds the Byte-mode data bit stream: mode indicator, character count,
payload, terminator, bit padding and pad codewords, in that order.

Classes:
    BitBuffer: Growable sequence of bits

Functions:
    encode_bitstream: Build the padded data bit stream for a symbol
    bits_to_bytes: Repack bits into codewords (MSB first)
    bytes_to_bits: Expand codewords into bits (MSB first)
"""

import logging
from typing import Iterable, Iterator, List

from .tables import MODE_BYTE, PAD_CODEWORDS, char_count_bits, data_capacity_bits

logger = logging.getLogger(__name__)


class BitBuffer:
    """Ordered, growable sequence of single bits."""

    def __init__(self, bits: Iterable[int] = ()):
        self._bits: List[int] = [1 if b else 0 for b in bits]

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __getitem__(self, index):
        return self._bits[index]

    def __repr__(self) -> str:
        return f"BitBuffer('{''.join(map(str, self._bits))}')"

    def append_bits(self, value: int, length: int) -> None:
        """Append the low ``length`` bits of ``value``, most significant first."""
        if length < 0 or value >> length:
            raise ValueError(f"Value {value} does not fit in {length} bits")
        for i in range(length - 1, -1, -1):
            self._bits.append((value >> i) & 1)

    def append_bytes(self, data: bytes) -> None:
        for byte in data:
            self.append_bits(byte, 8)

    def to_bytes(self) -> bytes:
        return bits_to_bytes(self._bits)


def bits_to_bytes(bits: List[int]) -> bytes:
    """Pack bits into bytes, MSB first. A trailing partial byte is zero-filled."""
    out = bytearray((len(bits) + 7) // 8)
    for i, bit in enumerate(bits):
        if bit:
            out[i >> 3] |= 0x80 >> (i & 7)
    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def encode_bitstream(payload: bytes, version: int, ec_level: str) -> BitBuffer:
    """
    Build the complete data bit stream for a symbol.

    Args:
        payload (bytes): Raw payload, already known to fit
        version (int): Symbol version (1-10)
        ec_level (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        BitBuffer: Exactly ``data_capacity_bits(version, ec_level)`` bits long

    Example:
        >>> buf = encode_bitstream(b"HELLO", 1, 'M')
        >>> len(buf)
        128
    """
    capacity = data_capacity_bits(version, ec_level)

    buf = BitBuffer()
    buf.append_bits(MODE_BYTE, 4)
    buf.append_bits(len(payload), char_count_bits(version))
    buf.append_bytes(payload)
    if len(buf) > capacity:
        raise ValueError(f"{len(payload)} bytes do not fit in version {version}-{ec_level}")

    # Terminator: up to four zero bits, truncated at capacity
    buf.append_bits(0, min(4, capacity - len(buf)))

    # Zero bits up to the next byte boundary
    buf.append_bits(0, -len(buf) % 8)

    i = 0
    while len(buf) < capacity:
        buf.append_bits(PAD_CODEWORDS[i % 2], 8)
        i += 1

    logger.debug("Bit stream for %d bytes: %d pad codeword(s), %d bits", len(payload), i, capacity)
    return buf
