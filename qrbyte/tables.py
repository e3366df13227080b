# -*- coding: utf-8 -*-
"""
QR Capacity Tables Module

Static lookup tables for QR Code Model 2, versions 1-10, and the version
selector that consults them. Values follow ISO/IEC 18004:2015, tables 7 and 9.

Functions:
    normalize_ec_level: Map an EC token to one of L/M/Q/H
    ec_blocks: Block layout for a (version, EC level) pair
    data_capacity_bits: Number of data bits a symbol can hold
    byte_capacity: Maximum Byte-mode payload length
    select_version: Smallest version that fits a payload
    version_from_size: Infer version from matrix size
"""

import logging
from typing import Dict, List, Tuple

from .exceptions import DataTooLongError

logger = logging.getLogger(__name__)

MIN_VERSION = 1
MAX_VERSION = 10

EC_LEVELS = ('L', 'M', 'Q', 'H')
DEFAULT_EC_LEVEL = 'M'

# Two-bit EC level indicator used in the format information
EC_LEVEL_BITS = {
    'L': 0b01,
    'M': 0b00,
    'Q': 0b11,
    'H': 0b10,
}

# Byte mode indicator
MODE_BYTE = 0b0100

# Pad codewords appended after the terminator, alternating
PAD_CODEWORDS = (0xEC, 0x11)

# Error correction block layout per version and level.
# Format: (version, ecc_level) -> (ecc_per_block, ((block_count, data_codewords_per_block), ...))
_BLOCK_TABLE: Dict[Tuple[int, str], Tuple[int, Tuple[Tuple[int, int], ...]]] = {
    # Level L (7% recovery)
    (1, 'L'): (7, ((1, 19),)),
    (2, 'L'): (10, ((1, 34),)),
    (3, 'L'): (15, ((1, 55),)),
    (4, 'L'): (20, ((1, 80),)),
    (5, 'L'): (26, ((1, 108),)),
    (6, 'L'): (18, ((2, 68),)),
    (7, 'L'): (20, ((2, 78),)),
    (8, 'L'): (24, ((2, 97),)),
    (9, 'L'): (30, ((2, 116),)),
    (10, 'L'): (18, ((2, 68), (2, 69))),

    # Level M (15% recovery)
    (1, 'M'): (10, ((1, 16),)),
    (2, 'M'): (16, ((1, 28),)),
    (3, 'M'): (26, ((1, 44),)),
    (4, 'M'): (18, ((2, 32),)),
    (5, 'M'): (24, ((2, 43),)),
    (6, 'M'): (16, ((4, 27),)),
    (7, 'M'): (18, ((4, 31),)),
    (8, 'M'): (22, ((2, 38), (2, 39))),
    (9, 'M'): (22, ((3, 36), (2, 37))),
    (10, 'M'): (26, ((4, 43), (1, 44))),

    # Level Q (25% recovery)
    (1, 'Q'): (13, ((1, 13),)),
    (2, 'Q'): (22, ((1, 22),)),
    (3, 'Q'): (18, ((2, 17),)),
    (4, 'Q'): (26, ((2, 24),)),
    (5, 'Q'): (18, ((2, 15), (2, 16))),
    (6, 'Q'): (24, ((4, 19),)),
    (7, 'Q'): (18, ((2, 14), (4, 15))),
    (8, 'Q'): (22, ((4, 18), (2, 19))),
    (9, 'Q'): (20, ((4, 16), (4, 17))),
    (10, 'Q'): (24, ((6, 19), (2, 20))),

    # Level H (30% recovery)
    (1, 'H'): (17, ((1, 9),)),
    (2, 'H'): (28, ((1, 16),)),
    (3, 'H'): (22, ((2, 13),)),
    (4, 'H'): (16, ((4, 9),)),
    (5, 'H'): (22, ((2, 11), (2, 12))),
    (6, 'H'): (28, ((4, 15),)),
    (7, 'H'): (26, ((4, 13), (1, 14))),
    (8, 'H'): (26, ((4, 14), (2, 15))),
    (9, 'H'): (24, ((4, 12), (4, 13))),
    (10, 'H'): (28, ((6, 15), (2, 16))),
}

# Alignment pattern centre coordinates (rows and columns)
ALIGNMENT_CENTERS: Dict[int, Tuple[int, ...]] = {
    1: (),
    2: (6, 18),
    3: (6, 22),
    4: (6, 26),
    5: (6, 30),
    6: (6, 34),
    7: (6, 22, 38),
    8: (6, 24, 42),
    9: (6, 26, 46),
    10: (6, 28, 50),
}

# 15-bit format strings, BCH(15,5) encoded and XORed with 0b101010000010010.
# Index is (EC_LEVEL_BITS[level] << 3) | mask.
FORMAT_STRINGS: Tuple[int, ...] = (
    # M
    0b101010000010010, 0b101000100100101, 0b101111001111100, 0b101101101001011,
    0b100010111111001, 0b100000011001110, 0b100111110010111, 0b100101010100000,
    # L
    0b111011111000100, 0b111001011110011, 0b111110110101010, 0b111100010011101,
    0b110011000101111, 0b110001100011000, 0b110110001000001, 0b110100101110110,
    # H
    0b001011010001001, 0b001001110111110, 0b001110011100111, 0b001100111010000,
    0b000011101100010, 0b000001001010101, 0b000110100001100, 0b000100000111011,
    # Q
    0b011010101011111, 0b011000001101000, 0b011111100110001, 0b011101000000110,
    0b010010010110100, 0b010000110000011, 0b010111011011010, 0b010101111101101,
)

# 18-bit version information, BCH(18,6) encoded; only versions >= 7 carry it
VERSION_INFO: Dict[int, int] = {
    7: 0x07C94,
    8: 0x085BC,
    9: 0x09A99,
    10: 0x0A4D3,
}


def normalize_ec_level(ec_level) -> str:
    """Return ``ec_level`` if it is one of L/M/Q/H, otherwise ``'M'``. Case-sensitive."""
    if ec_level in EC_LEVELS:
        return ec_level
    logger.debug("Unrecognized EC level %r, falling back to %s", ec_level, DEFAULT_EC_LEVEL)
    return DEFAULT_EC_LEVEL


def symbol_size(version: int) -> int:
    return version * 4 + 17


def version_from_size(size: int) -> int:
    """
    Infer the symbol version from a matrix size.

    Raises:
        ValueError: If ``size`` is not a valid size for versions 1-10
    """
    version, rest = divmod(size - 17, 4)
    if rest or not MIN_VERSION <= version <= MAX_VERSION:
        raise ValueError(f"{size} is not a valid symbol size for versions {MIN_VERSION}-{MAX_VERSION}")
    return version


def ec_blocks(version: int, ec_level: str) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Get the Reed-Solomon block layout for a version and EC level.

    Args:
        version (int): Symbol version (1-10)
        ec_level (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        Tuple[int, List[Tuple[int, int]]]: (ecc_per_block, groups)
            - ecc_per_block: EC codewords computed for every block
            - groups: list of (block_count, data_codewords_per_block)

    Example:
        >>> ec_blocks(5, 'Q')
        (18, [(2, 15), (2, 16)])
    """
    ecc_per_block, groups = _BLOCK_TABLE[(version, ec_level)]
    return ecc_per_block, list(groups)


def data_codewords(version: int, ec_level: str) -> int:
    _, groups = _BLOCK_TABLE[(version, ec_level)]
    return sum(count * size for count, size in groups)


def total_codewords(version: int) -> int:
    """Data plus EC codewords; identical for every EC level of a version."""
    ecc_per_block, groups = _BLOCK_TABLE[(version, 'L')]
    return sum(count * (size + ecc_per_block) for count, size in groups)


def data_capacity_bits(version: int, ec_level: str) -> int:
    return data_codewords(version, ec_level) * 8


def char_count_bits(version: int) -> int:
    """Width of the Byte-mode character count field."""
    return 8 if version <= 9 else 16


def byte_capacity(version: int, ec_level: str) -> int:
    """
    Maximum Byte-mode payload length in bytes.

    The mode indicator (4 bits) and the character count field take part of
    the data capacity; the rest is rounded down to whole bytes.

    Example:
        >>> byte_capacity(1, 'M')
        14
    """
    usable = data_capacity_bits(version, ec_level) - 4 - char_count_bits(version)
    return usable // 8


def select_version(length: int, ec_level: str) -> int:
    """
    Choose the smallest version whose byte capacity holds ``length`` bytes.

    Args:
        length (int): Payload length in bytes
        ec_level (str): Error correction level, already normalized

    Returns:
        int: Selected version (1-10)

    Raises:
        DataTooLongError: If the payload exceeds version 10 at this level
    """
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        if byte_capacity(version, ec_level) >= length:
            logger.debug("Selected version %d for %d bytes at level %s", version, length, ec_level)
            return version
    raise DataTooLongError(length, ec_level, byte_capacity(MAX_VERSION, ec_level))
