# -*- coding: utf-8 -*-
"""
QR Masking & Format Information Module

Applies one data mask to the non-reserved modules and writes the format
information (and, for versions 7 and up, the version information) into
the areas reserved by the matrix builder.

Only mask ids 0-3 are implemented and no penalty evaluation is done: the
caller's mask is used as-is.

Functions:
    normalize_mask: Map a mask argument to an implemented mask id
    apply_mask: XOR the mask pattern over data modules
    format_bits: Look up the 15-bit format string
    write_format_info: Write both copies of the format string
    write_version_info: Write both copies of the version information
"""

import logging
from typing import Callable, Dict

from .matrix import Matrix, Module
from .tables import EC_LEVEL_BITS, FORMAT_STRINGS, VERSION_INFO

logger = logging.getLogger(__name__)

DEFAULT_MASK = 0

# Mask condition per id; a module is flipped where the condition holds
MASK_PATTERNS: Dict[int, Callable[[int, int], bool]] = {
    0: lambda r, c: (r + c) % 2 == 0,
    1: lambda r, c: r % 2 == 0,
    2: lambda r, c: c % 3 == 0,
    3: lambda r, c: (r + c) % 3 == 0,
}


def normalize_mask(mask) -> int:
    """Return ``mask`` as an int if it is an implemented id, else DEFAULT_MASK."""
    try:
        mask_id = int(mask)
    except (TypeError, ValueError):
        mask_id = None
    if mask_id in MASK_PATTERNS:
        return mask_id
    logger.debug("Unsupported mask %r, falling back to %d", mask, DEFAULT_MASK)
    return DEFAULT_MASK


def apply_mask(matrix: Matrix, mask: int) -> None:
    """Flip every non-reserved module where the mask condition holds."""
    condition = MASK_PATTERNS[mask]
    for r in range(matrix.size):
        for c in range(matrix.size):
            if matrix.reserved[r][c] or not condition(r, c):
                continue
            matrix.set_data(r, c, matrix.modules[r][c] is not Module.DARK)


def format_bits(ec_level: str, mask: int) -> int:
    """
    Get the BCH-protected, XOR-masked format string.

    Example:
        >>> bin(format_bits('L', 0))
        '0b111011111000100'
    """
    return FORMAT_STRINGS[(EC_LEVEL_BITS[ec_level] << 3) | mask]


def write_format_info(matrix: Matrix, ec_level: str, mask: int) -> None:
    """
    Write the 15 format bits twice.

    Bit 0 is the least significant bit. The first copy wraps around the
    top-left finder (column 8 going down, then row 8 going left); the second
    copy is split between row 8 on the right and column 8 at the bottom.
    """
    bits = format_bits(ec_level, mask)
    size = matrix.size

    def bit(i: int) -> bool:
        return (bits >> i) & 1 == 1

    # First copy, around the top-left finder (row/col 6 are timing)
    for i in range(6):
        matrix.set_function(i, 8, bit(i))
    matrix.set_function(7, 8, bit(6))
    matrix.set_function(8, 8, bit(7))
    matrix.set_function(8, 7, bit(8))
    for i in range(9, 15):
        matrix.set_function(8, 14 - i, bit(i))

    # Second copy, next to the top-right and bottom-left finders
    for i in range(8):
        matrix.set_function(8, size - 1 - i, bit(i))
    for i in range(8, 15):
        matrix.set_function(size - 15 + i, 8, bit(i))


def write_version_info(matrix: Matrix, version: int) -> None:
    """Write the 18-bit version information (v7+) into both reserved blocks."""
    if version not in VERSION_INFO:
        return
    bits = VERSION_INFO[version]
    size = matrix.size
    for i in range(18):
        dark = (bits >> i) & 1 == 1
        a, b = size - 11 + i % 3, i // 3
        matrix.set_function(b, a, dark)
        matrix.set_function(a, b, dark)
