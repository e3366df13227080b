# -*- coding: utf-8 -*-
"""
QR Data Placement Module

Maps the codeword bit sequence onto the free modules of the matrix in the
standard zig-zag order. The traversal order is a separate generator so it
can be checked on its own.
"""

import logging
from typing import Iterator, List, Sequence, Tuple

from .matrix import Matrix

logger = logging.getLogger(__name__)


def zigzag_coordinates(size: int, reserved: Sequence[Sequence[bool]]) -> Iterator[Tuple[int, int]]:
    """
    Yield non-reserved (row, col) positions in placement order.

    QR codes place data in two-column strips from right to left, going up
    the first strip, down the next, and so on. Column 6 (vertical timing
    pattern) is skipped by shifting the strip one column to the left.

    Args:
        size (int): QR code size in modules
        reserved (Sequence[Sequence[bool]]): True for function/reserved cells

    Yields:
        Tuple[int, int]: (row, col) of the next data module
    """
    upward = True
    col = size - 1

    while col > 0:
        if col == 6:  # Skip timing pattern column
            col -= 1

        for i in range(size):
            r = (size - 1 - i) if upward else i
            for c in (col, col - 1):
                if not reserved[r][c]:
                    yield r, c

        upward = not upward
        col -= 2


def place_data(matrix: Matrix, bits: List[int]) -> int:
    """
    Write ``bits`` into the Unset modules of ``matrix``.

    Modules left over once the bits run out (remainder bits) are light.

    Returns:
        int: Number of bits consumed
    """
    index = 0
    remainder = 0
    for r, c in zigzag_coordinates(matrix.size, matrix.reserved):
        if index < len(bits):
            matrix.set_data(r, c, bool(bits[index]))
            index += 1
        else:
            matrix.set_data(r, c, False)
            remainder += 1
    logger.debug("Placed %d bits, %d remainder module(s)", index, remainder)
    return index
