# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module builds the function patterns of a QR symbol according to
ISO/IEC 18004 standard: finder patterns with their separators, timing
patterns, alignment patterns, the dark module, and the reserved format
and version information areas.

Functions:
    compute_alignment_centers: Alignment pattern centre coordinates
    place_finder_patterns: Draw the three finders and separators
    place_timing_patterns: Draw row 6 and column 6
    place_alignment_patterns: Draw 5x5 alignment patterns (v2+)
    reserve_format_areas: Reserve format strips and set the dark module
    reserve_version_areas: Reserve the two version blocks (v7+)
    build_function_patterns: Allocate a matrix with all of the above
"""

import logging
from typing import List

from .matrix import Matrix
from .tables import ALIGNMENT_CENTERS, symbol_size

logger = logging.getLogger(__name__)


def compute_alignment_centers(version: int) -> List[int]:
    """
    Get the centre coordinates of alignment patterns for a QR version.

    The same list applies to rows and columns; every (row, col) pair is a
    candidate centre except the three that collide with finder patterns.
    Version 1 has no alignment patterns.

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
    """
    return list(ALIGNMENT_CENTERS[version])


def finder_origins(size: int):
    """Top-left corners of the three finder patterns."""
    return [(0, 0), (0, size - 7), (size - 7, 0)]


def place_finder_patterns(matrix: Matrix) -> None:
    """
    Draw the three 7x7 finder patterns plus their light separators.

    Pattern: 1111111
             1000001
             1011101
             1011101
             1011101
             1000001
             1111111
    """
    for (r0, c0) in finder_origins(matrix.size):
        for dr in range(-1, 8):
            for dc in range(-1, 8):
                # Chebyshev distance from the centre: 0-1 core, 2 light ring,
                # 3 dark ring, 4 separator
                dist = max(abs(dr - 3), abs(dc - 3))
                matrix.set_function(r0 + dr, c0 + dc, dist not in (2, 4))


def place_timing_patterns(matrix: Matrix) -> None:
    """Alternate dark/light along row 6 and column 6, dark on even indices."""
    for i in range(matrix.size):
        if matrix.is_unset(6, i):
            matrix.set_function(6, i, i % 2 == 0)
        if matrix.is_unset(i, 6):
            matrix.set_function(i, 6, i % 2 == 0)


def _overlaps_finder(size: int, r: int, c: int) -> bool:
    return ((r <= 8 and c <= 8) or
            (r <= 8 and c >= size - 9) or
            (r >= size - 9 and c <= 8))


def place_alignment_patterns(matrix: Matrix, version: int) -> None:
    """
    Draw 5x5 alignment patterns (v2+).

    Pattern: 11111
             10001
             10101
             10001
             11111

    Cells already set (the timing row/column) are left as they are; the
    timing parity matches the pattern at those positions.
    """
    centers = compute_alignment_centers(version)
    for cy in centers:
        for cx in centers:
            if _overlaps_finder(matrix.size, cy, cx):
                continue
            for dr in range(-2, 3):
                for dc in range(-2, 3):
                    r, c = cy + dr, cx + dc
                    if matrix.is_unset(r, c):
                        matrix.set_function(r, c, max(abs(dr), abs(dc)) != 1)


def reserve_format_areas(matrix: Matrix) -> None:
    """
    Reserve the two 15-bit format strips and place the dark module.

    Reserved cells get a light placeholder that the format writer
    overwrites once the mask is known.
    """
    size = matrix.size

    # Dark module, always dark, next to the bottom-left finder
    matrix.set_function(size - 8, 8, True)

    cells = []
    # Around the top-left finder (the timing cells at index 6 stay as they are)
    for i in range(9):
        cells.append((8, i))
        cells.append((i, 8))
    # Beside the top-right and bottom-left finders
    for i in range(8):
        cells.append((8, size - 1 - i))
        cells.append((size - 1 - i, 8))

    for (r, c) in cells:
        if matrix.is_unset(r, c):
            matrix.set_function(r, c, False)


def reserve_version_areas(matrix: Matrix, version: int) -> None:
    """Reserve the 6x3 and 3x6 version information blocks (v7+)."""
    if version < 7:
        return
    size = matrix.size
    for i in range(6):
        for j in range(3):
            matrix.set_function(i, size - 11 + j, False)
            matrix.set_function(size - 11 + j, i, False)


def build_function_patterns(version: int) -> Matrix:
    """
    Allocate a matrix for ``version`` with every function pattern placed.

    Args:
        version (int): QR code version (1-10)

    Returns:
        Matrix: Grid whose only Unset cells are the data/EC area

    Example:
        >>> m = build_function_patterns(1)
        >>> m.unset_count()
        208
    """
    matrix = Matrix(symbol_size(version))
    place_finder_patterns(matrix)
    place_timing_patterns(matrix)
    place_alignment_patterns(matrix, version)
    reserve_format_areas(matrix)
    reserve_version_areas(matrix, version)
    logger.debug("Version %d: %d data modules available", version, matrix.unset_count())
    return matrix


# ASCII diagram showing QR code structure (for documentation)
"""
QR Code Structure (Version 1, 21x21 modules):

   0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0
 0 F F F F F F F S f D D D D S F F F F F F F
 1 F F F F F F F S f D D D D S F F F F F F F
 2 F F F F F F F S f D D D D S F F F F F F F
 3 F F F F F F F S f D D D D S F F F F F F F
 4 F F F F F F F S f D D D D S F F F F F F F
 5 F F F F F F F S f D D D D S F F F F F F F
 6 F F F F F F F S T T T T T S F F F F F F F
 7 S S S S S S S S f D D D D S S S S S S S S
 8 f f f f f f T f f D D D D f f f f f f f f
 9 D D D D D D T D D D D D D D D D D D D D D
10 D D D D D D T D D D D D D D D D D D D D D
11 D D D D D D T D D D D D D D D D D D D D D
12 D D D D D D T D D D D D D D D D D D D D D
13 S S S S S S S S X D D D D D D D D D D D D
14 F F F F F F F S f D D D D D D D D D D D D
15 F F F F F F F S f D D D D D D D D D D D D
16 F F F F F F F S f D D D D D D D D D D D D
17 F F F F F F F S f D D D D D D D D D D D D
18 F F F F F F F S f D D D D D D D D D D D D
19 F F F F F F F S f D D D D D D D D D D D D
20 F F F F F F F S f D D D D D D D D D D D D

Legend:
F = Finder pattern (7x7)
S = Separator (1-module light border around finders)
T = Timing pattern (row/col 6)
f = Format information (15 bits, written twice)
X = Dark module
D = Data/ECC area (208 modules = 26 codewords)
"""
