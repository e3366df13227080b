# -*- coding: utf-8 -*-
"""Helpers shared by the test modules."""

from typing import List

import numpy as np
import pytest
from PIL import Image

from qrbyte.functional_areas import build_function_patterns
from qrbyte.masking import MASK_PATTERNS
from qrbyte.placement import zigzag_coordinates
from qrbyte.tables import total_codewords


def payload_of(length: int) -> bytes:
    """Deterministic payload covering the whole byte range."""
    return bytes((i * 37 + 11) % 256 for i in range(length))


def segno_matrix(payload: bytes, ec_level: str, version: int, mask: int) -> List[List[bool]]:
    """
    Module matrix produced by segno for the same parameters.

    Only valid for payloads at exact capacity: below it segno pads a
    byte-aligned stream with an extra zero codeword.
    """
    segno = pytest.importorskip("segno")
    qr = segno.make(payload, error=ec_level, version=version, mode='byte',
                    mask=mask, eci=False, micro=False, boost_error=False)
    return [[bool(v) for v in row] for row in qr.matrix]


def rasterize(matrix: List[List[bool]], scale: int = 8, border: int = 4) -> Image.Image:
    """Grayscale image of the matrix with a light quiet zone."""
    modules = np.array(matrix, dtype=bool)
    modules = np.pad(modules, border, mode='constant', constant_values=False)
    pixels = np.where(modules, 0, 255).astype(np.uint8)
    pixels = np.kron(pixels, np.ones((scale, scale), dtype=np.uint8))
    return Image.fromarray(pixels)


def read_format_copies(matrix: List[List[bool]]):
    """Read both 15-bit format copies back out of a finished matrix."""
    size = len(matrix)
    first = second = 0
    cells_first = [(i, 8) for i in range(6)] + [(7, 8), (8, 8), (8, 7)] + [(8, 14 - i) for i in range(9, 15)]
    cells_second = [(8, size - 1 - i) for i in range(8)] + [(size - 15 + i, 8) for i in range(8, 15)]
    for i, (r, c) in enumerate(cells_first):
        first |= int(matrix[r][c]) << i
    for i, (r, c) in enumerate(cells_second):
        second |= int(matrix[r][c]) << i
    return first, second


def read_codewords(matrix: List[List[bool]], version: int, mask: int) -> bytes:
    """Unmask the data area and collect the codewords in placement order."""
    reserved = build_function_patterns(version).reserved
    condition = MASK_PATTERNS[mask]
    bits = [int(matrix[r][c] ^ condition(r, c)) for r, c in zigzag_coordinates(len(matrix), reserved)]
    out = bytearray()
    for i in range(total_codewords(version)):
        byte = 0
        for bit in bits[i * 8:i * 8 + 8]:
            byte = (byte << 1) | bit
        out.append(byte)
    return bytes(out)
