# -*- coding: utf-8 -*-
"""
QR Block Splitter & Interleaver Module

Splits the data codewords into Reed-Solomon blocks, computes the EC
codewords of each block and interleaves everything into the final
codeword sequence.
"""

import logging
from dataclasses import dataclass
from typing import List

from .reed_solomon import rs_remainder
from .tables import ec_blocks

logger = logging.getLogger(__name__)


@dataclass
class CodewordBlock:
    """Data codewords of one RS block together with their EC codewords."""
    data: List[int]
    ecc: List[int]


def split_blocks(codewords: bytes, version: int, ec_level: str) -> List[CodewordBlock]:
    """
    Slice the padded data codewords into blocks and compute EC for each.

    Args:
        codewords (bytes): Data codewords, exactly the data capacity
        version (int): Symbol version (1-10)
        ec_level (str): Error correction level

    Returns:
        List[CodewordBlock]: One entry per RS block, in block order
    """
    ecc_per_block, groups = ec_blocks(version, ec_level)
    blocks = []
    offset = 0
    for count, size in groups:
        for _ in range(count):
            data = list(codewords[offset:offset + size])
            offset += size
            blocks.append(CodewordBlock(data=data, ecc=rs_remainder(data, ecc_per_block)))
    if offset != len(codewords):
        raise ValueError(f"Expected {offset} data codewords, got {len(codewords)}")
    logger.debug("Split %d codewords into %d block(s), %d EC each", offset, len(blocks), ecc_per_block)
    return blocks


def interleave(blocks: List[CodewordBlock]) -> bytes:
    """
    Interleave data codewords, then EC codewords, column by column.

    Shorter data blocks are skipped once exhausted; every EC block has the
    same length.
    """
    out = bytearray()
    longest = max(len(block.data) for block in blocks)
    for i in range(longest):
        for block in blocks:
            if i < len(block.data):
                out.append(block.data[i])
    for i in range(len(blocks[0].ecc)):
        for block in blocks:
            out.append(block.ecc[i])
    return bytes(out)
