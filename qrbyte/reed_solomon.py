# -*- coding: utf-8 -*-
"""
Reed-Solomon Encoder Module

Systematic Reed-Solomon encoding over GF(256) as used by QR codes.

Functions:
    generator_polynomial: Build g(x) = (x - a^0)(x - a^1)...(x - a^(n-1))
    rs_remainder: Compute the EC codewords for one data block
"""

import logging
from functools import lru_cache
from typing import List, Sequence, Tuple

from .galois import GF_TABLES, gf_mul

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def generator_polynomial(degree: int) -> Tuple[int, ...]:
    """
    Build the generator polynomial of the given degree.

    Coefficients are ordered from the highest power down, so the leading
    coefficient is always 1. Subtraction in GF(256) is XOR, hence the
    factors (x - a^i) and (x + a^i) coincide.

    Args:
        degree (int): Number of EC codewords to produce

    Returns:
        Tuple[int, ...]: ``degree + 1`` coefficients

    Example:
        >>> generator_polynomial(2)
        (1, 3, 2)
    """
    poly = [1]
    for i in range(degree):
        root = GF_TABLES.exp[i]
        product = poly + [0]
        for j, coeff in enumerate(poly):
            product[j + 1] ^= gf_mul(coeff, root)
        poly = product
    logger.debug("Built generator polynomial of degree %d", degree)
    return tuple(poly)


def rs_remainder(data: Sequence[int], ec_length: int) -> List[int]:
    """
    Compute the Reed-Solomon EC codewords for one block.

    Divides ``data || ec_length zero bytes`` by the generator polynomial
    and returns the remainder.

    Args:
        data (Sequence[int]): Data codewords of the block
        ec_length (int): Number of EC codewords

    Returns:
        List[int]: ``ec_length`` EC codewords
    """
    generator = generator_polynomial(ec_length)
    result = list(data) + [0] * ec_length

    for i in range(len(data)):
        coeff = result[i]
        if coeff:
            for j in range(1, ec_length + 1):
                result[i + j] ^= gf_mul(generator[j], coeff)

    return result[len(data):]
