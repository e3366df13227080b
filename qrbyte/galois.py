# -*- coding: utf-8 -*-
"""
Galois Field GF(256) Module

Exponent and logarithm tables over GF(2^8) built from the primitive
polynomial x^8 + x^4 + x^3 + x^2 + 1 (0x11D) with generator alpha = 2.

The tables are computed once at import time and exposed as tuples through
the module-level ``GF_TABLES`` constant; nothing can mutate them afterwards,
so concurrent encoders share them without locking.
"""

import logging
from typing import NamedTuple, Tuple

logger = logging.getLogger(__name__)

PRIMITIVE_POLY = 0x11D


class GFTables(NamedTuple):
    """Read-only lookup tables. ``exp`` has 512 entries, ``log`` has 256."""
    exp: Tuple[int, ...]
    log: Tuple[int, ...]


def _build_tables() -> GFTables:
    exp = [0] * 512
    log = [0] * 256  # log[0] is undefined and left at 0
    x = 1
    for i in range(255):
        exp[i] = x
        log[x] = i
        x <<= 1
        if x & 0x100:
            x ^= PRIMITIVE_POLY
    # Mirror so exp[log[a] + log[b]] never needs a modulo
    for i in range(255, 512):
        exp[i] = exp[i - 255]
    logger.debug("Built GF(256) tables for primitive polynomial 0x%X", PRIMITIVE_POLY)
    return GFTables(exp=tuple(exp), log=tuple(log))


GF_TABLES = _build_tables()


def gf_mul(a: int, b: int) -> int:
    """Multiply two field elements. Either operand being zero yields zero."""
    if a == 0 or b == 0:
        return 0
    return GF_TABLES.exp[GF_TABLES.log[a] + GF_TABLES.log[b]]
