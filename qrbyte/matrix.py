# -*- coding: utf-8 -*-
"""
QR Matrix Module

Tri-state module grid used while a symbol is being built. Every cell is
Unset, Dark or Light; ``finalize`` collapses the grid to booleans and
refuses to do so while any cell is still Unset.
"""

import logging
from enum import Enum
from typing import List, Tuple

from .exceptions import MatrixIncompleteError

logger = logging.getLogger(__name__)


class Module(Enum):
    UNSET = 0
    DARK = 1
    LIGHT = 2

    @classmethod
    def from_bool(cls, dark) -> 'Module':
        return cls.DARK if dark else cls.LIGHT


class Matrix:
    """
    Square grid of modules plus a record of which cells are reserved.

    Reserved cells (function patterns, format and version information) are
    never touched by data placement or masking.
    """

    def __init__(self, size: int):
        self.size = size
        self.modules = [[Module.UNSET] * size for _ in range(size)]
        self.reserved = [[False] * size for _ in range(size)]

    def __getitem__(self, pos: Tuple[int, int]) -> Module:
        r, c = pos
        return self.modules[r][c]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def is_unset(self, r: int, c: int) -> bool:
        return self.modules[r][c] is Module.UNSET

    def set_function(self, r: int, c: int, dark: bool) -> None:
        """Set a function module; out-of-bounds cells are ignored."""
        if self.in_bounds(r, c):
            self.modules[r][c] = Module.from_bool(dark)
            self.reserved[r][c] = True

    def set_data(self, r: int, c: int, dark: bool) -> None:
        self.modules[r][c] = Module.from_bool(dark)

    def unset_count(self) -> int:
        return sum(row.count(Module.UNSET) for row in self.modules)

    def finalize(self) -> List[List[bool]]:
        """
        Collapse to a boolean grid (True = dark).

        Raises:
            MatrixIncompleteError: If any module is still Unset
        """
        missing = self.unset_count()
        if missing:
            logger.error("Cannot finalize %dx%d matrix: %d unset module(s)", self.size, self.size, missing)
            raise MatrixIncompleteError(missing)
        return [[m is Module.DARK for m in row] for row in self.modules]
