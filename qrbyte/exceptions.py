# -*- coding: utf-8 -*-
"""
QR Byte Encoder - Exceptions

All errors raised by the package inherit from QRByteError so callers can
catch them in one place.
"""

from typing import Optional


class QRByteError(Exception):
    """Base exception for all qrbyte errors."""
    pass


class DataTooLongError(QRByteError, ValueError):
    """
    Raised when the payload does not fit in any supported version.

    The check happens during version selection, before any matrix is
    allocated, so no partial symbol ever exists when this is raised.

    Attributes:
        length (int): Payload length in bytes
        ec_level (str): Error correction level that was requested
        capacity (int): Byte capacity of the largest version at that level
    """

    def __init__(self, length: int, ec_level: str, capacity: Optional[int] = None):
        self.length = length
        self.ec_level = ec_level
        self.capacity = capacity
        if capacity is None:
            message = f"Payload of {length} bytes is too long for EC level {ec_level}"
        else:
            message = (
                f"Payload of {length} bytes exceeds the maximum of {capacity} bytes "
                f"for EC level {ec_level}"
            )
        super().__init__(message)


# Short name used throughout the docs
DataTooLong = DataTooLongError


class MatrixIncompleteError(QRByteError, AssertionError):
    """Raised when a matrix is finalized while some modules are still unset."""

    def __init__(self, unset_count: int):
        self.unset_count = unset_count
        super().__init__(f"{unset_count} module(s) left unset after data placement")
