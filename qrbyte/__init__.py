# -*- coding: utf-8 -*-
"""
QR Byte Encoder - Core Module

From-scratch QR Code Model 2 encoder limited to Byte mode, versions 1-10
and a fixed mask. Produces a boolean module matrix; drawing it is left to
the caller.

Modules:
    qr_generator: Encoding pipeline entry points
    tables: Capacity tables and version selection
    bitstream: Byte-mode bit stream construction
    galois: GF(256) arithmetic tables
    reed_solomon: Reed-Solomon EC codeword generation
    blocks: Block splitting and interleaving
    functional_areas: Function pattern placement
    placement: Zig-zag data placement
    masking: Data masking and format/version information
"""

__version__ = "1.0.0"
__author__ = "qrbyte contributors"

from .qr_generator import QRSymbol, make_qr, encode
from .tables import byte_capacity, select_version, version_from_size
from .exceptions import QRByteError, DataTooLongError, DataTooLong, MatrixIncompleteError

__all__ = [
    'QRSymbol',
    'make_qr',
    'encode',
    'byte_capacity',
    'select_version',
    'version_from_size',
    'QRByteError',
    'DataTooLongError',
    'DataTooLong',
    'MatrixIncompleteError',
]
