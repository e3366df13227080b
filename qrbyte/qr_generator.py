# -*- coding: utf-8 -*-
"""
QR Code Generator Module

This module runs the full encoding pipeline for Byte-mode QR codes,
versions 1-10: version selection, bit stream, Reed-Solomon blocks,
interleaving, matrix construction, data placement, masking and format
information. The result is a boolean module matrix for an external
rasterizer to draw.

Functions:
    make_qr: Generate a QR symbol with its metadata
    encode: Generate only the boolean module matrix
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from .bitstream import bytes_to_bits, encode_bitstream
from .blocks import interleave, split_blocks
from .functional_areas import build_function_patterns
from .masking import DEFAULT_MASK, apply_mask, normalize_mask, write_format_info, write_version_info
from .placement import place_data
from .tables import DEFAULT_EC_LEVEL, normalize_ec_level, select_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QRSymbol:
    """Finished symbol. ``matrix[r][c]`` is True for a dark module."""
    version: int
    ec_level: str
    mask: int
    matrix: Tuple[Tuple[bool, ...], ...]

    @property
    def size(self) -> int:
        return len(self.matrix)

    def rows(self) -> List[List[bool]]:
        return [list(row) for row in self.matrix]


def _to_bytes(data: Union[str, bytes]) -> bytes:
    if isinstance(data, str):
        return data.encode('utf-8')
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Payload must be str or bytes-like, not {type(data).__name__}")


def make_qr(
    data: Union[str, bytes],
    ecc: str = DEFAULT_EC_LEVEL,
    mask: int = DEFAULT_MASK
) -> QRSymbol:
    """
    Generate a QR code symbol in Byte mode.

    The smallest version (1-10) that holds the payload at the requested
    error correction level is selected automatically. The mask is fixed:
    no penalty evaluation takes place.

    Args:
        data (Union[str, bytes]): Payload; text is encoded as UTF-8
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
            - Case-sensitive; anything else falls back to 'M'
        mask (int): Mask pattern id (0-3)
            - Unsupported values fall back to 0

    Returns:
        QRSymbol: Version, EC level, mask and the boolean module matrix

    Raises:
        DataTooLongError: If the payload exceeds version 10 at this level
        TypeError: If ``data`` is neither str nor bytes-like

    Example:
        >>> qr = make_qr("HELLO", ecc='M')
        >>> qr.version, qr.size
        (1, 21)
    """
    payload = _to_bytes(data)
    ec_level = normalize_ec_level(ecc)
    mask_id = normalize_mask(mask)

    # Raises before anything is allocated
    version = select_version(len(payload), ec_level)

    bitstream = encode_bitstream(payload, version, ec_level)
    blocks = split_blocks(bitstream.to_bytes(), version, ec_level)
    codeword_bits = bytes_to_bits(interleave(blocks))

    matrix = build_function_patterns(version)
    placed = place_data(matrix, codeword_bits)
    apply_mask(matrix, mask_id)
    write_format_info(matrix, ec_level, mask_id)
    write_version_info(matrix, version)

    rows = matrix.finalize()
    logger.debug(
        "Encoded %d bytes as version %d-%s, mask %d (%d codeword bits placed)",
        len(payload), version, ec_level, mask_id, placed
    )
    return QRSymbol(
        version=version,
        ec_level=ec_level,
        mask=mask_id,
        matrix=tuple(tuple(row) for row in rows),
    )


def encode(data: Union[str, bytes], ec_level: str = DEFAULT_EC_LEVEL) -> List[List[bool]]:
    """
    Encode ``data`` and return only the module matrix.

    The size is ``version * 4 + 17``; callers that need the version can
    recover it with ``tables.version_from_size``.
    """
    return make_qr(data, ecc=ec_level).rows()
