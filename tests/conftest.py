# -*- coding: utf-8 -*-
from typing import List

import pytest
from PIL import Image

from tests.utils import rasterize


@pytest.fixture
def zbar_decode():
    """Decode a matrix through pyzbar; skipped when zbar is unavailable."""
    # pyzbar raises a plain ImportError when the zbar shared library is missing
    pyzbar = pytest.importorskip("pyzbar.pyzbar", exc_type=ImportError)
    try:
        pyzbar.decode(Image.new('L', (32, 32), 255))
    except ImportError as ex:
        pytest.skip(f"zbar shared library not available: {ex}")

    def _decode(matrix: List[List[bool]]) -> List[bytes]:
        results = pyzbar.decode(rasterize(matrix), symbols=[pyzbar.ZBarSymbol.QRCODE])
        return [r.data for r in results]

    return _decode
