#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Byte Encoder - Flask Web Application

JSON front end for the encoder. It returns the module matrix; drawing it
is up to the client.
"""

import logging
from flask import Flask, jsonify, request
from typing import Tuple
from qrbyte import DataTooLongError, make_qr
from qrbyte.masking import DEFAULT_MASK
from qrbyte.tables import DEFAULT_EC_LEVEL, EC_LEVELS, MAX_VERSION, MIN_VERSION, byte_capacity

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _read_params(req) -> Tuple[str, str, int]:
    """Extract QR generation parameters from a Flask request."""
    text = req.values.get('text') or ""
    ecc = (req.values.get('ecc') or DEFAULT_EC_LEVEL).strip().upper()
    if ecc not in EC_LEVELS:
        ecc = DEFAULT_EC_LEVEL

    try:
        mask = int(req.values.get('mask') or DEFAULT_MASK)
    except (ValueError, TypeError):
        mask = DEFAULT_MASK

    return text, ecc, mask


app = Flask(__name__)


@app.route('/api/matrix', methods=['GET', 'POST'])
def matrix():
    text, ecc, mask = _read_params(request)
    if not text:
        return jsonify(error="Text to encode is required"), 400

    logger.info(f"Generating QR code with parameters: ecc={ecc}, mask={mask}, length={len(text)}")
    try:
        qr = make_qr(text, ecc=ecc, mask=mask)
    except DataTooLongError as ex:
        logger.warning(f"QR generation rejected: {ex}")
        return jsonify(error=str(ex), length=ex.length, capacity=ex.capacity), 400

    logger.info(f"Successfully generated QR code version {qr.version} ({qr.size}x{qr.size})")
    return jsonify(
        version=qr.version,
        size=qr.size,
        ecc=qr.ec_level,
        mask=qr.mask,
        rows=["".join("1" if dark else "0" for dark in row) for row in qr.matrix],
    )


@app.route('/api/capacity', methods=['GET'])
def capacity():
    _, ecc, _ = _read_params(request)
    capacities = {
        str(version): byte_capacity(version, ecc)
        for version in range(MIN_VERSION, MAX_VERSION + 1)
    }
    return jsonify(ecc=ecc, capacities=capacities)


if __name__ == "__main__":
    app.run(debug=False)
