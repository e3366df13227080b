# -*- coding: utf-8 -*-
"""Tests for the Flask JSON front end."""

import pytest

from app import app
from qrbyte import make_qr


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class TestMatrixEndpoint:

    def test_hello(self, client):
        resp = client.get('/api/matrix', query_string={'text': 'HELLO', 'ecc': 'M'})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body['version'] == 1
        assert body['size'] == 21
        assert body['ecc'] == 'M'
        assert body['mask'] == 0
        assert len(body['rows']) == 21
        assert all(len(row) == 21 and set(row) <= {'0', '1'} for row in body['rows'])

    def test_rows_match_library(self, client):
        resp = client.post('/api/matrix', data={'text': 'form post', 'ecc': 'q', 'mask': '3'})
        body = resp.get_json()
        qr = make_qr('form post', ecc='Q', mask=3)
        assert body['ecc'] == 'Q'
        assert body['mask'] == 3
        assert body['rows'] == ["".join('1' if d else '0' for d in row) for row in qr.matrix]

    def test_invalid_params_use_defaults(self, client):
        body = client.get('/api/matrix', query_string={'text': 'x', 'ecc': 'Z', 'mask': 'abc'}).get_json()
        assert body['ecc'] == 'M'
        assert body['mask'] == 0

    def test_missing_text(self, client):
        resp = client.get('/api/matrix')
        assert resp.status_code == 400
        assert 'error' in resp.get_json()

    def test_too_long(self, client):
        resp = client.post('/api/matrix', data={'text': 'x' * 120, 'ecc': 'H'})
        assert resp.status_code == 400
        body = resp.get_json()
        assert body['length'] == 120
        assert body['capacity'] == 119
        assert '120' in body['error']


class TestCapacityEndpoint:

    def test_medium(self, client):
        body = client.get('/api/capacity', query_string={'ecc': 'M'}).get_json()
        assert body['ecc'] == 'M'
        assert body['capacities']['1'] == 14
        assert body['capacities']['10'] == 213
        assert len(body['capacities']) == 10

    def test_default_level(self, client):
        assert client.get('/api/capacity').get_json()['ecc'] == 'M'
