# -*- coding: utf-8 -*-
"""Tests for capacity tables and version selection."""

import pytest

from qrbyte.exceptions import DataTooLongError
from qrbyte.tables import (
    EC_LEVELS, FORMAT_STRINGS, VERSION_INFO, EC_LEVEL_BITS,
    byte_capacity, data_codewords, ec_blocks, normalize_ec_level,
    select_version, symbol_size, total_codewords, version_from_size,
)

# Byte-mode capacities from ISO/IEC 18004 table 7
BYTE_CAPACITY = {
    'L': [17, 32, 53, 78, 106, 134, 154, 192, 230, 271],
    'M': [14, 26, 42, 62, 84, 106, 122, 152, 180, 213],
    'Q': [11, 20, 32, 46, 60, 74, 86, 108, 130, 151],
    'H': [7, 14, 24, 34, 44, 58, 64, 84, 98, 119],
}

TOTAL_CODEWORDS = [26, 44, 70, 100, 134, 172, 196, 242, 292, 346]


def _bch_format(data: int) -> int:
    rem = data
    for _ in range(10):
        rem = (rem << 1) ^ ((rem >> 9) * 0x537)
    return ((data << 10) | rem) ^ 0x5412


def _bch_version(version: int) -> int:
    rem = version
    for _ in range(12):
        rem = (rem << 1) ^ ((rem >> 11) * 0x1F25)
    return (version << 12) | rem


class TestCapacityTables:

    @pytest.mark.parametrize("ec_level", EC_LEVELS)
    def test_byte_capacity_matches_standard(self, ec_level):
        assert [byte_capacity(v, ec_level) for v in range(1, 11)] == BYTE_CAPACITY[ec_level]

    @pytest.mark.parametrize("ec_level", EC_LEVELS)
    def test_blocks_fill_every_version(self, ec_level):
        for version in range(1, 11):
            ecc_per_block, groups = ec_blocks(version, ec_level)
            blocks = sum(count for count, _ in groups)
            assert data_codewords(version, ec_level) + blocks * ecc_per_block == TOTAL_CODEWORDS[version - 1]

    def test_total_codewords(self):
        assert [total_codewords(v) for v in range(1, 11)] == TOTAL_CODEWORDS

    def test_block_groups_differ_by_one(self):
        for version in range(1, 11):
            for ec_level in EC_LEVELS:
                _, groups = ec_blocks(version, ec_level)
                if len(groups) == 2:
                    assert groups[1][1] == groups[0][1] + 1

    def test_format_table_matches_bch(self):
        assert len(FORMAT_STRINGS) == 32
        for data in range(32):
            assert FORMAT_STRINGS[data] == _bch_format(data)

    def test_format_index_uses_level_bits(self):
        assert FORMAT_STRINGS[(EC_LEVEL_BITS['L'] << 3) | 0] == 0b111011111000100
        assert FORMAT_STRINGS[(EC_LEVEL_BITS['H'] << 3) | 3] == 0b001100111010000

    def test_version_info_matches_bch(self):
        for version, bits in VERSION_INFO.items():
            assert bits == _bch_version(version)


class TestVersionSelection:

    def test_hello_selects_version_1(self):
        assert select_version(5, 'M') == 1

    def test_single_byte_high(self):
        assert select_version(1, 'H') == 1

    def test_boundary_exact_fit(self):
        assert select_version(14, 'M') == 1
        assert select_version(15, 'M') == 2

    @pytest.mark.parametrize("ec_level", EC_LEVELS)
    def test_every_boundary(self, ec_level):
        for version, capacity in enumerate(BYTE_CAPACITY[ec_level], start=1):
            assert select_version(capacity, ec_level) == version
            if version < 10:
                assert select_version(capacity + 1, ec_level) == version + 1

    def test_empty_payload(self):
        assert select_version(0, 'H') == 1

    @pytest.mark.parametrize("ec_level", EC_LEVELS)
    def test_too_long(self, ec_level):
        limit = BYTE_CAPACITY[ec_level][-1]
        with pytest.raises(DataTooLongError) as info:
            select_version(limit + 1, ec_level)
        assert info.value.length == limit + 1
        assert info.value.capacity == limit
        assert info.value.ec_level == ec_level

    def test_too_long_is_value_error(self):
        with pytest.raises(ValueError):
            select_version(1000, 'L')


class TestNormalization:

    @pytest.mark.parametrize("token", EC_LEVELS)
    def test_known_levels_pass_through(self, token):
        assert normalize_ec_level(token) == token

    @pytest.mark.parametrize("token", ['l', 'h', 'X', '', None, 'MM'])
    def test_unknown_levels_fall_back_to_m(self, token):
        assert normalize_ec_level(token) == 'M'


class TestSizes:

    def test_symbol_size(self):
        assert [symbol_size(v) for v in range(1, 11)] == list(range(21, 58, 4))

    def test_version_from_size(self):
        for version in range(1, 11):
            assert version_from_size(symbol_size(version)) == version

    @pytest.mark.parametrize("size", [20, 22, 17, 61, 0])
    def test_version_from_invalid_size(self, size):
        with pytest.raises(ValueError):
            version_from_size(size)
