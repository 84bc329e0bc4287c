"""Tests for fixed-width coefficient arithmetic."""

import pytest

from poly_calc.core.numbers import LONG_MAX, LONG_MIN, fast_pow, wrap_long


class TestWrapLong:
    def test_in_range_unchanged(self):
        assert wrap_long(0) == 0
        assert wrap_long(-17) == -17
        assert wrap_long(LONG_MAX) == LONG_MAX
        assert wrap_long(LONG_MIN) == LONG_MIN

    def test_overflow_wraps_negative(self):
        assert wrap_long(LONG_MAX + 1) == LONG_MIN

    def test_underflow_wraps_positive(self):
        assert wrap_long(LONG_MIN - 1) == LONG_MAX

    def test_multiple_of_modulus_is_zero(self):
        assert wrap_long(2 ** 64) == 0
        assert wrap_long(-(2 ** 65)) == 0


class TestFastPow:
    def test_zero_exponent(self):
        assert fast_pow(5, 0) == 1
        assert fast_pow(0, 0) == 1

    def test_closed_forms(self):
        assert fast_pow(0, 7) == 0
        assert fast_pow(1, 10 ** 30) == 1
        assert fast_pow(-1, 3) == -1
        assert fast_pow(-1, 10 ** 30) == 1
        assert fast_pow(42, 1) == 42

    def test_general_case(self):
        assert fast_pow(2, 10) == 1024
        assert fast_pow(3, 5) == 243
        assert fast_pow(-2, 3) == -8
        assert fast_pow(-3, 4) == 81

    def test_wraps_like_long(self):
        assert fast_pow(2, 63) == LONG_MIN
        assert fast_pow(2, 64) == 0

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError):
            fast_pow(2, -1)
