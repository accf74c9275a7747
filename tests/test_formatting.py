"""
Tests for result formatting.

Ordinary values round to fixed decimal places; very large values and
small fractions that would lose their significant figures switch to
scientific rounding.
"""

import math
import pytest

from formulas.formatting import DEFAULT_DIGITS, format_number


class TestFixedRounding:

    def test_default_digits(self):
        assert DEFAULT_DIGITS == 4
        assert format_number(3.14159265) == 3.1416

    def test_custom_digits(self):
        assert format_number(3.14159265, 2) == 3.14
        assert format_number(2.5, 0) == 2.0

    def test_integral_value(self):
        assert format_number(20.0) == 20.0

    def test_fraction_with_few_zeros(self):
        assert format_number(0.123456) == 0.1235

    def test_negative(self):
        assert format_number(-12.345678) == -12.3457


class TestScientificRounding:

    def test_small_value_keeps_significant_digits(self):
        """G would collapse to 0.0 under fixed rounding."""
        assert format_number(6.6743015e-11) == pytest.approx(6.6743e-11,
                                                             rel=1e-12)

    def test_small_negative_value(self):
        assert format_number(-1.234567e-5) == pytest.approx(-1.2346e-5,
                                                            rel=1e-12)

    def test_large_value(self):
        assert format_number(8.987551787e16) == pytest.approx(8.9876e16,
                                                              rel=1e-12)

    def test_just_below_threshold_is_fixed(self):
        assert format_number(123456789.123456) == 123456789.1235


class TestPassThrough:

    def test_infinity(self):
        assert format_number(math.inf) == math.inf
        assert format_number(-math.inf) == -math.inf

    def test_nan(self):
        assert math.isnan(format_number(math.nan))

    def test_booleans(self):
        assert format_number(True) is True
        assert format_number(False) is False

    def test_zero(self):
        assert format_number(0.0) == 0.0


ROUND_TRIP_VALUES = [
    3.14159265, -12.345678, 0.123456, 0.5, 0.96, 0.99996,
    6.6743015e-11, -1.234567e-5, 0.0949999, 0.09950001, 0.004999999,
    0.00449996, 999999999999.99, 1e12, 8.987551787e16, -2.99792458e20,
    123456789.123456, 1.0, 0.0,
]


class TestRoundTrip:
    """Formatting an already formatted value changes nothing."""

    @pytest.mark.parametrize("digits", range(0, 17))
    @pytest.mark.parametrize("value", ROUND_TRIP_VALUES)
    def test_idempotent(self, value, digits):
        once = format_number(value, digits)
        assert format_number(once, digits) == once
