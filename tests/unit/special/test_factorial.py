"""
Tests for the floating-point factorial.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from normapprox.special.factorial import MAX_FACTORIAL_ARG, factorial

from .base import relative_error


class TestFactorial:
    @pytest.mark.parametrize(
        "x, expected",
        [(0, 1.0), (1, 1.0), (5, 120.0), (10, 3628800.0), (15, 1307674368000.0)],
    )
    def test_small_arguments_are_exact(self, x, expected):
        """Small factorials are exact."""
        assert factorial(x) == expected

    @pytest.mark.parametrize("n", [16, 17, 31, 32, 47, 100, 159, 160, 169, 170])
    def test_matches_integer_factorial(self, n):
        """Results agree with math.factorial to 1e-14."""
        assert relative_error(float(math.factorial(n)), factorial(n)) < 1e-14

    def test_multiples_of_sixteen_come_from_table(self):
        """Multiples of 16 are read from the table."""
        assert factorial(16) == 2.0922789888e13
        assert factorial(160) == 4.7147236359920616e284

    @pytest.mark.parametrize("x, n", [(5.9, 5), (0.5, 0), (170.5, 170), (16.01, 16)])
    def test_fractional_argument_is_floored(self, x, n):
        """Fractional arguments are floored."""
        assert factorial(x) == factorial(n)

    @pytest.mark.parametrize("x", [MAX_FACTORIAL_ARG + 1, 171.5, 1000, math.inf])
    def test_overflow_returns_infinity(self, x):
        """Arguments above 170 give inf."""
        assert factorial(x) == math.inf

    def test_largest_finite_factorial(self):
        """170! is still finite."""
        assert math.isfinite(factorial(MAX_FACTORIAL_ARG))

    def test_nan_propagates(self):
        """NaN in, NaN out."""
        assert math.isnan(factorial(math.nan))

    @pytest.mark.parametrize("x", [-1, -0.5, -math.inf])
    def test_negative_argument_raises(self, x):
        """Negative arguments are rejected."""
        with pytest.raises(ValueError, match="must be nonnegative"):
            factorial(x)

    def test_error_message_echoes_argument(self):
        """The error message names the argument."""
        with pytest.raises(ValueError, match="-3"):
            factorial(-3)
