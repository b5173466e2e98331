"""
Tests for the inverse complementary error function.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import partial

import pytest
from scipy.special import erfcinv

from normapprox.special.erf import chebyshev_erf, soranzo_erf, taylor_erf, vazquez_leal_erf
from normapprox.special.ierfc import (
    IERFC_LOWER_SATURATION,
    IERFC_UPPER_SATURATION,
    acklam_ierfc,
)

ERFS = [chebyshev_erf, taylor_erf, vazquez_leal_erf, soranzo_erf]


class TestSaturation:
    @pytest.mark.parametrize("p", [2.0, 2.5, 1e10, math.inf])
    def test_upper_bound_saturates_to_minus_hundred(self, p):
        """p >= 2 returns -100."""
        assert acklam_ierfc(p) == IERFC_LOWER_SATURATION == -100.0

    @pytest.mark.parametrize("p", [0.0, -0.0, -1.0, -math.inf])
    def test_lower_bound_saturates_to_hundred(self, p):
        """p <= 0 returns 100."""
        assert acklam_ierfc(p) == IERFC_UPPER_SATURATION == 100.0

    def test_nan_propagates(self):
        """NaN in, NaN out."""
        assert math.isnan(acklam_ierfc(math.nan))

    def test_missing_erf_raises(self):
        """None in place of the error function is rejected."""
        with pytest.raises(ValueError, match="must not be None"):
            acklam_ierfc(0.5, erf=None)


class TestAcklamIerfc:
    @pytest.mark.parametrize("p", [1e-6, 1e-3, 0.1, 0.5, 0.9, 1.0, 1.1, 1.5, 1.9, 1.999])
    def test_matches_scipy_with_default_erf(self, p):
        """Default refinement agrees with scipy.special.erfcinv."""
        assert acklam_ierfc(p) == pytest.approx(erfcinv(p), abs=1e-6)

    def test_smallest_subnormal_stays_finite(self):
        """The smallest positive double gives a finite quantile."""
        x = acklam_ierfc(5e-324)
        assert math.isfinite(x)
        assert x > 26.0

    def test_one_maps_to_zero(self):
        """erfc^{-1}(1) is 0."""
        assert acklam_ierfc(1.0) == pytest.approx(0.0, abs=1e-7)

    @pytest.mark.parametrize("p", [0.05, 0.3, 0.8])
    def test_reflection_symmetry(self, p):
        """ierfc(2 - p) equals -ierfc(p)."""
        assert acklam_ierfc(2.0 - p) == pytest.approx(-acklam_ierfc(p), abs=1e-12)

    @pytest.mark.parametrize("erf", ERFS, ids=lambda f: f.__name__)
    @pytest.mark.parametrize("q", [0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99])
    def test_inverts_supplied_erf(self, erf, q):
        """The result inverts the erf used by the refinement."""
        x = acklam_ierfc(2.0 * q, erf=erf)
        assert erf(x) == pytest.approx(1.0 - 2.0 * q, abs=1e-5)

    def test_refinement_uses_supplied_erf(self):
        """A different erf changes the refined result."""
        p = 0.2
        default = acklam_ierfc(p)
        with_soranzo = acklam_ierfc(p, erf=soranzo_erf)
        assert default != with_soranzo
        assert with_soranzo == pytest.approx(erfcinv(p), abs=1e-3)

    def test_partial_is_an_inverse_complementary_error_function(self):
        """Binding erf with functools.partial gives a one-argument ierfc."""
        ierfc = partial(acklam_ierfc, erf=vazquez_leal_erf)
        assert ierfc(0.4) == acklam_ierfc(0.4, vazquez_leal_erf)
