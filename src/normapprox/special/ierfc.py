"""
Inverse Complementary Error Function
====================================

Acklam's rational initial guess for erfc^{-1}(p) sharpened by two Halley
iterations against a pluggable error function approximation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from normapprox.special.erf import TWO_OVER_SQRT_PI, chebyshev_erf

if TYPE_CHECKING:
    from normapprox.types import ErrorFunction

IERFC_UPPER_SATURATION = 100.0
"""Value returned for ``p <= 0``, standing for erfc^{-1}(0) = +inf."""

IERFC_LOWER_SATURATION = -100.0
"""Value returned for ``p >= 2``, standing for erfc^{-1}(2) = -inf."""

HALLEY_ITERATIONS = 2

LN_2 = math.log(2.0)


def acklam_ierfc(p: float, erf: ErrorFunction | None = chebyshev_erf) -> float:
    """
    Inverse complementary error function by P. J. Acklam's method.

    The initial guess and the refinement follow Numerical Recipes, The Art
    of Scientific Computing, 3rd edition. Each Halley step evaluates
    ``erfc(x) = 1 - erf(x)`` with the supplied ``erf``, so the result is
    never more accurate than that approximation.

    Parameters
    ----------
    p : float
        Function argument, meaningful in (0, 2).
    erf : ErrorFunction, default=chebyshev_erf
        Error function approximation used by the refinement.

    Returns
    -------
    float
        Approximation of erfc^{-1}(p). Arguments outside (0, 2) saturate
        to ``-100.0`` (``p >= 2``) and ``100.0`` (``p <= 0``).

    Raises
    ------
    ValueError
        If ``erf`` is None.
    """
    if erf is None:
        raise ValueError("The error function approximation must not be None")

    if p >= 2.0:
        return IERFC_LOWER_SATURATION
    if p <= 0.0:
        return IERFC_UPPER_SATURATION
    if math.isnan(p):
        return math.nan

    # erfc(-x) = 2 - erfc(x)
    pp = p if p < 1.0 else 2.0 - p
    # pp * 0.5 underflows to 0 for the smallest subnormal
    t = math.sqrt(-2.0 * (math.log(pp) - LN_2))

    x = -0.70711 * ((2.30753 + t * 0.27061) / (1.0 + t * (0.99229 + t * 0.04481)) - t)
    for _ in range(HALLEY_ITERATIONS):
        err = (1.0 - erf(x)) - pp
        x += err / (TWO_OVER_SQRT_PI * math.exp(-x * x) - x * err)

    return x if p < 1.0 else -x
