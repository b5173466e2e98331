"""
Error Function Approximations
=============================

Interchangeable approximations of the Gauss error function

    erf(x) = 2/√π ∫₀ˣ exp(-t²) dt

Every approximation is a plain function ``float -> float`` matching
:data:`~normapprox.types.ErrorFunction`, so any of them can be injected
into :class:`~normapprox.distributions.normal.NormalDistribution` or into
:func:`~normapprox.special.ierfc.acklam_ierfc`.

Notes
-----
All approximations return exactly 0 at 0, are odd and saturate to ±1
at ±inf, except :func:`taylor_erf` which is a finite polynomial and has
no asymptotic guarantee.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

from normapprox.special.factorial import MAX_FACTORIAL_ARG, factorial

TWO_OVER_SQRT_PI = 1.1283791670955126
"""2/√π, the derivative of erf at zero."""

DEFAULT_TAYLOR_DEGREE = 40
"""Default truncation degree of :func:`taylor_erf`."""

_CHEBYSHEV_COEFFICIENTS = (
    1.00002368,
    0.37409196,
    0.09678418,
    -0.18628806,
    0.27886807,
    -1.13520398,
    1.48851587,
    -0.82215223,
    0.17087277,
)


def chebyshev_erf(x: float) -> float:
    """
    Error function by the Chebyshev fitting formula.

    The coefficients come from Numerical Recipes, The Art of Scientific
    Computing, 3rd edition. The relative error bound is 1.2e-7.

    Parameters
    ----------
    x : float
        Function argument.

    Returns
    -------
    float
        Approximation of erf(x).
    """
    if x == 0.0:
        return 0.0

    z = abs(x)
    t = 2.0 / (2.0 + z)

    poly = 0.0
    for coefficient in reversed(_CHEBYSHEV_COEFFICIENTS):
        poly = t * (coefficient + poly)

    r = t * math.exp(-z * z - 1.26551223 + poly)
    return 1.0 - r if x >= 0 else r - 1.0


def taylor_erf(x: float, degree: int = DEFAULT_TAYLOR_DEGREE) -> float:
    """
    Error function by its Taylor polynomial around zero.

    Parameters
    ----------
    x : float
        Function argument.
    degree : int, default=40
        Index of the last series term. Accuracy grows with the degree
        until it plateaus at double precision.

    Returns
    -------
    float
        Approximation of erf(x). Large ``|x|`` is not saturated: the
        truncated series diverges there.

    Warns
    -----
    UserWarning
        If ``degree`` exceeds the largest finite factorial argument, since
        all further terms are zero.
    """
    if degree > MAX_FACTORIAL_ARG:
        warnings.warn(
            f"Taylor terms beyond degree {MAX_FACTORIAL_ARG} vanish, got degree {degree}",
            UserWarning,
            stacklevel=2,
        )

    x2 = x * x
    power = 1.0
    total = 0.0
    for k in range(degree + 1):
        sign = -1.0 if k & 1 else 1.0
        total += sign * power / (factorial(k) * (2 * k + 1))
        power *= x2

    return TWO_OVER_SQRT_PI * x * total


def vazquez_leal_erf(x: float) -> float:
    """
    Error function by the Vazquez-Leal formula ``tanh(a·x - c·atan(b·x))``.

    See https://www.uv.mx/personal/hvazquez/files/2012/02/124029.pdf.
    The relative error bound is 1.88e-4
    (https://arxiv.org/ftp/arxiv/papers/2012/2012.04466.pdf).
    """
    a = 11.001696879181248
    b = 0.17789761643397722
    c = 55.5

    return math.tanh(a * x - c * math.atan(b * x))


def soranzo_erf(x: float) -> float:
    """
    Error function by the Soranzo formula.

    See https://arxiv.org/pdf/1201.1320v1.pdf. The relative error bound is
    1.21e-4.

    Parameters
    ----------
    x : float
        Function argument.

    Returns
    -------
    float
        Approximation of erf(x).

    Notes
    -----
    The formula only holds for nonnegative arguments; negative ones use
    erf(-x) = -erf(x).
    """
    z = abs(x)
    z2 = z * z
    z4 = z2 * z2

    if z4 == math.inf:
        return 1.0 if x > 0 else -1.0

    a = 1.2735457
    b = 0.1487936
    c = 0.1480931
    d = 5.16e-4

    f = math.sqrt(1.0 - math.exp(-z2 * (a + b * z2) / (1.0 + c * z2 + d * z4)))
    return f if x >= 0 else -f
