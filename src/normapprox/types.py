"""
Core Type Definitions
=====================

Fundamental types shared by the approximation layer and the Normal
distribution facade.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum
from typing import Any

import numpy as np

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""

ErrorFunction = ScalarFunc
"""Approximation of the Gauss error function erf(x)."""

InverseComplementaryErrorFunction = ScalarFunc
"""Approximation of erfc^{-1}(p), the x such that erfc(x) = p."""

CumulativeFunction = ScalarFunc
"""Cumulative distribution function of a univariate random variable."""


class ErfApproximation(StrEnum):
    """
    Names of the built-in error function approximations.

    Attributes
    ----------
    CHEBYSHEV : str
        Chebyshev rational approximation (Numerical Recipes).
    TAYLOR : str
        Truncated Taylor series.
    VAZQUEZ_LEAL : str
        Vazquez-Leal closed form.
    SORANZO : str
        Soranzo closed form.
    """

    CHEBYSHEV = "chebyshev"
    TAYLOR = "taylor"
    VAZQUEZ_LEAL = "vazquez_leal"
    SORANZO = "soranzo"


class IerfcApproximation(StrEnum):
    """Names of the built-in inverse complementary error function approximations."""

    ACKLAM = "acklam"


__all__ = [
    "NumPyNumber",
    "Number",
    "ScalarFunc",
    "ErrorFunction",
    "InverseComplementaryErrorFunction",
    "CumulativeFunction",
    "ErfApproximation",
    "IerfcApproximation",
]
