"""
Floating-point factorial used by the Taylor series of the error function.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from normapprox.types import Number

MAX_FACTORIAL_ARG = 170
"""Largest argument whose factorial is a finite double."""

# 0!, 16!, 32!, ..., 160!
_EVERY_SIXTEENTH_FACTORIAL = (
    1.0,
    2.0922789888e13,
    2.631308369336935e35,
    1.2413915592536073e61,
    1.2688693218588417e89,
    7.156945704626381e118,
    9.916779348709496e149,
    1.974506857221074e182,
    3.856204823625804e215,
    5.5502938327393044e249,
    4.7147236359920616e284,
)


def factorial(x: Number) -> float:
    """
    Factorial of ``floor(x)`` as a float.

    The result is the tabulated factorial of the nearest lower multiple
    of 16 multiplied by the remaining factors, which keeps at most 15
    multiplications per call.

    Parameters
    ----------
    x : Number
        Nonnegative argument. Fractional values are floored.

    Returns
    -------
    float
        ``floor(x)!``; NaN if ``x`` is NaN and ``inf`` when ``floor(x)``
        exceeds :data:`MAX_FACTORIAL_ARG`.

    Raises
    ------
    ValueError
        If ``x`` is negative.
    """
    if x < 0:
        raise ValueError(f"The argument must be nonnegative, got {x}")
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        return math.inf

    n = math.floor(x)
    if n > MAX_FACTORIAL_ARG:
        return math.inf

    s = 1.0
    for k in range(1 + (n & ~0xF), n + 1):
        s *= k
    return s * _EVERY_SIXTEENTH_FACTORIAL[n >> 4]
