"""
Sampling
========

Marsaglia polar method for drawing standard normal variates from uniform
ones without trigonometric calls.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np


def polar_standard_normal(rng: np.random.Generator | None = None) -> float:
    """
    Draw one standard normal variate by the Marsaglia polar method.

    A point ``(u, v)`` is drawn uniformly from the square ``[-1, 1)²``
    until it falls strictly inside the unit circle and off the origin.

    Parameters
    ----------
    rng : numpy.random.Generator, optional
        Source of uniform variates. A fresh ``default_rng()`` is used if
        omitted.

    Returns
    -------
    float
        A sample from N(0, 1).
    """
    if rng is None:
        rng = np.random.default_rng()

    while True:
        u = float(rng.uniform(-1.0, 1.0))
        v = float(rng.uniform(-1.0, 1.0))
        r = u * u + v * v
        if 0.0 < r < 1.0:
            return v * math.sqrt(-2.0 * math.log(r) / r)
