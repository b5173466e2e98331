"""
Common helpers for approximation tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


def absolute_error(exact: float, approximation: float) -> float:
    return abs(exact - approximation)


def relative_error(exact: float, approximation: float) -> float:
    return abs((exact - approximation) / exact)
