"""
Special functions subpackage

Numerical approximations used by the Normal distribution:

- floating-point factorial (:mod:`.factorial`);
- error function approximations (:mod:`.erf`);
- inverse complementary error function (:mod:`.ierfc`);
- named approximation registry (:mod:`.registry`, :mod:`.configuration`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .configuration import (
    configure_approximations_register,
    get_error_function,
    get_inverse_complementary_error_function,
    reset_approximations_register,
)
from .erf import (
    DEFAULT_TAYLOR_DEGREE,
    chebyshev_erf,
    soranzo_erf,
    taylor_erf,
    vazquez_leal_erf,
)
from .factorial import MAX_FACTORIAL_ARG, factorial
from .ierfc import acklam_ierfc
from .registry import ApproximationRegister

__all__ = [
    # factorial
    "MAX_FACTORIAL_ARG",
    "factorial",
    # error functions
    "DEFAULT_TAYLOR_DEGREE",
    "chebyshev_erf",
    "taylor_erf",
    "vazquez_leal_erf",
    "soranzo_erf",
    # inverse complementary error functions
    "acklam_ierfc",
    # registry
    "ApproximationRegister",
    "configure_approximations_register",
    "reset_approximations_register",
    "get_error_function",
    "get_inverse_complementary_error_function",
]
