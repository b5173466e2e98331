"""
Approximations Configuration
============================

This module registers the built-in approximations in the global
:class:`~normapprox.special.registry.ApproximationRegister`:

- error functions: Chebyshev, Taylor, Vazquez-Leal and Soranzo;
- inverse complementary error functions: Acklam with Halley refinement.

Notes
-----
- Registration happens once per process; :func:`reset_approximations_register`
  starts over.
- A name registered before configuration keeps its approximation; the
  built-in one is skipped with a warning.
- User approximations can be registered next to the built-ins under any
  unused name.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from functools import lru_cache
from typing import TYPE_CHECKING

from normapprox.special.erf import chebyshev_erf, soranzo_erf, taylor_erf, vazquez_leal_erf
from normapprox.special.ierfc import acklam_ierfc
from normapprox.special.registry import ApproximationRegister
from normapprox.types import ErfApproximation, IerfcApproximation

if TYPE_CHECKING:
    from normapprox.types import ErrorFunction, InverseComplementaryErrorFunction, ScalarFunc


_BUILTIN_ERROR_FUNCTIONS = (
    (ErfApproximation.CHEBYSHEV, chebyshev_erf),
    (ErfApproximation.TAYLOR, taylor_erf),
    (ErfApproximation.VAZQUEZ_LEAL, vazquez_leal_erf),
    (ErfApproximation.SORANZO, soranzo_erf),
)

_BUILTIN_INVERSE_FUNCTIONS = ((IerfcApproximation.ACKLAM, acklam_ierfc),)


def _warn_if_shadowed(name: str, registered: ScalarFunc, builtin: ScalarFunc) -> None:
    if registered is not builtin:
        warnings.warn(
            f"Approximation {name} has already been registered. "
            "The built-in one will not be taken into account",
            UserWarning,
            stacklevel=3,
        )


@lru_cache(maxsize=1)
def configure_approximations_register() -> ApproximationRegister:
    """
    Register all built-in approximations in the global registry.

    Returns
    -------
    ApproximationRegister
        The global registry of approximations.
    """
    register = ApproximationRegister()

    for name, erf in _BUILTIN_ERROR_FUNCTIONS:
        if name in register.error_function_names():
            _warn_if_shadowed(name, register.get_error_function(name), erf)
            continue
        register.register_error_function(name, erf)

    for name, ierfc in _BUILTIN_INVERSE_FUNCTIONS:
        if name in register.inverse_complementary_error_function_names():
            registered = register.get_inverse_complementary_error_function(name)
            _warn_if_shadowed(name, registered, ierfc)
            continue
        register.register_inverse_complementary_error_function(name, ierfc)

    return register


def reset_approximations_register() -> None:
    """
    Reset the cached approximations registry.
    """
    configure_approximations_register.cache_clear()
    ApproximationRegister._reset()


def get_error_function(name: str) -> ErrorFunction:
    """Resolve an error function approximation by its registered name."""
    return configure_approximations_register().get_error_function(name)


def get_inverse_complementary_error_function(name: str) -> InverseComplementaryErrorFunction:
    """Resolve an inverse complementary error function approximation by its registered name."""
    return configure_approximations_register().get_inverse_complementary_error_function(name)
