"""
Global registry of named erf and erfc^{-1} approximations using singleton pattern.

This module implements a centralized registry that maps approximation names
to their functions, so that distributions can be configured by name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from normapprox.types import ErrorFunction, InverseComplementaryErrorFunction


class ApproximationRegister:
    """
    Singleton registry for error function approximations.

    Keeps two independent namespaces: error functions and inverse
    complementary error functions.
    """

    _instance: ClassVar[ApproximationRegister | None] = None
    _error_functions: dict[str, ErrorFunction]
    _inverse_functions: dict[str, InverseComplementaryErrorFunction]

    def __new__(cls) -> ApproximationRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._error_functions = {}
            cls._instance._inverse_functions = {}
        return cls._instance

    @classmethod
    def get_error_function(cls, name: str) -> ErrorFunction:
        """
        Retrieve an error function approximation by name.

        Raises
        ------
        ValueError
            If no approximation with the given name exists.
        """
        self = cls()
        if name not in self._error_functions:
            raise ValueError(f"No error function {name} found in register")
        return self._error_functions[name]

    @classmethod
    def get_inverse_complementary_error_function(
        cls, name: str
    ) -> InverseComplementaryErrorFunction:
        """
        Retrieve an inverse complementary error function approximation by name.

        Raises
        ------
        ValueError
            If no approximation with the given name exists.
        """
        self = cls()
        if name not in self._inverse_functions:
            raise ValueError(f"No inverse complementary error function {name} found in register")
        return self._inverse_functions[name]

    @classmethod
    def register_error_function(cls, name: str, erf: ErrorFunction) -> None:
        """
        Register a new error function approximation.

        Parameters
        ----------
        name : str
            Name to register the approximation under.
        erf : ErrorFunction
            The approximation.

        Raises
        ------
        ValueError
            If the name is already registered.
        TypeError
            If ``erf`` is not callable.
        """
        self = cls()
        if not callable(erf):
            raise TypeError(f"Error function {name} must be callable")
        if name in self._error_functions:
            raise ValueError(f"Error function {name} already found in register")
        self._error_functions[name] = erf

    @classmethod
    def register_inverse_complementary_error_function(
        cls, name: str, ierfc: InverseComplementaryErrorFunction
    ) -> None:
        """
        Register a new inverse complementary error function approximation.

        Raises
        ------
        ValueError
            If the name is already registered.
        TypeError
            If ``ierfc`` is not callable.
        """
        self = cls()
        if not callable(ierfc):
            raise TypeError(f"Inverse complementary error function {name} must be callable")
        if name in self._inverse_functions:
            raise ValueError(
                f"Inverse complementary error function {name} already found in register"
            )
        self._inverse_functions[name] = ierfc

    @classmethod
    def error_function_names(cls) -> list[str]:
        """Names of the registered error functions, in registration order."""
        return list(cls()._error_functions)

    @classmethod
    def inverse_complementary_error_function_names(cls) -> list[str]:
        """Names of the registered inverse complementary error functions."""
        return list(cls()._inverse_functions)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
