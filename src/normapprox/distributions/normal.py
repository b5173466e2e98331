"""
Normal Distribution
===================

Normal (Gaussian) distribution whose cumulative and quantile functions are
computed through injected approximations of erf and erfc^{-1}.

The density of N(μ, σ) is

    f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

and its cumulative distribution function is

    F(x) = (1 + erf((x-μ)/(σ√2))) / 2.

Notes
-----
- The accuracy of :meth:`NormalDistribution.cdf` is that of the injected
  error function; :meth:`NormalDistribution.ppf` additionally depends on the
  inverse complementary error function.
- Unless told otherwise, the quantile function refines Acklam's guess
  against the distribution's own error function, so ``ppf`` inverts ``cdf``
  for every injected approximation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, cast

from normapprox.distributions.sampling import polar_standard_normal
from normapprox.special.configuration import (
    get_error_function,
    get_inverse_complementary_error_function,
)
from normapprox.special.erf import chebyshev_erf
from normapprox.special.ierfc import acklam_ierfc

if TYPE_CHECKING:
    import numpy as np

    from normapprox.types import (
        CumulativeFunction,
        ErrorFunction,
        InverseComplementaryErrorFunction,
    )

INV_SQRT_2PI = 0.3989422804014327
"""1/√(2π), the standard normal density at zero."""

SIGMA_RULE_PROBABILITIES = (
    (1, 0.6826894772086507),
    (2, 0.954499740219751),
    (3, 0.9973002038534888),
)
"""P(|X - μ| <= kσ) for k = 1, 2, 3."""

DEFAULT_GOODNESS_OF_FIT_TOLERANCE = 0.005
"""Largest accepted deviation of a sigma band probability in the goodness-of-fit check."""


def _validate_location_scale(mean: float, standard_deviation: float) -> None:
    if math.isnan(mean):
        raise ValueError("The mean must be a number, got nan")
    if math.isnan(standard_deviation):
        raise ValueError("The standard deviation must be a number, got nan")
    if standard_deviation <= 0:
        raise ValueError(
            f"The standard deviation must be positive, got {standard_deviation}"
        )
    if math.isinf(standard_deviation):
        raise ValueError(f"The standard deviation must be finite, got {standard_deviation}")


def _resolve_erf(erf: ErrorFunction | str | None) -> ErrorFunction:
    if erf is None:
        raise ValueError("The error function approximation must not be None")
    if isinstance(erf, str):
        return get_error_function(erf)
    if not callable(erf):
        raise TypeError(
            f"The error function approximation must be callable or a registered name, "
            f"got {type(erf).__name__}"
        )
    return erf


def _resolve_ierfc(
    ierfc: InverseComplementaryErrorFunction | str,
) -> InverseComplementaryErrorFunction:
    if isinstance(ierfc, str):
        return get_inverse_complementary_error_function(ierfc)
    if not callable(ierfc):
        raise TypeError(
            f"The inverse complementary error function approximation must be callable "
            f"or a registered name, got {type(ierfc).__name__}"
        )
    return ierfc


@dataclass(frozen=True, slots=True)
class NormalDistribution:
    """
    Normal distribution N(μ, σ) with pluggable erf approximations.

    Parameters
    ----------
    mean : float, default=0.0
        Mean μ of the distribution. Must not be NaN.
    standard_deviation : float, default=1.0
        Standard deviation σ. Must be positive and finite.
    erf : ErrorFunction or str, default=chebyshev_erf
        Error function approximation used by :meth:`cdf`, or its name in
        the approximation register.
    ierfc : InverseComplementaryErrorFunction or str, optional
        Inverse complementary error function used by :meth:`ppf`, or its
        name in the approximation register. If omitted, Acklam's method
        refined against ``erf`` is used.

    Raises
    ------
    ValueError
        If the mean or the standard deviation is NaN, the standard deviation
        is not positive or infinite, ``erf`` is None or a name is unknown.
    TypeError
        If ``erf`` or ``ierfc`` is neither callable nor a string.
    """

    mean: float = 0.0
    standard_deviation: float = 1.0
    erf: ErrorFunction = chebyshev_erf
    ierfc: InverseComplementaryErrorFunction | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate parameters and resolve the approximations."""
        _validate_location_scale(self.mean, self.standard_deviation)

        erf = _resolve_erf(self.erf)
        object.__setattr__(self, "erf", erf)

        if self.ierfc is None:
            ierfc = acklam_ierfc if erf is chebyshev_erf else partial(acklam_ierfc, erf=erf)
        else:
            ierfc = _resolve_ierfc(self.ierfc)
        object.__setattr__(self, "ierfc", ierfc)

    @classmethod
    def of(
        cls,
        mean: float = 0.0,
        standard_deviation: float = 1.0,
        erf: ErrorFunction | str | None = chebyshev_erf,
        ierfc: InverseComplementaryErrorFunction | str | None = None,
    ) -> NormalDistribution:
        """
        Create a normal distribution.

        Unspecified arguments take the same defaults as the constructor and
        are validated the same way.
        """
        return cls(mean, standard_deviation, erf, ierfc)  # type: ignore[arg-type]

    @classmethod
    def standard(
        cls,
        erf: ErrorFunction | str | None = chebyshev_erf,
        ierfc: InverseComplementaryErrorFunction | str | None = None,
    ) -> NormalDistribution:
        """Create the standard normal distribution N(0, 1)."""
        return cls(0.0, 1.0, erf, ierfc)  # type: ignore[arg-type]

    def pdf(self, x: float) -> float:
        """
        Probability density function evaluated at ``x``.

        Parameters
        ----------
        x : float
            Point at which to evaluate the density.

        Returns
        -------
        float
            Density value at ``x``.
        """
        inverse_sd = 1.0 / self.standard_deviation
        z = (x - self.mean) * inverse_sd
        return INV_SQRT_2PI * inverse_sd * math.exp(-0.5 * z * z)

    def standardize(self, x: float) -> float:
        """Map ``x`` to the standard normal scale, ``(x - μ) / σ``."""
        return (x - self.mean) / self.standard_deviation

    def cdf(self, x: float) -> float:
        """
        Cumulative distribution function P(X <= x).

        Tends to 0 and 1 as ``x`` goes to -inf and +inf, up to the accuracy
        of the injected error function.
        """
        return (1.0 + self.erf(self.standardize(x) * math.sqrt(0.5))) / 2.0

    def sf(self, x: float) -> float:
        """Survival function P(X > x)."""
        return 1.0 - self.cdf(x)

    def ppf(
        self, x: float, ierfc: InverseComplementaryErrorFunction | str | None = None
    ) -> float:
        """
        Percent point function (inverse of :meth:`cdf`).

        Parameters
        ----------
        x : float
            Probability, meaningful in (0, 1).
        ierfc : InverseComplementaryErrorFunction or str, optional
            Approximation to use instead of the configured one, or its name
            in the approximation register.

        Returns
        -------
        float
            Quantile corresponding to ``x``. Probabilities outside (0, 1)
            saturate at ``μ ± 100·√2·σ`` with the built-in approximation.
        """
        if ierfc is None:
            ierfc = cast("InverseComplementaryErrorFunction", self.ierfc)
        else:
            ierfc = _resolve_ierfc(ierfc)
        return self.mean - self.standard_deviation * math.sqrt(2.0) * ierfc(2.0 * x)

    def between(self, start_interval: float, end_interval: float) -> float:
        """
        Probability that X lies in ``[start_interval, end_interval]``.

        Degenerate (``start == end``) and empty (``start > end``) intervals
        have probability exactly 0.
        """
        if start_interval >= end_interval:
            return 0.0

        return self.cdf(end_interval) - self.cdf(start_interval)

    def random(self, rng: np.random.Generator | None = None) -> float:
        """
        Draw one sample by the Marsaglia polar method.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Source of uniform variates, a fresh generator if omitted.

        Returns
        -------
        float
            A sample from this distribution.
        """
        return self.mean + self.standard_deviation * polar_standard_normal(rng)

    def variance(self) -> float:
        """Variance σ² of the distribution."""
        return self.standard_deviation * self.standard_deviation

    def skewness(self) -> float:
        """Skewness of the distribution (always 0)."""
        return 0.0

    def kurtosis(self, excess: bool = False) -> float:
        """
        Raw or excess kurtosis of the distribution.

        Parameters
        ----------
        excess : bool, default=False
            Return the excess kurtosis (0) instead of the raw one (3).
        """
        return 0.0 if excess else 3.0

    @staticmethod
    def is_normal_distributed(
        cdf: CumulativeFunction,
        mean: float,
        standard_deviation: float,
        tolerance: float = DEFAULT_GOODNESS_OF_FIT_TOLERANCE,
    ) -> bool:
        """
        Check a distribution against the 68-95-99.7 rule.

        The probabilities of the one-, two- and three-sigma bands around
        ``mean`` are computed with ``cdf`` and compared to those of a normal
        distribution.

        Parameters
        ----------
        cdf : CumulativeFunction
            Cumulative distribution function of the random variable.
        mean : float
            Mean of the random variable.
        standard_deviation : float
            Standard deviation of the random variable.
        tolerance : float, default=0.005
            Largest accepted absolute deviation of each band probability.

        Returns
        -------
        bool
            True if all three bands are within ``tolerance``.

        Raises
        ------
        ValueError
            If the mean or the standard deviation is NaN or the standard
            deviation is not positive or infinite.
        """
        _validate_location_scale(mean, standard_deviation)

        for k, expected in SIGMA_RULE_PROBABILITIES:
            inside = cdf(mean + k * standard_deviation) - cdf(mean - k * standard_deviation)
            if abs(inside - expected) >= tolerance:
                return False

        return True
