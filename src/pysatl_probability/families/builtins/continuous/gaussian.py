"""
Gaussian distribution family implementation.

Contains the Gaussian distribution and its family with mean-std and
mean-precision parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scipy.special import ndtr, ndtri

from pysatl_probability.distributions.distribution import (
    CumulativeDistribution,
    Density,
    Entropy,
    Inverse,
    Kurtosis,
    Mean,
    Median,
    Modes,
    Skewness,
    Variance,
    check_probability,
)
from pysatl_probability.distributions.sampling import Sample
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.distribution import ParametricDistribution
from pysatl_probability.families.parametric_family import ParametricFamily
from pysatl_probability.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.distributions.sampling import RandomnessSource


@dataclass(frozen=True, slots=True)
class Gaussian(
    ParametricDistribution,
    Density,
    CumulativeDistribution,
    Inverse,
    Entropy,
    Median,
    Modes,
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Sample,
):
    """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution, ``sigma > 0``
    """

    __param_name__ = "meanStd"
    family_name = FamilyName.GAUSSIAN
    _distribution_type = UnivariateContinuous

    mu: float = 0.0
    sigma: float = 1.0

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return math.exp(-0.5 * z * z) / (self.sigma * math.sqrt(2.0 * math.pi))

    def distribution(self, x: float) -> float:
        return float(ndtr((x - self.mu) / self.sigma))

    def inverse(self, p: float) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``-inf`` for ``p = 0`` and ``inf`` for ``p = 1``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)

        if p == 0.0:
            return self.support.infimum
        if p == 1.0:
            return self.support.supremum
        return self.mu + self.sigma * float(ndtri(p))

    def entropy(self) -> float:
        return 0.5 * math.log(2.0 * math.pi * math.e) + math.log(self.sigma)

    def median(self) -> float:
        return self.mu

    def modes(self) -> list[float]:
        return [self.mu]

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma**2

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 0.0

    def sample(self, source: RandomnessSource) -> float:
        """
        Draw with the Box–Muller transform.

        Consumes exactly two uniforms. Only the cosine branch is used, so no
        value is carried over to the next call.
        """
        u1 = 1.0 - source.random()
        u2 = source.random()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return self.mu + self.sigma * z


def configure_gaussian_family() -> None:
    """
    Configure and register the Gaussian distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAUSSIAN):
        return

    family = ParametricFamily(
        name=FamilyName.GAUSSIAN,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        base=Gaussian,
    )
    family.__doc__ = Gaussian.__doc__

    @parametrization(family=family, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma = math.sqrt(1 / self.tau)
            return Gaussian(mu=self.mu, sigma=sigma)

    ParametricFamilyRegister.register(family)
