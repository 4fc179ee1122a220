"""
Exponential distribution family implementation.

Contains the Exponential distribution and its family with rate and scale
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

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
from pysatl_probability.distributions.sampling import Sample, inverse_transform
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
class Exponential(
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
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ) of the distribution, ``lambda_ > 0``
    """

    __param_name__ = "rate"
    family_name = FamilyName.EXPONENTIAL
    _distribution_type = UnivariateContinuous

    lambda_: float = 1.0

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def density(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return self.lambda_ * math.exp(-self.lambda_ * x)

    def distribution(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return -math.expm1(-self.lambda_ * x)

    def inverse(self, p: float) -> float:
        """
        Percent point function (inverse CDF).

        Returns
        -------
        float
            - For p = 0: returns 0.0
            - For p = 1: returns inf
            - For p in (0, 1): returns -ln(1-p)/λ

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
        return -math.log1p(-p) / self.lambda_

    def entropy(self) -> float:
        return 1.0 - math.log(self.lambda_)

    def median(self) -> float:
        return math.log(2.0) / self.lambda_

    def modes(self) -> list[float]:
        return [0.0]

    def mean(self) -> float:
        return 1.0 / self.lambda_

    def variance(self) -> float:
        return 1.0 / self.lambda_**2

    def skewness(self) -> float:
        return 2.0

    def kurtosis(self) -> float:
        return 6.0

    def sample(self, source: RandomnessSource) -> float:
        return float(inverse_transform(self, source))


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    family = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        base=Exponential,
    )
    family.__doc__ = Exponential.__doc__

    @parametrization(family=family, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return Exponential(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(family)
