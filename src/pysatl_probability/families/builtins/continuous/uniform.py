"""
Uniform distribution family implementation.

Contains the continuous Uniform distribution and its family with bounds and
mean-width parameterizations.
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
class Uniform(
    ParametricDistribution,
    Density,
    CumulativeDistribution,
    Inverse,
    Entropy,
    Median,
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Sample,
):
    """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(b - a) for x in [a, b], 0 otherwise

    The density is flat, so no point is a strict local maximum and the
    distribution does not implement the modes contract.

    Parameters
    ----------
    a : float
        Lower bound
    b : float
        Upper bound, ``a < b``
    """

    family_name = FamilyName.CONTINUOUS_UNIFORM
    _distribution_type = UnivariateContinuous

    a: float = 0.0
    b: float = 1.0

    @constraint(description="a < b")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.a < self.b

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.a, right=self.b)

    def density(self, x: float) -> float:
        if self.a <= x <= self.b:
            return 1.0 / (self.b - self.a)
        return 0.0

    def distribution(self, x: float) -> float:
        if x <= self.a:
            return 0.0
        if x >= self.b:
            return 1.0
        return (x - self.a) / (self.b - self.a)

    def inverse(self, p: float) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``a`` for ``p = 0`` and ``b`` for ``p = 1``.

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
        return self.a + (self.b - self.a) * p

    def entropy(self) -> float:
        return math.log(self.b - self.a)

    def median(self) -> float:
        return (self.a + self.b) / 2.0

    def mean(self) -> float:
        return (self.a + self.b) / 2.0

    def variance(self) -> float:
        return (self.b - self.a) ** 2 / 12.0

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return -1.2

    def sample(self, source: RandomnessSource) -> float:
        return float(inverse_transform(self, source))


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    family = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        base=Uniform,
    )
    family.__doc__ = Uniform.__doc__

    @parametrization(family=family, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution, ``b - a``
        """

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return Uniform(a=self.mean - half_width, b=self.mean + half_width)

    ParametricFamilyRegister.register(family)
