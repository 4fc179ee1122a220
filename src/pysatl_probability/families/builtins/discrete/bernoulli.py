"""
Bernoulli distribution family implementation.

Contains the Bernoulli distribution and its family.
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
    Entropy,
    Inverse,
    Kurtosis,
    Mass,
    Mean,
    Median,
    Modes,
    Skewness,
    Variance,
    check_probability,
)
from pysatl_probability.distributions.sampling import Sample
from pysatl_probability.distributions.support import IntegerRangeSupport
from pysatl_probability.families.distribution import ParametricDistribution
from pysatl_probability.families.parametric_family import ParametricFamily
from pysatl_probability.families.parametrizations import constraint
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_probability.distributions.sampling import RandomnessSource


@dataclass(frozen=True, slots=True)
class Bernoulli(
    ParametricDistribution,
    Mass,
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
    Bernoulli distribution.

    A single trial that yields ``1`` with probability ``p`` and ``0``
    otherwise.

    Parameters
    ----------
    p : float
        Success probability, ``0 < p < 1``. The degenerate endpoints are
        rejected; they have no entropy and undefined higher moments.
    """

    family_name = FamilyName.BERNOULLI
    _distribution_type = UnivariateDiscrete

    p: float = 0.5

    @constraint(description="0 < p < 1")
    def check_p_open_interval(self) -> bool:
        return 0 < self.p < 1

    @property
    def q(self) -> float:
        """Failure probability ``1 - p``."""
        return 1.0 - self.p

    @property
    def support(self) -> IntegerRangeSupport:
        return IntegerRangeSupport(low=0, high=1)

    def mass(self, x: float) -> float:
        if x not in self.support:
            return 0.0
        return self.p if x == 1 else self.q

    def distribution(self, x: float) -> float:
        if x < 0:
            return 0.0
        if x < 1:
            return self.q
        return 1.0

    def inverse(self, p: float) -> int:
        """
        Quantile function.

        Returns ``0`` for ``p <= 1 - self.p`` and ``1`` otherwise.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)
        return 0 if p <= self.q else 1

    def entropy(self) -> float:
        return -(self.p * math.log(self.p) + self.q * math.log1p(-self.p))

    def median(self) -> float:
        """
        Median of the distribution.

        Any point of ``[0, 1]`` is a median when ``p == 0.5``; ``0.5`` is
        returned in that case.
        """
        if self.p < 0.5:
            return 0.0
        if self.p > 0.5:
            return 1.0
        return 0.5

    def modes(self) -> list[int]:
        if self.p < 0.5:
            return [0]
        if self.p > 0.5:
            return [1]
        return [0, 1]

    def mean(self) -> float:
        return self.p

    def variance(self) -> float:
        return self.p * self.q

    def skewness(self) -> float:
        return (self.q - self.p) / math.sqrt(self.p * self.q)

    def kurtosis(self) -> float:
        pq = self.p * self.q
        return (1.0 - 6.0 * pq) / pq

    def sample(self, source: RandomnessSource) -> int:
        return 1 if source.random() < self.p else 0


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    family = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        base=Bernoulli,
    )
    family.__doc__ = Bernoulli.__doc__

    ParametricFamilyRegister.register(family)
