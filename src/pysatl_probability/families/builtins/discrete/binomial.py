"""
Binomial distribution family implementation.

Contains the Binomial distribution and its family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING

from scipy.special import bdtr, gammaln

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
from pysatl_probability.distributions.sampling import Sample, inverse_transform
from pysatl_probability.distributions.support import IntegerRangeSupport
from pysatl_probability.families.builtins.discrete.bernoulli import Bernoulli
from pysatl_probability.families.distribution import ParametricDistribution
from pysatl_probability.families.parametric_family import ParametricFamily
from pysatl_probability.families.parametrizations import constraint
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_probability.distributions.sampling import RandomnessSource

MAX_TRIALS_BY_SUMMATION = 64
"""Largest ``n`` sampled as a sum of Bernoulli trials; larger ``n`` uses inversion."""


@dataclass(frozen=True, slots=True)
class Binomial(
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
    Binomial distribution.

    Number of successes in ``n`` independent trials, each succeeding with
    probability ``p``.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1-p)^(n-k) for k = 0, 1, ..., n

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 1``
    p : float
        Success probability of a single trial, ``0 < p < 1``
    """

    family_name = FamilyName.BINOMIAL
    _distribution_type = UnivariateDiscrete

    n: int
    p: float

    @constraint(description="n is an integer >= 1")
    def check_n_positive_integer(self) -> bool:
        return isinstance(self.n, Integral) and not isinstance(self.n, bool) and self.n >= 1

    @constraint(description="0 < p < 1")
    def check_p_open_interval(self) -> bool:
        return 0 < self.p < 1

    @property
    def support(self) -> IntegerRangeSupport:
        return IntegerRangeSupport(low=0, high=int(self.n))

    def _log_mass(self, k: int) -> float:
        n, p = self.n, self.p
        return float(
            gammaln(n + 1)
            - gammaln(k + 1)
            - gammaln(n - k + 1)
            + k * math.log(p)
            + (n - k) * math.log1p(-p)
        )

    def mass(self, x: float) -> float:
        if x not in self.support:
            return 0.0
        return math.exp(self._log_mass(int(x)))

    def distribution(self, x: float) -> float:
        if x < 0:
            return 0.0
        if x >= self.n:
            return 1.0
        return float(bdtr(math.floor(x), self.n, self.p))

    def inverse(self, p: float) -> int:
        """
        Quantile function.

        Returns the smallest ``k`` with ``distribution(k) >= p``; ``0`` for
        ``p = 0`` and ``n`` for ``p = 1``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)

        support = self.support
        if p == 0.0:
            return support.infimum
        if p == 1.0:
            return support.supremum

        lo, hi = support.infimum, support.supremum
        while lo < hi:
            mid = (lo + hi) // 2
            if self.distribution(mid) >= p:
                hi = mid
            else:
                lo = mid + 1
        return lo

    def entropy(self) -> float:
        terms = []
        for k in self.support:
            log_mass = self._log_mass(k)
            mass = math.exp(log_mass)
            if mass > 0.0:
                terms.append(-mass * log_mass)
        return math.fsum(terms)

    def median(self) -> float:
        return float(self.inverse(0.5))

    def modes(self) -> list[int]:
        """
        Modes of the distribution.

        ``floor((n + 1) p)``; when ``(n + 1) p`` is an integer the point
        below it is a mode as well.
        """
        m = (self.n + 1) * self.p
        if m.is_integer():
            return [int(m) - 1, int(m)]
        return [math.floor(m)]

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)

    def skewness(self) -> float:
        q = 1.0 - self.p
        return (q - self.p) / math.sqrt(self.n * self.p * q)

    def kurtosis(self) -> float:
        pq = self.p * (1.0 - self.p)
        return (1.0 - 6.0 * pq) / (self.n * pq)

    def sample(self, source: RandomnessSource) -> int:
        if self.n <= MAX_TRIALS_BY_SUMMATION:
            trial = Bernoulli(self.p)
            return sum(trial.sample(source) for _ in range(self.n))
        return int(inverse_transform(self, source))


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    family = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        base=Binomial,
    )
    family.__doc__ = Binomial.__doc__

    ParametricFamilyRegister.register(family)
