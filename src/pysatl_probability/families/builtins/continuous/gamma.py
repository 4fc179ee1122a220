"""
Gamma distribution family implementation.

Contains the Gamma distribution and its family with shape-scale and
shape-rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import digamma, gammainc, gammaincinv, gammaln, xlogy

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
from pysatl_probability.families.builtins.continuous.gaussian import Gaussian
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


def standard_gamma(k: float, source: RandomnessSource) -> float:
    """
    Draw from ``Gamma(k, 1)`` with the Marsaglia–Tsang method.

    For ``k >= 1`` each attempt consumes one standard Gaussian and one uniform
    and is accepted with probability above 0.95. For ``k < 1`` a draw of
    ``Gamma(k + 1, 1)`` is scaled by ``U ** (1 / k)``.

    References
    ----------
    G. Marsaglia and W. W. Tsang, "A simple method for generating gamma
    variables", ACM Transactions on Mathematical Software 26(3), 2000.
    """
    if k < 1.0:
        boosted = standard_gamma(k + 1.0, source)
        return boosted * source.random() ** (1.0 / k)

    d = k - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    gaussian = Gaussian(0.0, 1.0)
    while True:
        x = gaussian.sample(source)
        v = 1.0 + c * x
        if v <= 0.0:
            continue
        v = v * v * v
        u = source.random()
        # squeeze
        if u < 1.0 - 0.0331 * x**4:
            return d * v
        if u > 0.0 and math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
            return d * v


@dataclass(frozen=True, slots=True)
class Gamma(
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
    Gamma distribution.

    A continuous distribution on ``[0, ∞)`` with shape ``k`` and scale ``θ``.

    Probability density function:
        f(x) = x^(k-1) exp(-x/θ) / (Γ(k) θ^k) for x ≥ 0

    Parameters
    ----------
    k : float
        Shape parameter, ``k > 0``
    theta : float
        Scale parameter, ``theta > 0``
    """

    __param_name__ = "shapeScale"
    family_name = FamilyName.GAMMA
    _distribution_type = UnivariateContinuous

    k: float
    theta: float = 1.0

    @constraint(description="k > 0")
    def check_k_positive(self) -> bool:
        return self.k > 0

    @constraint(description="theta > 0")
    def check_theta_positive(self) -> bool:
        return self.theta > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def density(self, x: float) -> float:
        """
        Probability density function.

        At ``x = 0`` the density is infinite for ``k < 1``, ``1 / θ`` for
        ``k = 1`` and zero for ``k > 1``. It vanishes at ``+inf`` for every
        shape.
        """
        if x < 0.0 or x == math.inf:
            return 0.0
        k, theta = self.k, self.theta
        log_density = xlogy(k - 1.0, x / theta) - x / theta - gammaln(k) - math.log(theta)
        with np.errstate(over="ignore"):
            return float(np.exp(log_density))

    def distribution(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return float(gammainc(self.k, x / self.theta))

    def inverse(self, p: float) -> float:
        """
        Percent point function (inverse CDF).

        Returns ``0`` for ``p = 0`` and ``inf`` for ``p = 1``.

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
        return self.theta * float(gammaincinv(self.k, p))

    def entropy(self) -> float:
        k = self.k
        return float(k + math.log(self.theta) + gammaln(k) + (1.0 - k) * digamma(k))

    def median(self) -> float:
        return self.inverse(0.5)

    def modes(self) -> list[float]:
        """
        Modes of the distribution.

        For ``k < 1`` the density is unbounded at the origin, which is
        reported as the only mode.
        """
        if self.k < 1.0:
            return [0.0]
        return [(self.k - 1.0) * self.theta]

    def mean(self) -> float:
        return self.k * self.theta

    def variance(self) -> float:
        return self.k * self.theta**2

    def skewness(self) -> float:
        return 2.0 / math.sqrt(self.k)

    def kurtosis(self) -> float:
        return 6.0 / self.k

    def sample(self, source: RandomnessSource) -> float:
        return self.theta * standard_gamma(self.k, source)


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    family = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate"],
        base=Gamma,
    )
    family.__doc__ = Gamma.__doc__

    @parametrization(family=family, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        k : float
            Shape parameter
        rate : float
            Rate parameter, ``rate = 1 / theta``
        """

        k: float
        rate: float

        @constraint(description="k > 0")
        def check_k_positive(self) -> bool:
            return self.k > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return Gamma(k=self.k, theta=1.0 / self.rate)

    ParametricFamilyRegister.register(family)
