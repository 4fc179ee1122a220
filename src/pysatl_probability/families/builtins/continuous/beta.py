"""
Beta distribution family implementation.

Contains the four-parameter Beta distribution on ``[a, b]`` and its family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import betainc, betaincinv, betaln, digamma, xlog1py, xlogy

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
from pysatl_probability.families.builtins.continuous.gamma import standard_gamma
from pysatl_probability.families.distribution import ParametricDistribution
from pysatl_probability.families.parametric_family import ParametricFamily
from pysatl_probability.families.parametrizations import constraint
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.distributions.sampling import RandomnessSource


@dataclass(frozen=True, slots=True)
class Beta(
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
    Beta distribution.

    A continuous distribution with shape parameters ``alpha`` and ``beta``
    rescaled to the interval ``[a, b]``.

    Probability density function, with t = (x - a) / (b - a):
        f(x) = t^(α-1) (1-t)^(β-1) / (B(α, β) (b - a)) for x in [a, b]

    Parameters
    ----------
    alpha : float
        First shape parameter, ``alpha > 0``
    beta : float
        Second shape parameter, ``beta > 0``
    a : float, default 0.0
        Left endpoint of the support
    b : float, default 1.0
        Right endpoint of the support, ``a < b``
    """

    family_name = FamilyName.BETA
    _distribution_type = UnivariateContinuous

    alpha: float
    beta: float
    a: float = 0.0
    b: float = 1.0

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0

    @constraint(description="a < b")
    def check_bounds_ordered(self) -> bool:
        return self.a < self.b

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.a, right=self.b)

    @property
    def width(self) -> float:
        return self.b - self.a

    def density(self, x: float) -> float:
        if not self.a <= x <= self.b:
            return 0.0
        t = (x - self.a) / self.width
        log_density = (
            xlogy(self.alpha - 1.0, t)
            + xlog1py(self.beta - 1.0, -t)
            - betaln(self.alpha, self.beta)
            - math.log(self.width)
        )
        with np.errstate(over="ignore"):
            return float(np.exp(log_density))

    def distribution(self, x: float) -> float:
        if x <= self.a:
            return 0.0
        if x >= self.b:
            return 1.0
        return float(betainc(self.alpha, self.beta, (x - self.a) / self.width))

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
        return self.a + self.width * float(betaincinv(self.alpha, self.beta, p))

    def entropy(self) -> float:
        alpha, beta = self.alpha, self.beta
        return float(
            betaln(alpha, beta)
            - (alpha - 1.0) * digamma(alpha)
            - (beta - 1.0) * digamma(beta)
            + (alpha + beta - 2.0) * digamma(alpha + beta)
            + math.log(self.width)
        )

    def median(self) -> float:
        return self.inverse(0.5)

    def modes(self) -> list[float]:
        """
        Modes of the distribution.

        - ``alpha > 1`` and ``beta > 1``: the interior maximum;
        - both below one: the density is U-shaped, modes ``[a, b]``;
        - otherwise the density is monotone and the mode is the endpoint it
          grows towards.

        Raises
        ------
        ValueError
            If ``alpha == beta == 1``; the density is flat and every point of
            the support is a mode.
        """
        alpha, beta = self.alpha, self.beta
        if alpha > 1.0 and beta > 1.0:
            return [self.a + self.width * (alpha - 1.0) / (alpha + beta - 2.0)]
        if alpha == 1.0 and beta == 1.0:
            raise ValueError("Modes are undefined for alpha = beta = 1")
        if alpha < 1.0 and beta < 1.0:
            return [self.a, self.b]
        if alpha <= 1.0 <= beta:
            return [self.a]
        return [self.b]

    def mean(self) -> float:
        return self.a + self.width * self.alpha / (self.alpha + self.beta)

    def variance(self) -> float:
        alpha, beta = self.alpha, self.beta
        total = alpha + beta
        return self.width**2 * alpha * beta / (total**2 * (total + 1.0))

    def skewness(self) -> float:
        alpha, beta = self.alpha, self.beta
        total = alpha + beta
        numerator = 2.0 * (beta - alpha) * math.sqrt(total + 1.0)
        return numerator / ((total + 2.0) * math.sqrt(alpha * beta))

    def kurtosis(self) -> float:
        alpha, beta = self.alpha, self.beta
        total = alpha + beta
        numerator = 6.0 * ((alpha - beta) ** 2 * (total + 1.0) - alpha * beta * (total + 2.0))
        return numerator / (alpha * beta * (total + 2.0) * (total + 3.0))

    def sample(self, source: RandomnessSource) -> float:
        """
        Draw as ``X / (X + Y)`` with ``X ~ Gamma(alpha)`` and ``Y ~ Gamma(beta)``.

        The pair is redrawn when both gamma variates underflow to zero, which
        is only possible for very small shape parameters.
        """
        while True:
            x = standard_gamma(self.alpha, source)
            y = standard_gamma(self.beta, source)
            if x + y > 0.0:
                return self.a + self.width * x / (x + y)


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    family = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        base=Beta,
    )
    family.__doc__ = Beta.__doc__

    ParametricFamilyRegister.register(family)
