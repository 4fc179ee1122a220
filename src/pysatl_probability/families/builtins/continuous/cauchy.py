"""
Cauchy distribution family implementation.

Contains the Cauchy distribution and its family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_probability.distributions.distribution import (
    CumulativeDistribution,
    Density,
    Entropy,
    Inverse,
    Median,
    Modes,
    check_probability,
)
from pysatl_probability.distributions.sampling import Sample
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.builtins.continuous.gaussian import Gaussian
from pysatl_probability.families.distribution import ParametricDistribution
from pysatl_probability.families.parametric_family import ParametricFamily
from pysatl_probability.families.parametrizations import constraint
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.distributions.sampling import RandomnessSource

RATIO_DENOMINATOR_FLOOR = sys.float_info.epsilon
"""Added to ``|b|`` in the ratio sampler so that ``b == 0`` cannot divide by zero."""


@dataclass(frozen=True, slots=True)
class Cauchy(
    ParametricDistribution,
    Density,
    CumulativeDistribution,
    Inverse,
    Entropy,
    Median,
    Modes,
    Sample,
):
    """
    Cauchy (Lorentz) distribution.

    A continuous distribution with location ``x_0`` and scale ``gamma > 0``.
    It is long tailed and has no mean or variance, so it implements none of
    the moment contracts. It is unimodal and symmetric about ``x_0``.

    Probability density function:
        f(x) = γ / (π (γ² + (x - x₀)²))

    Parameters
    ----------
    x_0 : float
        Location of the peak, also the median and the only mode.
    gamma : float
        Half width at half maximum, ``gamma > 0``.

    Notes
    -----
    Sampling uses the ratio of two independent standard Gaussian draws,
    ``x_0 + gamma * a / (|b| + eps)`` with ``eps`` the machine epsilon. The
    floor shrinks the deviation from ``x_0`` by the relative factor
    ``eps / (|b| + eps)``. It exceeds ``1e-8`` only when ``|b| < 2.2e-8``,
    which happens with probability about ``1.8e-8``; then ``|x - x_0|`` is
    capped near ``gamma * |a| / eps`` instead of being unbounded. The bias is
    confined to that far tail.
    """

    family_name = FamilyName.CAUCHY
    _distribution_type = UnivariateContinuous

    x_0: float = 0.0
    gamma: float = 1.0

    @constraint(description="gamma > 0")
    def check_gamma_positive(self) -> bool:
        return self.gamma > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        deviation = x - self.x_0
        return self.gamma / (math.pi * (self.gamma * self.gamma + deviation * deviation))

    def distribution(self, x: float) -> float:
        return math.atan((x - self.x_0) / self.gamma) / math.pi + 0.5

    def inverse(self, p: float) -> float:
        """
        Percent point function (inverse CDF).

        ``p = 0`` and ``p = 1`` return ``-inf`` and ``inf`` without evaluating
        ``tan(±π/2)``.

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
        return self.x_0 + self.gamma * math.tan(math.pi * (p - 0.5))

    def entropy(self) -> float:
        return math.log(4.0 * math.pi * self.gamma)

    def median(self) -> float:
        return self.x_0

    def modes(self) -> list[float]:
        return [self.x_0]

    def sample(self, source: RandomnessSource) -> float:
        gaussian = Gaussian(0.0, 1.0)
        a = gaussian.sample(source)
        b = gaussian.sample(source)
        return self.x_0 + self.gamma * a / (abs(b) + RATIO_DENOMINATOR_FLOOR)


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    family = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        base=Cauchy,
    )
    family.__doc__ = Cauchy.__doc__

    ParametricFamilyRegister.register(family)
