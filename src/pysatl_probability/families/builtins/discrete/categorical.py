"""
Categorical distribution family implementation.

Contains the Categorical distribution over ``{0, ..., k-1}`` and its family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from bisect import bisect_left
from dataclasses import dataclass, field
from itertools import accumulate
from typing import TYPE_CHECKING

from pysatl_probability.distributions.distribution import (
    CumulativeDistribution,
    Entropy,
    Inverse,
    Mass,
    Mean,
    Median,
    Modes,
    Variance,
    check_probability,
)
from pysatl_probability.distributions.sampling import Sample, inverse_transform
from pysatl_probability.distributions.support import IntegerRangeSupport
from pysatl_probability.families.distribution import ParametricDistribution
from pysatl_probability.families.parametric_family import ParametricFamily
from pysatl_probability.families.parametrizations import constraint
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_probability.distributions.sampling import RandomnessSource

SUM_TOLERANCE = 1e-9
"""Absolute tolerance for the probabilities summing to one."""


@dataclass(frozen=True, slots=True)
class Categorical(
    ParametricDistribution,
    Mass,
    CumulativeDistribution,
    Inverse,
    Entropy,
    Median,
    Modes,
    Mean,
    Variance,
    Sample,
):
    """
    Categorical distribution.

    Takes the value ``i`` with probability ``p[i]`` for ``i = 0, ..., k-1``.
    Any sequence of probabilities is accepted and stored as a tuple of
    floats, so instances stay hashable.

    Parameters
    ----------
    p : tuple of float
        Probabilities of the categories; non-empty, each in ``[0, 1]`` and
        summing to one within ``1e-9``.
    """

    family_name = FamilyName.CATEGORICAL
    _distribution_type = UnivariateDiscrete

    p: tuple[float, ...]
    _cumulative: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "p", tuple(float(v) for v in self.p))
        ParametricDistribution.__post_init__(self)
        object.__setattr__(self, "_cumulative", tuple(accumulate(self.p)))

    @constraint(description="p is not empty")
    def check_p_not_empty(self) -> bool:
        return len(self.p) > 0

    @constraint(description="0 <= p[i] <= 1")
    def check_p_entries_are_probabilities(self) -> bool:
        return all(0.0 <= v <= 1.0 for v in self.p)

    @constraint(description="sum(p) == 1")
    def check_p_sums_to_one(self) -> bool:
        return abs(math.fsum(self.p) - 1.0) <= SUM_TOLERANCE

    @property
    def k(self) -> int:
        """Number of categories."""
        return len(self.p)

    @property
    def support(self) -> IntegerRangeSupport:
        return IntegerRangeSupport(low=0, high=self.k - 1)

    def mass(self, x: float) -> float:
        if x not in self.support:
            return 0.0
        return self.p[int(x)]

    def distribution(self, x: float) -> float:
        if x < 0:
            return 0.0
        if x >= self.k - 1:
            return 1.0
        return self._cumulative[math.floor(x)]

    def inverse(self, p: float) -> int:
        """
        Quantile function.

        Returns the smallest index whose cumulative probability reaches
        ``p``; ``0`` for ``p = 0`` and ``k - 1`` for ``p = 1``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)

        if p == 1.0:
            return self.support.supremum
        # cumulative sums may fall short of one by rounding
        return min(bisect_left(self._cumulative, p), self.k - 1)

    def entropy(self) -> float:
        return -math.fsum(v * math.log(v) for v in self.p if v > 0.0)

    def median(self) -> float:
        return float(self.inverse(0.5))

    def modes(self) -> list[int]:
        top = max(self.p)
        return [i for i, v in enumerate(self.p) if v == top]

    def mean(self) -> float:
        return math.fsum(i * v for i, v in enumerate(self.p))

    def variance(self) -> float:
        mean = self.mean()
        return math.fsum(v * (i - mean) ** 2 for i, v in enumerate(self.p))

    def sample(self, source: RandomnessSource) -> int:
        return int(inverse_transform(self, source))


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return

    family = ParametricFamily(
        name=FamilyName.CATEGORICAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        base=Categorical,
    )
    family.__doc__ = Categorical.__doc__

    ParametricFamilyRegister.register(family)
