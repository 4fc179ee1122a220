"""
Core Type Definitions
=====================

Names, kinds and numeric aliases shared by the distributions and families
of PySATL Probability.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Probability concentrated on isolated points, described by a mass.
    CONTINUOUS : str
        Probability spread over intervals, described by a density.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Type of a univariate distribution.

    Parameters
    ----------
    kind : Kind
        Whether the distribution has a density or a mass.
    """

    kind: Kind


UnivariateContinuous = DistributionType(kind=Kind.CONTINUOUS)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = DistributionType(kind=Kind.DISCRETE)
"""Type for univariate discrete distributions."""

Number = np.floating[Any] | np.integer[Any] | int | float
"""Type alias for scalar numbers."""

NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Every name is bound to one capability contract of
    :mod:`pysatl_probability.distributions.distribution`; a distribution
    provides the characteristic exactly when it implements that contract.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    ENTROPY = "entropy"
    MEDIAN = "median"
    MODES = "modes"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"


class FamilyName(StrEnum):
    CAUCHY = "Cauchy"
    GAUSSIAN = "Gaussian"
    GAMMA = "Gamma"
    BETA = "Beta"
    EXPONENTIAL = "Exponential"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    CATEGORICAL = "Categorical"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "Number",
    "NumericArray",
    "BoolArray",
    "GenericCharacteristicName",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
]
