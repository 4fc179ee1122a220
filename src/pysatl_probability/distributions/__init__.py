"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Probability:

- capability contracts (:mod:`.distribution`);
- supports of distributions (:mod:`.support`);
- name-based characteristic access (:mod:`.characteristics`);
- randomness sources and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .characteristics import (
    GenericCharacteristic,
    capability_for,
    characteristics_of,
    characteristics_of_class,
)
from .distribution import (
    CumulativeDistribution,
    Density,
    Distribution,
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
from .sampling import (
    ArraySample,
    RandomnessSource,
    Sample,
    default_source,
    inverse_transform,
)
from .strategies import (
    DefaultSamplingUnivariateStrategy,
    InverseTransformSamplingStrategy,
    SamplingStrategy,
    draw,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerRangeSupport,
    Support,
)

__all__ = [
    # capability contracts
    "Distribution",
    "Density",
    "Mass",
    "CumulativeDistribution",
    "Inverse",
    "Entropy",
    "Median",
    "Modes",
    "Mean",
    "Variance",
    "Skewness",
    "Kurtosis",
    "check_probability",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerRangeSupport",
    # characteristics
    "GenericCharacteristic",
    "capability_for",
    "characteristics_of",
    "characteristics_of_class",
    # sampling
    "RandomnessSource",
    "Sample",
    "ArraySample",
    "default_source",
    "inverse_transform",
    # strategies
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "InverseTransformSamplingStrategy",
    "draw",
]
