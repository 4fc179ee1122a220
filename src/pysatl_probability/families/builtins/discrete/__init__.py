"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probability.families.builtins.discrete.bernoulli import (
    Bernoulli,
    configure_bernoulli_family,
)
from pysatl_probability.families.builtins.discrete.binomial import (
    Binomial,
    configure_binomial_family,
)
from pysatl_probability.families.builtins.discrete.categorical import (
    Categorical,
    configure_categorical_family,
)

__all__ = [
    "Bernoulli",
    "Binomial",
    "Categorical",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_categorical_family",
]
