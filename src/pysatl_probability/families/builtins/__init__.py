"""
Built-in distribution families for PySATL.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probability.families.builtins.continuous import (
    Beta,
    Cauchy,
    Exponential,
    Gamma,
    Gaussian,
    Uniform,
    configure_beta_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_uniform_family,
)
from pysatl_probability.families.builtins.discrete import (
    Bernoulli,
    Binomial,
    Categorical,
    configure_bernoulli_family,
    configure_binomial_family,
    configure_categorical_family,
)

__all__ = [
    "Cauchy",
    "Gaussian",
    "Gamma",
    "Beta",
    "Exponential",
    "Uniform",
    "Bernoulli",
    "Binomial",
    "Categorical",
    "configure_cauchy_family",
    "configure_gaussian_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_exponential_family",
    "configure_uniform_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_categorical_family",
]
