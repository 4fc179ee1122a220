"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probability.families.builtins.continuous.beta import Beta, configure_beta_family
from pysatl_probability.families.builtins.continuous.cauchy import Cauchy, configure_cauchy_family
from pysatl_probability.families.builtins.continuous.exponential import (
    Exponential,
    configure_exponential_family,
)
from pysatl_probability.families.builtins.continuous.gamma import Gamma, configure_gamma_family
from pysatl_probability.families.builtins.continuous.gaussian import (
    Gaussian,
    configure_gaussian_family,
)
from pysatl_probability.families.builtins.continuous.uniform import (
    Uniform,
    configure_uniform_family,
)

__all__ = [
    "Cauchy",
    "Gaussian",
    "Gamma",
    "Beta",
    "Exponential",
    "Uniform",
    "configure_cauchy_family",
    "configure_gaussian_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_exponential_family",
    "configure_uniform_family",
]
