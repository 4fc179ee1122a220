"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of the library:

- continuous: Cauchy, Gaussian, Gamma, Beta, Exponential, Uniform;
- discrete: Bernoulli, Binomial, Categorical.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; the register can be reset for tests with
  :func:`reset_families_register`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_probability.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_binomial_family,
    configure_categorical_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_uniform_family,
)
from pysatl_probability.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_cauchy_family()
    configure_gaussian_family()
    configure_gamma_family()
    configure_beta_family()
    configure_exponential_family()
    configure_uniform_family()
    configure_bernoulli_family()
    configure_binomial_family()
    configure_categorical_family()
    register = ParametricFamilyRegister()
    logger.debug("Configured %d built-in families", len(register.families()))
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
