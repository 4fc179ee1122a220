"""
Parametric Families module for working with statistical distribution families.

This package provides the built-in distributions, their alternative
parametrizations and the global register of parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import *
from .builtins import __all__ as _builtins_all
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricDistribution",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    *_builtins_all,
]

del _builtins_all
