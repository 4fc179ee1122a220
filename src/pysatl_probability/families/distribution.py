"""
Concrete distribution instances with specific parameter values.

This module provides the common base of every built-in distribution: an
immutable value whose fields are its parameters, validated once at
construction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pysatl_probability.distributions.distribution import Distribution
from pysatl_probability.families.parametrizations import Parametrization
from pysatl_probability.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from pysatl_probability.distributions.support import Support
    from pysatl_probability.families.parametric_family import ParametricFamily
    from pysatl_probability.types import DistributionType


class ParametricDistribution(Parametrization, Distribution):
    """
    A specific distribution instance from a parametric family.

    Subclasses are frozen dataclasses whose fields are the distribution
    parameters and which additionally subclass the capability contracts they
    implement. Constraints declared with
    :func:`~pysatl_probability.families.parametrizations.constraint` are checked
    in ``__post_init__``, so an instance with invalid parameters never exists.

    Attributes
    ----------
    family_name : str
        Name of the family in :class:`ParametricFamilyRegister`.
    """

    family_name: ClassVar[str]
    _distribution_type: ClassVar[DistributionType]

    def __post_init__(self) -> None:
        self.validate()

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Raises
        ------
        ValueError
            If the family is not registered (see
            :func:`~pysatl_probability.families.configuration.configure_families_register`).
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Name of the base parametrization of the family."""
        return self.name

    @property
    @abstractmethod
    def support(self) -> Support:
        """Get the support of this distribution."""
