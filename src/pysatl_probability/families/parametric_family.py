"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions, including support for multiple parameterizations and the
capabilities their distributions implement.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING, dataclass_transform

from pysatl_probability.distributions.characteristics import characteristics_of_class

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_probability.families.distribution import ParametricDistribution
    from pysatl_probability.families.parametrizations import Parametrization
    from pysatl_probability.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., normal, gamma)
    that can be parameterized in different ways. The base parametrization is
    the concrete distribution class itself; alternative parametrizations
    convert to it.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Distribution type shared by all members of the family.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    base : type[ParametricDistribution]
        Concrete distribution class implementing the base parametrization.

    Raises
    ------
    ValueError
        If the first parametrization name does not match the base class.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        base: type[ParametricDistribution],
    ):
        self._name = name
        self._distr_type = distr_type

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        if base.__param_name__ != self.base_parametrization_name:
            raise ValueError(
                f"Base class {base.__name__} implements parametrization "
                f"'{base.__param_name__}', expected '{self.base_parametrization_name}'."
            )

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}
        self._base = base
        self.register_parametrization(self.base_parametrization_name, base)

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type of the family members."""
        return self._distr_type

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[ParametricDistribution]:
        """Get the base parametrization class (the concrete distribution)."""
        return self._base

    @property
    def characteristics(self) -> frozenset[GenericCharacteristicName]:
        """Names of the characteristics implemented by the family members."""
        return characteristics_of_class(self._base)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered or not declared for the family.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared for family {self.name}.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> ParametricDistribution:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        ParametricDistribution
            Equivalent distribution in base parametrization.

        Raises
        ------
        TypeError
            If the conversion does not produce an instance of the base class.
        """
        base = (
            parameters
            if parameters.name == self.base_parametrization_name
            else parameters.transform_to_base_parametrization()
        )
        if not isinstance(base, self._base):
            raise TypeError(
                f"Parametrization '{parameters.name}' does not convert to {self._base.__name__}."
            )
        return base

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ValueError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self._parametrizations[self.base_parametrization_name]
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return self.to_base(parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_probability.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
