"""
Characteristics API
===================

Lightweight name-based access to a distribution's capabilities (e.g., ``pdf``,
``cdf``, ``ppf``).

This module exposes a single generic helper, :class:`GenericCharacteristic`,
that binds a :class:`~pysatl_probability.types.CharacteristicName` to the
capability contract implementing it and delegates the call to the
distribution.

Notes
-----
- Point characteristics (``pdf``, ``pmf``, ``cdf``, ``ppf``) take one argument.
- Summary characteristics (``entropy``, ``median``, ``modes`` and moments) take
  none.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Any

from pysatl_probability.distributions.distribution import (
    CumulativeDistribution,
    Density,
    Entropy,
    Inverse,
    Kurtosis,
    Mass,
    Mean,
    Median,
    Modes,
    Skewness,
    Variance,
)
from pysatl_probability.types import CharacteristicName, GenericCharacteristicName

_CAPABILITIES: dict[GenericCharacteristicName, tuple[type, str]] = {
    CharacteristicName.PDF: (Density, "density"),
    CharacteristicName.PMF: (Mass, "mass"),
    CharacteristicName.CDF: (CumulativeDistribution, "distribution"),
    CharacteristicName.PPF: (Inverse, "inverse"),
    CharacteristicName.ENTROPY: (Entropy, "entropy"),
    CharacteristicName.MEDIAN: (Median, "median"),
    CharacteristicName.MODES: (Modes, "modes"),
    CharacteristicName.MEAN: (Mean, "mean"),
    CharacteristicName.VAR: (Variance, "variance"),
    CharacteristicName.SKEW: (Skewness, "skewness"),
    CharacteristicName.KURT: (Kurtosis, "kurtosis"),
}


def _binding(name: GenericCharacteristicName) -> tuple[type, str]:
    try:
        return _CAPABILITIES[name]
    except KeyError as exc:
        raise KeyError(f"Unknown characteristic '{name}'.") from exc


def capability_for(name: GenericCharacteristicName) -> type:
    """
    Return the capability contract bound to a characteristic name.

    Raises
    ------
    KeyError
        If the name is not a known characteristic.
    """
    return _binding(name)[0]


@dataclass(slots=True, frozen=True)
class GenericCharacteristic:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Notes
    -----
    This object does not implement the characteristic itself. It checks that
    the distribution implements the bound capability contract and calls the
    corresponding method.

    Examples
    --------
    >>> from pysatl_probability.distributions.characteristics import GenericCharacteristic
    >>> PDF = GenericCharacteristic("pdf")
    >>> # Later:
    >>> # value = PDF(dist, 0.0)  # dist.density(0.0)
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: Any, *args: Any) -> Any:
        """
        Evaluate the characteristic.

        Parameters
        ----------
        distribution : Any
            Distribution instance.
        *args
            Point of evaluation for point characteristics, nothing otherwise.

        Raises
        ------
        KeyError
            If the name is not a known characteristic.
        TypeError
            If the distribution does not implement the characteristic.
        """
        capability, method = _binding(self.name)
        if not isinstance(distribution, capability):
            raise TypeError(
                f"{type(distribution).__name__} does not provide characteristic '{self.name}'."
            )
        return getattr(distribution, method)(*args)


def characteristics_of(distribution: Any) -> frozenset[GenericCharacteristicName]:
    """Names of all characteristics the distribution implements."""
    return frozenset(
        name
        for name, (capability, _) in _CAPABILITIES.items()
        if isinstance(distribution, capability)
    )


def characteristics_of_class(cls: type) -> frozenset[GenericCharacteristicName]:
    """Names of all characteristics implemented by instances of ``cls``."""
    return frozenset(
        name for name, (capability, _) in _CAPABILITIES.items() if issubclass(cls, capability)
    )


__all__ = [
    "GenericCharacteristic",
    "capability_for",
    "characteristics_of",
    "characteristics_of_class",
]
