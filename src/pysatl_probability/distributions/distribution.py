"""
Distribution Capability Contracts
=================================

This module defines the public protocols implemented by concrete
distributions. Every contract is narrow and independent; a distribution
subclasses exactly the contracts that are analytically defined for it:

- :class:`Distribution` – type and support descriptor shared by all.
- :class:`Density` / :class:`Mass` – probability density (continuous) or
  probability mass (discrete).
- :class:`CumulativeDistribution` – ``P(X <= x)``.
- :class:`Inverse` – quantile function.
- :class:`Entropy`, :class:`Median`, :class:`Modes`.
- :class:`Mean`, :class:`Variance`, :class:`Skewness`, :class:`Kurtosis`.

The sampling contract lives in :mod:`pysatl_probability.distributions.sampling`.

Notes
-----
- All characteristics are scalar (``float -> float``). Vectorization, if
  needed, should be handled by the caller.
- Evaluating a density, mass or cumulative distribution outside the support is
  not an error; the mathematically consistent value (``0`` or ``1``) is
  returned.
- ``Inverse.inverse`` raises :class:`ValueError` for probabilities outside
  ``[0, 1]``; ``0`` and ``1`` map to the infimum and supremum of the support.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_probability.distributions.support import Support
    from pysatl_probability.types import DistributionType


@runtime_checkable
class Distribution(Protocol):
    """Descriptor interface shared by every distribution."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support: ...


@runtime_checkable
class Density(Protocol):
    """Probability density of a continuous distribution."""

    def density(self, x: float) -> float: ...


@runtime_checkable
class Mass(Protocol):
    """Probability mass of a discrete distribution."""

    def mass(self, x: float) -> float: ...


@runtime_checkable
class CumulativeDistribution(Protocol):
    """Cumulative distribution function ``P(X <= x)``."""

    def distribution(self, x: float) -> float: ...


@runtime_checkable
class Inverse(Protocol):
    """Quantile function (inverse of the cumulative distribution)."""

    def inverse(self, p: float) -> Any: ...


@runtime_checkable
class Entropy(Protocol):
    """Differential or Shannon entropy in nats."""

    def entropy(self) -> float: ...


@runtime_checkable
class Median(Protocol):
    def median(self) -> float: ...


@runtime_checkable
class Modes(Protocol):
    """All points at which the density or mass is locally maximal."""

    def modes(self) -> Sequence[Any]: ...


@runtime_checkable
class Mean(Protocol):
    def mean(self) -> float: ...


@runtime_checkable
class Variance(Protocol):
    def variance(self) -> float: ...


@runtime_checkable
class Skewness(Protocol):
    def skewness(self) -> float: ...


@runtime_checkable
class Kurtosis(Protocol):
    """Excess kurtosis."""

    def kurtosis(self) -> float: ...


def check_probability(p: float) -> None:
    """
    Validate a probability argument of a quantile function.

    Raises
    ------
    ValueError
        If ``p`` is outside ``[0, 1]`` (NaN included).
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("Probability must be in [0, 1]")


__all__ = [
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
]
