"""
Sampling Strategies
===================

This module defines the pluggable batch-sampling interface and its default
implementations:

- :class:`SamplingStrategy` — draws ``n`` values from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — repeats the distribution's own
  ``sample`` algorithm.
- :class:`InverseTransformSamplingStrategy` — applies ``inverse`` to i.i.d.
  uniform variates, for any distribution with a quantile function.

Notes
-----
- Strategies are stateless; the randomness source is passed explicitly.
- :func:`draw` is the convenience entry point returning an ``(n, 1)``
  :class:`~pysatl_probability.distributions.sampling.ArraySample`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_probability.distributions.distribution import Inverse
from pysatl_probability.distributions.sampling import (
    ArraySample,
    Sample,
    default_source,
    inverse_transform,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_probability.distributions.sampling import RandomnessSource


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(self, n: int, distr: Any, source: RandomnessSource) -> ArraySample: ...


def _as_column(values: list[Any]) -> ArraySample:
    return ArraySample(np.array(values, dtype=np.float64).reshape(len(values), 1))


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler.

    Calls the distribution's ``sample`` method ``n`` times with the same
    source, so every family keeps its own algorithm (ratio, rejection,
    inversion).

    Raises
    ------
    TypeError
        If the distribution does not implement the sampling contract.
    """

    def sample(self, n: int, distr: Any, source: RandomnessSource) -> ArraySample:
        if not isinstance(distr, Sample):
            raise TypeError(f"{type(distr).__name__} does not implement sampling.")
        return _as_column([distr.sample(source) for _ in range(n)])


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy applies the distribution's ``inverse`` to i.i.d. uniforms
    ``U ~ U(0, 1)`` drawn one at a time from the source.

    Raises
    ------
    TypeError
        If the distribution has no quantile function.
    """

    def sample(self, n: int, distr: Any, source: RandomnessSource) -> ArraySample:
        if not isinstance(distr, Inverse):
            raise TypeError(f"{type(distr).__name__} does not implement inverse.")
        return _as_column([inverse_transform(distr, source) for _ in range(n)])


def draw(
    distr: Any,
    n: int,
    source: RandomnessSource | None = None,
    strategy: SamplingStrategy | None = None,
) -> ArraySample:
    """
    Draw ``n`` values from a distribution.

    Parameters
    ----------
    distr : Any
        Distribution implementing the contract required by ``strategy``.
    n : int
        Number of draws, non-negative.
    source : RandomnessSource, optional
        Source of uniform variates. A fresh :func:`default_source` is used
        when omitted.
    strategy : SamplingStrategy, optional
        Defaults to :class:`DefaultSamplingUnivariateStrategy`.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """
    if n < 0:
        raise ValueError("Number of draws must be non-negative.")
    if source is None:
        source = default_source()
    if strategy is None:
        strategy = DefaultSamplingUnivariateStrategy()
    return strategy.sample(n, distr, source)


__all__ = [
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "InverseTransformSamplingStrategy",
    "draw",
]
