"""
Sampling Interfaces
===================

This module defines the randomness source consumed by samplers, the sampling
capability contract and the array-backed container for batches of draws.

- :class:`RandomnessSource` — external provider of uniform draws in ``[0, 1)``.
- :class:`Sample` — capability of drawing one realization from a source.
- :class:`ArraySample` — ``(n, d)`` array of draws.

Notes
-----
Samplers treat the source as a stream of independent uniform draws: they never
inspect its state and keep nothing derived from it between calls. The source
is owned by the caller; a distribution never stores one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_probability.distributions.distribution import Inverse


@runtime_checkable
class RandomnessSource(Protocol):
    """
    Protocol for uniform pseudo-random sources.

    :class:`numpy.random.Generator` satisfies it. Every call advances the
    source state; a seeded source yields a deterministic stream.
    """

    def random(self) -> float: ...


@runtime_checkable
class Sample(Protocol):
    """Capability of drawing one realization using a caller-owned source."""

    def sample(self, source: RandomnessSource) -> Any: ...


def default_source(seed: int | None = None) -> np.random.Generator:
    """
    Create the default randomness source.

    Parameters
    ----------
    seed : int, optional
        Seed for a reproducible stream. ``None`` draws fresh OS entropy.

    Returns
    -------
    numpy.random.Generator
        PCG64-backed generator.
    """
    return np.random.default_rng(seed)


def inverse_transform(distribution: Inverse, source: RandomnessSource) -> Any:
    """
    Draw one value with the inversion method.

    A uniform ``u`` in ``[0, 1)`` is drawn from ``source`` and mapped through
    ``distribution.inverse``. ``u == 0`` lands on the infimum of the support.
    """
    return distribution.inverse(source.random())


class ArraySample:
    """
    Array-backed sample container.

    This implementation stores samples as a 2D floating-point array
    of shape (n_samples, n_dimensions).

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Attributes
    ----------
    data : numpy.ndarray
        Backing array containing the samples.
    dimension : int
        Dimensionality of the samples (d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


__all__ = [
    "RandomnessSource",
    "Sample",
    "ArraySample",
    "default_source",
    "inverse_transform",
]
