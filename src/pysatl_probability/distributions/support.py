"""
Supports of Univariate Distributions
====================================

- :class:`ContinuousSupport` — an interval of the real line.
- :class:`IntegerRangeSupport` — the integers ``low, low + 1, ..., high``.

Every support exposes its ``infimum`` and ``supremum``; quantile functions
return them for ``p = 0`` and ``p = 1``. Integer ranges iterate their points
in increasing order, which discrete families use for sums over the support.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_probability.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    """Set of values a distribution assigns probability to."""

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def __contains__(self, x: object) -> bool: ...

    @property
    def infimum(self) -> float: ...

    @property
    def supremum(self) -> float: ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    """Support made of isolated points that can be enumerated in order."""

    def __iter__(self) -> Iterator[int]: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Interval of the real line.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint.
    right : float, default=inf
        Right endpoint, ``left <= right``.
    left_closed : bool, default=True
        Whether ``left`` belongs to the support; forced to ``False`` for
        an infinite endpoint.
    right_closed : bool, default=True
        Whether ``right`` belongs to the support; forced to ``False`` for
        an infinite endpoint.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left > self.right:
            raise ValueError("Support endpoints must satisfy left <= right.")
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @property
    def infimum(self) -> float:
        return self.left

    @property
    def supremum(self) -> float:
        return self.right

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check; NaN is never contained.

        Returns
        -------
        bool or BoolArray
            Membership of every point.
        """
        arr = np.asarray(x, dtype=float)

        left_ok = (arr > self.left) | (self.left_closed & (arr == self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr == self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


@dataclass(frozen=True, slots=True)
class IntegerRangeSupport(DiscreteSupport):
    """
    Consecutive integers ``low, ..., high``.

    Parameters
    ----------
    low : int
        Smallest point.
    high : int
        Largest point, ``low <= high``.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError("Support bounds must satisfy low <= high.")

    @property
    def infimum(self) -> int:
        return self.low

    @property
    def supremum(self) -> int:
        return self.high

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.low, self.high + 1))

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            result = (arr == np.floor(arr)) & (arr >= self.low) & (arr <= self.high)

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerRangeSupport",
]
