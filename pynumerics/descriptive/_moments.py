"""
Location and spread of a single numeric sequence.

Functions take any 1D array-like of reals. NaN propagates.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import check_1d, check_array, check_not_empty


def _to_sample(x: ArrayLike) -> NDArray[np.floating[Any]]:
    arr = check_array(x, "x")
    check_1d(arr, "x")
    check_not_empty(arr, "x")
    return arr


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean.

    Raises
    ------
    EmptySequenceError
        If x has no elements.

    Examples
    --------
    >>> mean([1, 2, 3, 4, 5])
    3.0
    """
    arr = _to_sample(x)
    return float(np.sum(arr) / arr.shape[0])


def sd(x: ArrayLike) -> float:
    """
    Sample standard deviation, sqrt(sum((x - mean)^2) / (n - 1)).

    A single observation has no spread estimate: NaN is returned and a
    RuntimeWarning emitted.

    Raises
    ------
    EmptySequenceError
        If x has no elements.

    Examples
    --------
    >>> round(sd([2, 4, 4, 4, 5, 5, 7, 9]), 4)
    2.1381
    """
    arr = _to_sample(x)
    n = arr.shape[0]
    if n < 2:
        warnings.warn(
            "sd of a single observation is undefined (n - 1 = 0), returning NaN",
            RuntimeWarning,
            stacklevel=2,
        )
        return float('nan')

    m = mean(arr)
    ss = float(np.sum((arr - m) ** 2))
    return float(np.sqrt(ss / (n - 1)))


def median(x: ArrayLike) -> float:
    """
    Median: middle value of the sorted sequence, or the mean of the two
    middle values when the count is even.

    Raises
    ------
    EmptySequenceError
        If x has no elements.

    Examples
    --------
    >>> median([1, 3, 2, 5, 4])
    3.0
    >>> median([1, 2, 3, 4])
    2.5
    """
    arr = _to_sample(x)
    # np.sort moves NaN to the end instead of propagating it
    if np.isnan(arr).any():
        return float('nan')

    arr = np.sort(arr)
    n = arr.shape[0]
    if n % 2 == 0:
        return float((arr[n // 2 - 1] + arr[n // 2]) / 2)
    return float(arr[n // 2])
