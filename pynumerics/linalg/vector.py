"""
Vector algebra over ordered sequences of reals.

There is no vector type: any 1D array-like is accepted. Vector results
are 1D float64 arrays.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_length,
)


def _to_vector(v: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(v, name)
    check_1d(arr, name)
    return arr


def dot_product(v1: ArrayLike, v2: ArrayLike) -> float:
    """
    Dot product sum_k v1[k] * v2[k].

    Raises
    ------
    DimensionError
        If the vectors differ in length or are not 1D.

    Examples
    --------
    >>> dot_product([1, 2, 3], [4, 5, 6])
    32.0
    """
    a = _to_vector(v1, "v1")
    b = _to_vector(v2, "v2")
    check_consistent_length(a, b, names=("v1", "v2"))
    return float(np.dot(a, b))


def cross_product(v1: ArrayLike, v2: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    3D cross product v1 x v2.

    Raises
    ------
    DimensionError
        If either vector does not have length exactly 3.

    Examples
    --------
    >>> cross_product([1, 2, 3], [4, 5, 6]).tolist()
    [-3.0, 6.0, -3.0]
    """
    a = _to_vector(v1, "v1")
    b = _to_vector(v2, "v2")
    check_length(a, 3, "v1")
    check_length(b, 3, "v2")

    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])
