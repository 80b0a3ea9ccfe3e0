"""
Dense row-major matrix of real numbers.

Matrix is a fixed-size container: the shape is set at construction and
never changes, while element values may be reassigned in place. Each
instance owns its storage; construction and every export copy.
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import (
    check_2d,
    check_array,
    check_integer,
    check_nonempty_shape,
)


class Matrix:
    """
    Dense R x C matrix of float64 values.

    Parameters
    ----------
    data : array-like
        Rectangular 2D array of reals (nested sequences or ndarray).
        Copied on construction.

    Raises
    ------
    ValidationError
        If data is ragged or non-numeric.
    DimensionError
        If data is not 2D or has an empty dimension.

    Examples
    --------
    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m[1, 0]
    3.0
    >>> m[1, 0] = 5
    >>> m.shape
    (2, 2)
    """

    __slots__ = ('_data',)

    def __init__(self, data: ArrayLike):
        arr = check_array(data, "data")
        check_2d(arr, "data")
        check_nonempty_shape(arr, "data")
        self._data: NDArray[np.floating[Any]] = np.ascontiguousarray(arr)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_integer(n, "n")
        if n < 1:
            raise ValidationError(f"n: must be a positive integer, got {n}")
        return cls(np.eye(n))

    # --- Dimensions ---

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    # --- Element access ---

    def _check_index(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be an (i, j) pair, got {key!r}")
        if any(isinstance(k, (bool, np.bool_)) for k in key):
            raise TypeError(f"Matrix indices must be integers, got {key!r}")
        try:
            i, j = (operator.index(k) for k in key)
        except TypeError as e:
            raise TypeError(f"Matrix indices must be integers, got {key!r}") from e
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self.rows}x{self.columns} matrix"
            )
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._check_index(key)
        return float(self._data[i, j])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._check_index(key)
        self._data[i, j] = float(value)

    # --- Export ---

    def copy(self) -> Matrix:
        return Matrix(self._data)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the elements as a 2D float64 array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        if copy is False:
            raise ValueError("Matrix cannot be exported to numpy without a copy")
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"
