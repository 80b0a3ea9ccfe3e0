"""
Gauss-Jordan elimination kernel for matrix inversion.

Operates on a private augmented buffer [A | I]. The caller's array is
never modified.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.compute.tolerances import EPSILON
from pynumerics.core.exceptions import SingularMatrixError


def gauss_jordan_inverse(
    A: NDArray[np.floating[Any]],
    *,
    eps: float = EPSILON,
    pivoting: bool = False,
    matrix_name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix by Gauss-Jordan elimination.

    For each pivot row i the pivot aug[i, i] is checked against eps,
    row i is scaled so the pivot becomes 1, and column i is eliminated
    from every other row. After the last pivot the right half of the
    augmented matrix holds the inverse.

    Without pivoting no rows are exchanged, so a matrix whose natural
    pivot is (near) zero fails even when a row swap would rescue it.
    With pivoting=True the row with the largest |aug[k, i]|, k >= i, is
    swapped into position i before the check.

    Args:
        A: Square matrix (n x n)
        eps: Pivot magnitude below which the matrix is treated as singular
        pivoting: Enable partial pivoting
        matrix_name: Name used in the SingularMatrixError

    Returns:
        The inverse as a new (n x n) array

    Raises:
        SingularMatrixError: If a pivot magnitude falls below eps
    """
    n = A.shape[0]
    augmented = np.hstack([A.astype(np.float64), np.eye(n)])

    for i in range(n):
        if pivoting:
            p = i + int(np.argmax(np.abs(augmented[i:, i])))
            if p != i:
                augmented[[i, p]] = augmented[[p, i]]

        pivot = augmented[i, i]
        if abs(pivot) < eps:
            raise SingularMatrixError(
                f"{matrix_name} is not invertible: |pivot| at index {i} is "
                f"{abs(pivot):.3g} < {eps:g}",
                matrix_name=matrix_name,
                pivot_index=i,
                pivot_value=float(pivot),
            )

        augmented[i, :] /= pivot

        for k in range(n):
            if k != i:
                factor = augmented[k, i]
                augmented[k, :] -= factor * augmented[i, :]

    return augmented[:, n:].copy()
