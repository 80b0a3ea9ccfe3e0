"""
Matrix algebra: multiplication and inversion.

Public API:
    matrix_multiply(a, b)   - naive triple-loop product
    matrix_inverse(m)       - Gauss-Jordan inverse
    identity(n)             - n x n identity matrix

Operands may be Matrix instances or any 2D array-like; results are
always new Matrix instances with their own storage.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.compute.tolerances import EPSILON
from pynumerics.core.exceptions import DimensionError
from pynumerics.core.validation import check_square
from pynumerics.linalg._gauss_jordan import gauss_jordan_inverse
from pynumerics.linalg.matrix import Matrix


def _as_matrix(m: Matrix | ArrayLike, name: str) -> Matrix:
    if isinstance(m, Matrix):
        return m
    try:
        return Matrix(m)
    except DimensionError as e:
        raise DimensionError(f"{name}: {e}") from e


def _values(m: Matrix) -> NDArray[np.floating[Any]]:
    return m._data


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    return Matrix.identity(n)


def matrix_multiply(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Matrix:
    """
    Matrix product C = AB.

    C[i, j] = sum_k A[i, k] * B[k, j], accumulated over k in index
    order. No blocking or fast-multiplication schemes are used.

    Parameters
    ----------
    a : Matrix or array-like
        Left operand (r x m).
    b : Matrix or array-like
        Right operand (m x c).

    Returns
    -------
    Matrix
        Product (r x c).

    Raises
    ------
    DimensionError
        If a.columns != b.rows.

    Examples
    --------
    >>> matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]).tolist()
    [[19.0, 22.0], [43.0, 50.0]]
    """
    a = _as_matrix(a, "a")
    b = _as_matrix(b, "b")

    if a.columns != b.rows:
        raise DimensionError(
            f"Matrix dimensions do not match for multiplication: "
            f"a is {a.rows}x{a.columns}, b is {b.rows}x{b.columns} "
            f"(a.columns must equal b.rows)"
        )

    A = _values(a)
    B = _values(b)
    result = np.zeros((a.rows, b.columns), dtype=np.float64)

    # Row i of C accumulates A[i, k] * (row k of B) for k = 0..m-1, which
    # is the per-element sum over k in the same order.
    for i in range(a.rows):
        for k in range(a.columns):
            result[i, :] += A[i, k] * B[k, :]

    return Matrix(result)


def matrix_inverse(
    m: Matrix | ArrayLike,
    *,
    pivoting: bool = False,
) -> Matrix:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    Parameters
    ----------
    m : Matrix or array-like
        Square matrix (n x n). Not modified.
    pivoting : bool
        If False (default), pivots are taken from the diagonal as they
        stand; a near-zero diagonal pivot is reported as singular even if
        a row exchange would make the matrix invertible. If True, partial
        pivoting (row exchange on the largest remaining |entry| in the
        pivot column) is applied.

    Returns
    -------
    Matrix
        The inverse, with storage independent of m.

    Raises
    ------
    NotSquareError
        If m is not square.
    SingularMatrixError
        If a pivot magnitude falls below EPSILON (1e-10).

    Examples
    --------
    >>> matrix_inverse([[4, 7], [2, 6]]).tolist()  # doctest: +SKIP
    [[0.6, -0.7], [-0.2, 0.4]]
    """
    m = _as_matrix(m, "m")
    check_square(m.shape, "m")

    inverse = gauss_jordan_inverse(
        _values(m),
        eps=EPSILON,
        pivoting=pivoting,
        matrix_name="m",
    )
    return Matrix(inverse)
