"""
Dense matrix and vector algebra.

Public API:
    Matrix                  - dense R x C container of reals
    matrix_multiply(a, b)   - matrix product
    matrix_inverse(m)       - Gauss-Jordan inverse
    identity(n)             - identity matrix
    dot_product(v1, v2)     - inner product of equal-length vectors
    cross_product(v1, v2)   - 3D cross product

Example:
    >>> from pynumerics.linalg import Matrix, matrix_inverse, matrix_multiply
    >>> m = Matrix([[4, 7], [2, 6]])
    >>> matrix_multiply(m, matrix_inverse(m)).tolist()  # doctest: +SKIP
    [[1.0, 0.0], [0.0, 1.0]]
"""

from pynumerics.linalg.matrix import Matrix
from pynumerics.linalg.algebra import identity, matrix_inverse, matrix_multiply
from pynumerics.linalg.vector import cross_product, dot_product

__all__ = [
    "Matrix",
    "identity",
    "matrix_inverse",
    "matrix_multiply",
    "cross_product",
    "dot_product",
]
