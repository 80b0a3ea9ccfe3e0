"""
PyNumerics: small dense linear algebra and numerical methods for Python.

Submodules:
    linalg: Matrix type, matrix multiplication and Gauss-Jordan inversion,
            dot and cross products
    rootfind: Newton-Raphson root finding
    descriptive: mean, median, sample standard deviation
    elementary: factorial, combination, complex multiplication
"""

__version__ = "0.1.0"

from pynumerics import linalg
from pynumerics import rootfind
from pynumerics import descriptive
from pynumerics import elementary

__all__ = [
    "__version__",
    "linalg",
    "rootfind",
    "descriptive",
    "elementary",
]
