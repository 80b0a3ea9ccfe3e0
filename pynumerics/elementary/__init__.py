"""
Elementary closed-form utilities.

Public API:
    factorial(n)            - n! for 0 <= n <= 20
    combination(n, r)       - binomial coefficient
    complex_multiply(a, b)  - product of (real, imaginary) pairs
"""

from pynumerics.elementary._combinatorics import combination, factorial
from pynumerics.elementary._complex import ComplexPair, complex_multiply

__all__ = [
    "combination",
    "factorial",
    "complex_multiply",
    "ComplexPair",
]
