"""
Iterative root finding.

Public API:
    newton_raphson(f, fprime, x0)   - Newton-Raphson with derivative

Example:
    >>> from pynumerics.rootfind import newton_raphson
    >>> sol = newton_raphson(lambda x: x**2 - 2, lambda x: 2 * x, 1.0)
    >>> print(sol.summary())
"""

from pynumerics.rootfind.design import RootDesign
from pynumerics.rootfind._common import NewtonParams
from pynumerics.rootfind.solution import RootSolution
from pynumerics.rootfind.solvers import newton_raphson

__all__ = [
    "newton_raphson",
    "RootDesign",
    "NewtonParams",
    "RootSolution",
]
