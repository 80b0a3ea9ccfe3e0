"""
Shared compute infrastructure for PyNumerics.

Submodules:
    timing: Execution timing utilities
    tolerances: Singularity threshold, solver defaults
"""

from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import (
    EPSILON,
    MAX_FACTORIAL_ARGUMENT,
    NEWTON_DEFAULT_MAX_ITER,
    NEWTON_DEFAULT_TOL,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "EPSILON",
    "MAX_FACTORIAL_ARGUMENT",
    "NEWTON_DEFAULT_MAX_ITER",
    "NEWTON_DEFAULT_TOL",
]
