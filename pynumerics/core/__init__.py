"""
Core infrastructure for PyNumerics.

This module provides shared abstractions and utilities used by all
domain-specific submodules (linalg, rootfind, descriptive, elementary).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical thresholds
"""

from pynumerics.core.result import Result
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    DimensionError,
    NotSquareError,
    EmptySequenceError,
    InvalidArgumentError,
    NumericalError,
    SingularMatrixError,
    DerivativeNearZeroError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "EmptySequenceError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
    "DerivativeNearZeroError",
    "ConvergenceError",
]
