"""
Input validation utilities for PyNumerics.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pynumerics.core.exceptions import (
    DimensionError,
    EmptySequenceError,
    InvalidArgumentError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that are ragged or result in object dtype (indicating mixed types or
    non-numeric data). The result never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_length(array: NDArray[np.floating[Any]], length: int, name: str) -> None:
    """
    Verify a 1D array has exactly the given length.

    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {array.shape[0]}"
        )


def check_nonempty_shape(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every dimension of the array is positive.

    Raises:
        DimensionError: If any axis has length zero
    """
    if array.size == 0:
        raise DimensionError(
            f"{name}: all dimensions must be positive, got shape {array.shape}"
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise NotSquareError(
            f"{name}: matrix must be square, got {rows}x{columns}",
            shape=(rows, columns),
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a sequence has at least one element.

    Raises:
        EmptySequenceError: If the sequence has no elements
    """
    if array.size == 0:
        raise EmptySequenceError(f"{name}: sequence contains no elements")


def check_integer(value: Any, name: str) -> int:
    """
    Validate an integer argument.

    Accepts Python and numpy integers. Booleans and floats (even integral
    ones) are rejected.

    Returns:
        The value as a Python int

    Raises:
        InvalidArgumentError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(
            f"{name}: expected an integer, got bool {value!r}",
            name=name, value=value,
        )
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidArgumentError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}",
            name=name, value=value,
        ) from e


def check_positive_finite(value: float, name: str) -> float:
    """
    Verify a scalar is a finite number strictly greater than zero.

    Raises:
        ValidationError: If value is not a real number, not finite, or <= 0
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a real number, got {value!r}") from e
    if not math.isfinite(result) or result <= 0:
        raise ValidationError(f"{name}: must be finite and > 0, got {result}")
    return result
