"""
Factorial and binomial coefficient on small non-negative integers.

Results are floats. Arguments above MAX_FACTORIAL_ARGUMENT are rejected
rather than computed approximately.
"""

from __future__ import annotations

from typing import Any

from pynumerics.core.compute.tolerances import MAX_FACTORIAL_ARGUMENT
from pynumerics.core.exceptions import InvalidArgumentError
from pynumerics.core.validation import check_integer


def factorial(n: Any) -> float:
    """
    n! for 0 <= n <= 20.

    Raises
    ------
    InvalidArgumentError
        If n is not an integer, n < 0, or n > 20.

    Examples
    --------
    >>> factorial(5)
    120.0
    >>> factorial(0)
    1.0
    """
    n = check_integer(n, "n")
    if n < 0:
        raise InvalidArgumentError(
            f"Factorial is not defined for negative numbers, got n={n}",
            name="n", value=n,
        )
    if n > MAX_FACTORIAL_ARGUMENT:
        raise InvalidArgumentError(
            f"n={n} too large for factorial (max {MAX_FACTORIAL_ARGUMENT})",
            name="n", value=n,
        )

    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result


def combination(n: Any, r: Any) -> float:
    """
    Binomial coefficient n! / (r! (n - r)!).

    Every factorial term is subject to the factorial() domain, so
    n > 20 is rejected too.

    Raises
    ------
    InvalidArgumentError
        If r < 0, n < r, or a factorial argument is out of range.

    Examples
    --------
    >>> combination(5, 2)
    10.0
    """
    n = check_integer(n, "n")
    r = check_integer(r, "r")
    if r < 0:
        raise InvalidArgumentError(
            f"r must not be negative, got r={r}",
            name="r", value=r,
        )
    if n < r:
        raise InvalidArgumentError(
            f"n must be greater than or equal to r, got n={n}, r={r}",
            name="r", value=r,
        )
    return factorial(n) / (factorial(r) * factorial(n - r))
