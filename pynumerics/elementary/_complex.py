"""
Complex multiplication on (real, imaginary) pairs.
"""

from __future__ import annotations

from typing import Sequence

from pynumerics.core.exceptions import ValidationError


ComplexPair = tuple[float, float]


def _as_pair(z: Sequence[float], name: str) -> ComplexPair:
    try:
        real, imag = z
        return float(real), float(imag)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name}: expected a (real, imaginary) pair, got {z!r}"
        ) from e


def complex_multiply(a: Sequence[float], b: Sequence[float]) -> ComplexPair:
    """
    Product of two complex numbers given as (real, imaginary) pairs.

    (a_re + i a_im)(b_re + i b_im)
        = (a_re b_re - a_im b_im) + i (a_re b_im + a_im b_re)

    Examples
    --------
    >>> complex_multiply((3.0, 2.0), (1.0, 4.0))
    (-5.0, 14.0)
    """
    a_re, a_im = _as_pair(a, "a")
    b_re, b_im = _as_pair(b, "b")
    return (
        a_re * b_re - a_im * b_im,
        a_re * b_im + a_im * b_re,
    )
