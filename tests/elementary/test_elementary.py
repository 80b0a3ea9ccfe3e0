"""
Tests for factorial(), combination() and complex_multiply().
"""

import math

import pytest

from pynumerics.core.exceptions import InvalidArgumentError, ValidationError
from pynumerics.elementary import combination, complex_multiply, factorial


class TestFactorial:

    def test_five(self):
        assert factorial(5) == 120.0

    def test_zero(self):
        assert factorial(0) == 1.0

    def test_one(self):
        assert factorial(1) == 1.0

    def test_returns_float(self):
        assert isinstance(factorial(3), float)

    def test_upper_limit(self):
        assert factorial(20) == pytest.approx(float(math.factorial(20)), rel=1e-15)

    def test_negative(self):
        with pytest.raises(InvalidArgumentError, match="negative") as exc_info:
            factorial(-1)
        assert exc_info.value.value == -1

    def test_too_large(self):
        with pytest.raises(InvalidArgumentError, match="too large"):
            factorial(21)

    @pytest.mark.parametrize("n", [2.0, 2.5, True, "3"])
    def test_non_integer(self, n):
        with pytest.raises(InvalidArgumentError):
            factorial(n)


class TestCombination:

    def test_five_choose_two(self):
        assert combination(5, 2) == 10.0

    def test_edges(self):
        assert combination(7, 0) == 1.0
        assert combination(7, 7) == 1.0
        assert combination(0, 0) == 1.0

    def test_matches_math_comb(self):
        for n in range(0, 21):
            for r in range(0, n + 1):
                assert combination(n, r) == pytest.approx(math.comb(n, r), rel=1e-12)

    def test_n_less_than_r(self):
        with pytest.raises(InvalidArgumentError, match="greater than or equal"):
            combination(2, 5)

    def test_negative_r(self):
        with pytest.raises(InvalidArgumentError, match="r must not be negative") as exc_info:
            combination(5, -1)
        assert exc_info.value.name == "r"
        assert exc_info.value.value == -1

    def test_negative_n_and_r(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            combination(-1, -3)
        assert exc_info.value.name == "r"

    def test_n_beyond_factorial_limit(self):
        with pytest.raises(InvalidArgumentError, match="too large"):
            combination(25, 2)


class TestComplexMultiply:

    def test_basic(self):
        assert complex_multiply((3.0, 2.0), (1.0, 4.0)) == (-5.0, 14.0)

    def test_i_squared(self):
        assert complex_multiply((0, 1), (0, 1)) == (-1.0, 0.0)

    def test_matches_builtin_complex(self):
        a, b = (1.5, -2.0), (0.25, 3.0)
        expected = complex(*a) * complex(*b)
        re, im = complex_multiply(a, b)
        assert re == pytest.approx(expected.real)
        assert im == pytest.approx(expected.imag)

    def test_accepts_lists(self):
        assert complex_multiply([2, 0], [3, 0]) == (6.0, 0.0)

    @pytest.mark.parametrize("bad", [(1.0,), (1.0, 2.0, 3.0), 5.0, ("a", 1.0)])
    def test_malformed_pair(self, bad):
        with pytest.raises(ValidationError, match="pair"):
            complex_multiply(bad, (1.0, 0.0))
