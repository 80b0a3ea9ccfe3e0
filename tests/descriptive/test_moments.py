"""
Tests for mean(), sd() and median().

Expected values checked against numpy (np.mean, np.std(ddof=1), np.median).
"""

import warnings

import numpy as np
import pytest

from pynumerics.core.exceptions import DimensionError, EmptySequenceError, ValidationError
from pynumerics.descriptive import mean, median, sd


class TestMean:

    def test_basic(self):
        assert mean([1, 2, 3, 4, 5]) == 3.0

    def test_single_value(self):
        assert mean([7.5]) == 7.5

    def test_generator_materialized_as_tuple(self):
        assert mean(tuple(x for x in range(1, 4))) == 2.0

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(200)
        assert mean(x) == pytest.approx(float(np.mean(x)), rel=1e-12)

    def test_nan_propagates(self):
        assert np.isnan(mean([1.0, np.nan, 3.0]))

    def test_empty(self):
        with pytest.raises(EmptySequenceError, match="no elements"):
            mean([])

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            mean([[1, 2], [3, 4]])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            mean(["a", "b"])


class TestSd:

    def test_sample_divisor(self):
        """sum of squares 32 over n - 1 = 7."""
        assert sd([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(np.sqrt(32 / 7), rel=1e-12)
        assert sd([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0, abs=0.15)

    def test_matches_numpy_ddof1(self, rng):
        x = rng.standard_normal(100) * 3 + 10
        assert sd(x) == pytest.approx(float(np.std(x, ddof=1)), rel=1e-12)

    def test_constant_is_zero(self):
        assert sd([5, 5, 5, 5]) == 0.0

    def test_single_observation_nan_with_warning(self):
        with pytest.warns(RuntimeWarning, match="single observation"):
            result = sd([3.0])
        assert np.isnan(result)

    def test_no_warning_for_two_values(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert sd([1.0, 3.0]) == pytest.approx(np.sqrt(2.0))

    def test_empty(self):
        with pytest.raises(EmptySequenceError):
            sd([])


class TestMedian:

    def test_odd_count(self):
        assert median([1, 3, 2, 5, 4]) == 3.0

    def test_even_count(self):
        assert median([1, 2, 3, 4]) == 2.5

    def test_unsorted_even(self):
        assert median([10, -1, 4, 2]) == 3.0

    def test_single_value(self):
        assert median([42]) == 42.0

    def test_does_not_reorder_input(self):
        data = np.array([3.0, 1.0, 2.0])
        median(data)
        np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(101)
        assert median(x) == float(np.median(x))

    def test_nan_propagates(self):
        assert np.isnan(median([1.0, np.nan, 3.0]))

    def test_empty(self):
        with pytest.raises(EmptySequenceError):
            median([])
