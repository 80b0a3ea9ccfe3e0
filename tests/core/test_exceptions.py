"""
Tests for PyNumerics exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyNumericsError)
    - Diagnostic attributes on NotSquareError, InvalidArgumentError,
      SingularMatrixError, DerivativeNearZeroError, ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pynumerics.core.exceptions import (
    ConvergenceError,
    DerivativeNearZeroError,
    DimensionError,
    EmptySequenceError,
    InvalidArgumentError,
    NotSquareError,
    NumericalError,
    PyNumericsError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyNumericsError."""

    def test_validation_error_is_pynumerics_error(self):
        with pytest.raises(PyNumericsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NotSquareError("2x3")

    def test_empty_sequence_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise EmptySequenceError("empty")

    def test_invalid_argument_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidArgumentError("n < 0")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_derivative_near_zero_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DerivativeNearZeroError("f'(x) = 0")

    def test_convergence_error_is_pynumerics_error(self):
        with pytest.raises(PyNumericsError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from PyNumericsError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)

    def test_numerical_errors_are_not_validation_errors(self):
        assert not isinstance(SingularMatrixError("s"), ValidationError)
        assert not isinstance(DerivativeNearZeroError("d"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestNotSquareError:

    def test_shape_attribute(self):
        err = NotSquareError("m: matrix must be square, got 2x3", shape=(2, 3))
        assert err.shape == (2, 3)
        assert "2x3" in str(err)

    def test_default_shape_is_none(self):
        assert NotSquareError("not square").shape is None


class TestInvalidArgumentError:

    def test_all_attributes(self):
        err = InvalidArgumentError("n too large", name="n", value=21)
        assert err.name == "n"
        assert err.value == 21

    def test_defaults_are_none(self):
        err = InvalidArgumentError("bad")
        assert err.name is None
        assert err.value is None


class TestSingularMatrixError:
    """SingularMatrixError carries pivot diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "m is not invertible",
            matrix_name="m",
            pivot_index=1,
            pivot_value=0.0,
        )
        assert str(err) == "m is not invertible"
        assert err.matrix_name == "m"
        assert err.pivot_index == 1
        assert err.pivot_value == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None
        assert err.pivot_value is None


class TestDerivativeNearZeroError:

    def test_all_attributes(self):
        err = DerivativeNearZeroError(
            "Derivative too close to zero", x=0.0, derivative=0.0, iterations=3
        )
        assert err.x == 0.0
        assert err.derivative == 0.0
        assert err.iterations == 3

    def test_defaults_are_none(self):
        err = DerivativeNearZeroError("zero")
        assert err.x is None
        assert err.derivative is None
        assert err.iterations is None


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "Newton-Raphson did not converge",
            iterations=100,
            final_change=1e-4,
            reason="max_iterations",
            threshold=1e-10,
        )
        assert str(err) == "Newton-Raphson did not converge"
        assert err.iterations == 100
        assert err.final_change == 1e-4
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-10

    def test_required_iterations(self):
        """iterations is required (positional)."""
        err = ConvergenceError("failed", 42)
        assert err.iterations == 42

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
