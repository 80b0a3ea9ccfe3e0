"""
Exception hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or incompatible.

    Raised when vector lengths differ for a dot product, when a cross
    product is requested on vectors that are not 3-dimensional, or when
    matrix shapes do not line up for multiplication.
    """
    pass


class NotSquareError(DimensionError):
    """
    Matrix is not square.

    Raised when an operation that is only defined for n x n matrices
    (inversion) receives a rectangular one.

    Attributes:
        shape: (rows, columns) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class EmptySequenceError(ValidationError):
    """Statistical function called on a sequence with no elements."""
    pass


class InvalidArgumentError(ValidationError):
    """
    Integer argument outside the domain of the function.

    Attributes:
        name: Parameter name
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value: object = None):
        super().__init__(message)
        self.name = name
        self.value = value


class NumericalError(PyNumericsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when Gauss-Jordan elimination meets a pivot whose magnitude
    is below the singularity threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column index of the failing pivot
        pivot_value: Value of the failing pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class DerivativeNearZeroError(NumericalError):
    """
    Derivative vanished during a Newton-Raphson step.

    The update x - f(x)/f'(x) is undefined (or explosive) when the
    derivative is numerically zero.

    Attributes:
        x: Iterate at which the derivative was evaluated
        derivative: The derivative value
        iterations: Number of completed updates before the failure
    """

    def __init__(
        self,
        message: str,
        x: float | None = None,
        derivative: float | None = None,
        iterations: int | None = None
    ):
        super().__init__(message)
        self.x = x
        self.derivative = derivative
        self.iterations = iterations


class ConvergenceError(PyNumericsError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (Newton-Raphson) fails to meet its
    convergence criterion within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final step size |x_{k+1} - x_k|
        reason: Why convergence failed ('max_iterations' or 'non_finite')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
