"""
RootDesign: validated inputs for iterative root finders.

Immutable after construction. Use the factory classmethod.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from pynumerics.core.compute.tolerances import NEWTON_DEFAULT_MAX_ITER, NEWTON_DEFAULT_TOL
from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import check_integer, check_positive_finite


ScalarFunction = Callable[[float], float]


@dataclass(frozen=True)
class RootDesign:
    """
    Design for Newton-Raphson root finding.

    Do not construct directly; use RootDesign.for_newton().
    """
    method: str
    _f: ScalarFunction
    _fprime: ScalarFunction
    _x0: float
    _tol: float = NEWTON_DEFAULT_TOL
    _max_iter: int = NEWTON_DEFAULT_MAX_ITER

    # --- Properties ---

    @property
    def f(self) -> ScalarFunction:
        return self._f

    @property
    def fprime(self) -> ScalarFunction:
        return self._fprime

    @property
    def x0(self) -> float:
        return self._x0

    @property
    def tol(self) -> float:
        return self._tol

    @property
    def max_iter(self) -> int:
        return self._max_iter

    # --- Factory ---

    @classmethod
    def for_newton(
        cls,
        f: ScalarFunction,
        fprime: ScalarFunction,
        x0: float,
        *,
        tol: float = NEWTON_DEFAULT_TOL,
        max_iter: int = NEWTON_DEFAULT_MAX_ITER,
    ) -> RootDesign:
        """
        Build a design for newton_raphson().

        Parameters
        ----------
        f : callable
            Function whose root is sought, float -> float.
        fprime : callable
            Derivative of f, float -> float.
        x0 : float
            Initial guess. Must be finite.
        tol : float
            Convergence threshold on |f(x)|. Must be finite and > 0.
        max_iter : int
            Maximum number of Newton updates. Must be >= 1.

        Raises
        ------
        ValidationError
            If any input is invalid.
        """
        if not callable(f):
            raise ValidationError(f"f: expected a callable, got {type(f).__name__}")
        if not callable(fprime):
            raise ValidationError(
                f"fprime: expected a callable, got {type(fprime).__name__}"
            )

        try:
            x0 = float(x0)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"x0: expected a real number, got {x0!r}") from e
        if not math.isfinite(x0):
            raise ValidationError(f"x0: must be finite, got {x0}")

        tol = check_positive_finite(tol, "tol")

        max_iter = check_integer(max_iter, "max_iter")
        if max_iter < 1:
            raise ValidationError(f"max_iter: must be >= 1, got {max_iter}")

        return cls(
            method="newton_raphson",
            _f=f,
            _fprime=fprime,
            _x0=x0,
            _tol=tol,
            _max_iter=max_iter,
        )
