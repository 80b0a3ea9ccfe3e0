"""
Solver dispatch for root finding.

Provides newton_raphson().
"""

from __future__ import annotations

from pynumerics.core.compute.tolerances import NEWTON_DEFAULT_MAX_ITER, NEWTON_DEFAULT_TOL
from pynumerics.core.exceptions import ValidationError
from pynumerics.rootfind.backends.cpu import CPUNewtonBackend
from pynumerics.rootfind.design import RootDesign, ScalarFunction
from pynumerics.rootfind.solution import RootSolution


def _get_backend(backend: str = 'cpu'):
    """Select backend for root finding. Only a CPU backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUNewtonBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def newton_raphson(
    f: ScalarFunction | RootDesign,
    fprime: ScalarFunction | None = None,
    x0: float | None = None,
    *,
    tol: float = NEWTON_DEFAULT_TOL,
    max_iter: int = NEWTON_DEFAULT_MAX_ITER,
    backend: str = 'cpu',
) -> RootSolution:
    """
    Newton-Raphson root finder.

    Parameters
    ----------
    f : callable or RootDesign
        Function whose root is sought (float -> float), or a pre-built
        RootDesign (in which case fprime, x0, tol and max_iter are ignored).
    fprime : callable
        Derivative of f.
    x0 : float
        Initial guess.
    tol : float
        Stop when |f(x)| < tol. Default 1e-10.
    max_iter : int
        Maximum number of updates. Default 100.
    backend : str
        'cpu' (default).

    Returns
    -------
    RootSolution
        Converged result with root, iterations and trace.

    Raises
    ------
    ValidationError
        If inputs are invalid.
    DerivativeNearZeroError
        If |f'(x)| < 1e-10 at some iterate.
    ConvergenceError
        If the method does not converge within max_iter updates.

    Examples
    --------
    >>> sol = newton_raphson(lambda x: x * x - 16, lambda x: 2 * x, 1.0)
    >>> round(sol.root, 6)
    4.0
    """
    if isinstance(f, RootDesign):
        design = f
    else:
        if fprime is None or x0 is None:
            raise ValidationError(
                "newton_raphson requires fprime and x0 unless a RootDesign is given"
            )
        design = RootDesign.for_newton(f, fprime, x0, tol=tol, max_iter=max_iter)

    be = _get_backend(backend)
    result = be.solve(design)
    return RootSolution(_result=result, _design=design)
