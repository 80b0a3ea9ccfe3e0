"""
CPU backend for Newton-Raphson root finding.

Iterates x <- x - f(x)/f'(x) from the design's initial guess until
|f(x)| < tol. No damping, bracketing, or multiple-root handling.
"""

from __future__ import annotations

import math
import numpy as np

from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import EPSILON
from pynumerics.core.exceptions import ConvergenceError, DerivativeNearZeroError
from pynumerics.core.result import Result
from pynumerics.rootfind._common import NewtonParams
from pynumerics.rootfind.design import RootDesign


class CPUNewtonBackend:
    """CPU reference backend for Newton-Raphson."""

    @property
    def name(self) -> str:
        return 'cpu_newton'

    def solve(self, design: RootDesign) -> Result[NewtonParams]:
        """
        Run Newton-Raphson on the design.

        Each iteration evaluates fx = f(x). If |fx| < tol the current x is
        returned. Otherwise the derivative d = f'(x) is evaluated; if
        |d| < EPSILON the run fails, else x is updated and the iteration
        count advances. Reaching max_iter updates without convergence is
        a failure.

        Raises
        ------
        DerivativeNearZeroError
            If |f'(x)| < EPSILON at some iterate.
        ConvergenceError
            If max_iter updates complete without |f(x)| < tol, or an
            iterate becomes non-finite.
        """
        timer = Timer()
        timer.start()

        f = design.f
        fprime = design.fprime
        tol = design.tol
        max_iter = design.max_iter

        x = design.x0
        trace = [x]
        iterations = 0
        step: float | None = None

        with timer.section('iterate'):
            while iterations < max_iter:
                fx = float(f(x))
                if abs(fx) < tol:
                    break

                dfx = float(fprime(x))
                if abs(dfx) < EPSILON:
                    raise DerivativeNearZeroError(
                        f"Derivative too close to zero at x={x:.10g}: "
                        f"|f'(x)| = {abs(dfx):.3g} < {EPSILON:g} "
                        f"after {iterations} iterations",
                        x=x,
                        derivative=dfx,
                        iterations=iterations,
                    )

                x_next = x - fx / dfx
                step = abs(x_next - x)
                x = x_next
                iterations += 1
                trace.append(x)

                if not math.isfinite(x):
                    raise ConvergenceError(
                        f"Newton-Raphson diverged: iterate became {x} "
                        f"after {iterations} iterations",
                        iterations=iterations,
                        final_change=step,
                        reason='non_finite',
                        threshold=tol,
                    )
            else:
                raise ConvergenceError(
                    f"Newton-Raphson did not converge in {max_iter} iterations "
                    f"(last step {step:.3g}, tol={tol:g})",
                    iterations=iterations,
                    final_change=step,
                    reason='max_iterations',
                    threshold=tol,
                )

        timer.stop()

        params = NewtonParams(
            root=x,
            f_root=fx,
            iterations=iterations,
            trace=np.asarray(trace, dtype=np.float64),
        )

        return Result(
            params=params,
            info={
                'method': design.method,
                'converged': True,
                'iterations': iterations,
                'tol': tol,
                'max_iter': max_iter,
            },
            timing=timer.result(),
            backend_name=self.name,
        )
