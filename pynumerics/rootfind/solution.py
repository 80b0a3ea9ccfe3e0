"""
Root-finding solution types.

RootSolution wraps Result[NewtonParams] and exposes the payload and
metadata as properties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.result import Result
from pynumerics.rootfind._common import NewtonParams

if TYPE_CHECKING:
    from pynumerics.rootfind.design import RootDesign


@dataclass
class RootSolution:
    """
    User-facing Newton-Raphson result.

    Only converged runs produce a RootSolution; failures are raised.
    """
    _result: Result[NewtonParams]
    _design: 'RootDesign | None'

    @property
    def root(self) -> float:
        """Approximate root."""
        return self._result.params.root

    @property
    def f_root(self) -> float:
        """f(root); |f_root| < tol."""
        return self._result.params.f_root

    @property
    def iterations(self) -> int:
        """Number of Newton updates performed."""
        return self._result.params.iterations

    @property
    def trace(self) -> NDArray[np.floating[Any]]:
        """Iterates from x0 to root."""
        return self._result.params.trace

    @property
    def converged(self) -> bool:
        return bool(self._result.info.get('converged', False))

    @property
    def x0(self) -> float | None:
        return self._design.x0 if self._design is not None else None

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        """
        Plain-text report.

        Produces output like:
            Newton-Raphson root finding

            root:        4
            f(root):     2.2737e-13
            iterations:  6 (max 100)
            tolerance:   1e-10
        """
        info = self._result.info
        lines = [
            "\tNewton-Raphson root finding",
            "",
            f"root:        {self.root:.10g}",
            f"f(root):     {self.f_root:.5g}",
            f"iterations:  {self.iterations} (max {info.get('max_iter')})",
            f"tolerance:   {info.get('tol'):g}",
        ]
        if self.x0 is not None:
            lines.append(f"start:       {self.x0:.10g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"RootSolution(root={self.root!r}, iterations={self.iterations})"
