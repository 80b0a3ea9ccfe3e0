"""
Parameter payload for root-finding results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class NewtonParams:
    """
    Parameter payload for a converged Newton-Raphson run.

    Attributes
    ----------
    root : float
        Final iterate x with |f(x)| < tol.
    f_root : float
        f evaluated at root.
    iterations : int
        Number of Newton updates performed (0 if x0 was already a root).
    trace : ndarray
        All iterates, starting with x0 and ending with root.
        Shape (iterations + 1,).
    """
    root: float
    f_root: float
    iterations: int
    trace: NDArray[np.floating[Any]]
