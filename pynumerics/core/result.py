"""
Generic result container for PyNumerics computations.

The Result class provides a standardized envelope for iterative
computations. Domains define their own parameter payloads and wrap the
envelope in a user-facing solution class.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (root, iterates, etc.)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result

    Examples:
        >>> Result(
        ...     params=NewtonParams(root=4.0, f_root=0.0, iterations=6, trace=xs),
        ...     info={'method': 'newton_raphson', 'converged': True, 'iterations': 6},
        ...     timing={'total_seconds': 1e-4},
        ...     backend_name='cpu_newton'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
