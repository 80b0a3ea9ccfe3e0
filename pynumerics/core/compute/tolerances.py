"""
Numerical thresholds and solver defaults.

Defines the singularity threshold shared by matrix inversion and the
Newton-Raphson derivative check, plus the solver and factorial limits.
"""

# Magnitude below which a pivot or derivative is treated as zero.
EPSILON = 1e-10

# Newton-Raphson defaults: stop when |f(x)| < tol.
NEWTON_DEFAULT_TOL = 1e-10
NEWTON_DEFAULT_MAX_ITER = 100

# Largest n whose factorial fits in a signed 64-bit integer.
MAX_FACTORIAL_ARGUMENT = 20
