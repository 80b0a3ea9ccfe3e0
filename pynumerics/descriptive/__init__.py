"""
Descriptive statistics for a single numeric sequence.

Public API:
    mean(x)     - arithmetic mean
    sd(x)       - sample standard deviation (n - 1 divisor)
    median(x)   - median

All three raise EmptySequenceError on an empty sequence.
"""

from pynumerics.descriptive._moments import mean, median, sd

__all__ = [
    "mean",
    "median",
    "sd",
]
