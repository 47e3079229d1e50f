"""
quadstat.stats.common.descriptive
=================================

Descriptive reductions over numeric sequences.

These are the plain sequence operations the hypothesis tests consume:
mean, variance, standard deviation, covariance and Pearson correlation.
Variances default to the unbiased (n - 1) estimator.

Examples
--------
>>> mean([1, 2, 3, 4])
2.5
>>> variance([-2, -1, 0, 1, 2])
2.5
>>> round(cor([1, 2, 3], [2, 4, 6]), 12)
1.0
"""

from __future__ import annotations
import math
from typing import List, Optional, Sequence


def _as_floats(x: Sequence[float], name: str) -> List[float]:
    values = [float(v) for v in x]
    if not values:
        raise ValueError(f"Parameter '{name}' must contain at least one value")
    return values


def mean(x: Sequence[float]) -> float:
    """Arithmetic mean."""
    values = _as_floats(x, "x")
    return math.fsum(values) / len(values)


def variance(
    x: Sequence[float], biased: bool = False, m: Optional[float] = None
) -> float:
    """
    Variance of the values in `x`.

    Args:
        x: Sample values
        biased: Divide by n instead of n - 1
        m: Precomputed mean (computed when omitted)

    Returns:
        Sample variance
    """
    return cov(x, x, biased=biased, mx=m, my=m)


def sd(x: Sequence[float], biased: bool = False, m: Optional[float] = None) -> float:
    """Standard deviation, the square root of `variance`."""
    return math.sqrt(variance(x, biased=biased, m=m))


def cov(
    x: Sequence[float],
    y: Sequence[float],
    biased: bool = False,
    mx: Optional[float] = None,
    my: Optional[float] = None,
) -> float:
    """
    Covariance between two equally long sequences.

    Args:
        x: First sample
        y: Second sample
        biased: Divide by n instead of n - 1
        mx: Precomputed mean of `x`
        my: Precomputed mean of `y`

    Returns:
        Sample covariance

    Raises:
        ValueError: If the lengths differ or there are too few values
    """
    xs = _as_floats(x, "x")
    ys = _as_floats(y, "y")

    if len(xs) != len(ys):
        raise ValueError(
            f"Parameters 'x' and 'y' must have the same length, got {len(xs)} and {len(ys)}"
        )

    n = len(xs)
    d = n if biased else n - 1
    if d < 1:
        raise ValueError("Parameter 'x' must contain at least two values")

    if mx is None:
        mx = math.fsum(xs) / n
    if my is None:
        my = math.fsum(ys) / n

    return math.fsum((a - mx) * (b - my) for a, b in zip(xs, ys)) / d


def cor(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient."""
    sxy = cov(x, y)
    return sxy / (sd(x) * sd(y))
