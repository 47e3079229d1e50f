"""
quadstat.stats.hypothesis.pvalue
================================

Turn a CDF value at a critical statistic into a p-value.

Examples
--------
>>> from quadstat.stats.distributions import pnorm
>>> get_p_value(pnorm, 0.0, "both")
1.0
>>> get_p_value(pnorm, 0.0, "left")
0.5
"""

from __future__ import annotations
from typing import Any, Callable, Sequence

from quadstat.core.names import Tail, TailLike, as_tail


def get_p_value(
    cdf: Callable[..., float],
    crit: float,
    tail: TailLike,
    params: Sequence[Any] = (),
) -> float:
    """
    Compute a p-value from any cumulative distribution function.

    Args:
        cdf: CDF of the test statistic under the null hypothesis (e.g. `pt`)
        crit: Observed value of the statistic
        tail: "left", "right" or "both"
        params: Extra positional arguments passed to `cdf` after `crit`

    Returns:
        ``cdf(crit)`` for the left tail, ``1 - cdf(crit)`` for the right tail,
        and ``2 * min(cdf(crit), 1 - cdf(crit))`` for both tails

    Raises:
        ValueError: If `tail` is not a recognized tail name
    """
    tail = as_tail(tail)
    p = cdf(crit, *params)

    if tail is Tail.LEFT:
        return p

    if tail is Tail.RIGHT:
        return 1 - p

    return min(p, 1 - p) * 2
