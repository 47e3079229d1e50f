"""
quadstat.stats.distributions.uniform
====================================

Continuous uniform distribution on ``[a, b]``.

Examples
--------
>>> dunif([-1, 0.5, 2])
[0.0, 1.0, 0.0]
>>> punif(0.25, a=0, b=2)
0.125
"""

from __future__ import annotations

from quadstat.core.elementwise import elementwise
from quadstat.core.names import FloatOrList, NumberOrSequence


def _check_bounds(a: float, b: float) -> None:
    if not b > a:
        raise ValueError(f"Parameter 'b' must be larger than 'a', got a={a}, b={b}")


@elementwise
def dunif(x: NumberOrSequence, a: float = 0.0, b: float = 1.0) -> FloatOrList:
    """Density: ``1 / (b - a)`` inside ``[a, b]``, zero outside."""
    _check_bounds(a, b)
    return 0.0 if x < a or x > b else 1.0 / (b - a)


@elementwise
def punif(x: NumberOrSequence, a: float = 0.0, b: float = 1.0) -> FloatOrList:
    """Cumulative probability, a linear ramp clamped to ``[0, 1]``."""
    _check_bounds(a, b)
    if x < a:
        return 0.0
    if x > b:
        return 1.0
    return (x - a) / (b - a)
