"""
quadstat.stats.distributions.fisher_f
=====================================

F-distribution with `d1` and `d2` degrees of freedom.

- `df`: density from the Beta-kernel closed form
- `pf`: CDF through the regularized incomplete Beta function
- `qf`: quantile by bracketed root finding on `pf`

The density requires ``d2 > d1``, a precondition of its closed form rather than
a property of the distribution itself. `pf` and `qf` accept any positive
degrees of freedom.

Examples
--------
>>> pf(0.0, 2, 5)
0.0
>>> round(pf(1.0, 2, 4), 6)  # ibeta closed form for a == 1
0.555556
"""

from __future__ import annotations
import logging
import math

from scipy.optimize import brentq

from quadstat.core.config import DEFAULT_QUADRATURE, QuadratureConfig
from quadstat.core.elementwise import elementwise
from quadstat.core.names import FloatOrList, NumberOrSequence
from quadstat.stats.common.special import beta, ibeta

logger = logging.getLogger(__name__)


def _check_params(F: float, d1: float, d2: float) -> None:
    if F < 0 or d1 <= 0 or d2 <= 0:
        raise ValueError(
            f"Parameters 'F', 'd1' and 'd2' must be positive, got F={F}, d1={d1}, d2={d2}"
        )


@elementwise
def df(F: NumberOrSequence, d1: float, d2: float) -> FloatOrList:
    """
    Probability density of the F-distribution at `F`.

    Args:
        F: F-value, non-negative
        d1: Numerator degrees of freedom
        d2: Denominator degrees of freedom, larger than `d1`

    Returns:
        Density ``sqrt((d1 F)^d1 d2^d2 / (d1 F + d2)^(d1 + d2)) / (F B(d1/2, d2/2))``
    """
    _check_params(F, d1, d2)
    if d2 <= d1:
        raise ValueError(f"Parameter 'd2' must be larger than 'd1', got d1={d1}, d2={d2}")

    if math.isinf(F):
        return 0.0

    if F == 0:
        if d1 > 2:
            return 0.0
        if d1 == 2:
            return 1.0
        return math.inf

    # the square root is taken in log space so large powers do not overflow
    log_kernel = 0.5 * (
        d1 * math.log(d1 * F) + d2 * math.log(d2) - (d1 + d2) * math.log(d1 * F + d2)
    )
    return math.exp(log_kernel) / (F * beta(d1 / 2, d2 / 2))


def _pf(F: float, d1: float, d2: float, quadrature: QuadratureConfig) -> float:
    if math.isinf(F):
        return 1.0
    return ibeta(d1 * F / (d1 * F + d2), d1 / 2, d2 / 2, quadrature=quadrature)


@elementwise
def pf(
    F: NumberOrSequence,
    d1: float,
    d2: float,
    quadrature: QuadratureConfig = DEFAULT_QUADRATURE,
) -> FloatOrList:
    """Cumulative probability ``P(X <= F)``, ``I_{d1 F / (d1 F + d2)}(d1/2, d2/2)``."""
    _check_params(F, d1, d2)
    return _pf(F, d1, d2, quadrature)


@elementwise
def qf(
    p: NumberOrSequence,
    d1: float,
    d2: float,
    quadrature: QuadratureConfig = DEFAULT_QUADRATURE,
) -> FloatOrList:
    """
    Quantile (inverse CDF) of the F-distribution.

    Args:
        p: Probability in ``[0, 1]``
        d1: Numerator degrees of freedom
        d2: Denominator degrees of freedom
        quadrature: Integrator settings used by every `pf` evaluation

    Returns:
        The value `F` with ``pf(F, d1, d2) == p``; ``0`` for ``p == 0`` and
        ``inf`` for ``p == 1``

    Algorithm:
        1. Double an upper bound from 1 until ``pf(upper) >= p``
        2. Solve ``pf(F) - p = 0`` on ``[0, upper]`` with Brent's method
    """
    if not 0 <= p <= 1:
        raise ValueError(f"Parameter 'p' must be between 0 and 1, got {p}")
    _check_params(0.0, d1, d2)

    if p == 0:
        return 0.0
    if p == 1:
        return math.inf

    upper = 1.0
    while _pf(upper, d1, d2, quadrature) < p:
        upper *= 2

    root, info = brentq(
        lambda v: _pf(v, d1, d2, quadrature) - p,
        0.0,
        upper,
        xtol=1e-12,
        rtol=1e-10,
        full_output=True,
    )
    logger.debug(
        "qf(%g, %g, %g): bracket [0, %g], %d iterations",
        p,
        d1,
        d2,
        upper,
        info.iterations,
    )
    return float(root)
