"""
quadstat.stats.distributions.normal
===================================

Normal distribution N(mu, sigma).

- `dnorm`: closed-form Gaussian density
- `pnorm`: CDF through the `erf` approximation
- `qnorm`: quantile through Wichura's AS 241 (PPND7) rational approximation

Examples
--------
>>> round(dnorm(0.0), 6)
0.398942
>>> pnorm(0.0)
0.5
>>> round(qnorm(0.975), 4)
1.96
>>> qnorm(1e-12)
-inf
"""

from __future__ import annotations
import math

from quadstat.core.elementwise import elementwise
from quadstat.core.names import FloatOrList, NumberOrSequence
from quadstat.stats.common.special import erf

# Probabilities closer than this to 0 or 1 map straight to -inf / +inf
P_TAIL = 1e-10

# AS 241 split points and offsets
_SPLIT1 = 0.425
_SPLIT2 = 5.0
_CONST1 = 0.180625
_CONST2 = 1.6

# central region, |p - 0.5| <= 0.425
_A = (3.3871327179, 5.0434271938e1, 1.5929113202e2, 5.9109374720e1)
_B = (1.0, 1.7895169469e1, 7.8757757664e1, 6.7187563600e1)

# intermediate tail, r <= 5
_C = (1.4234372777, 2.7568153900, 1.3067284816, 1.7023821103e-1)
_D = (1.0, 7.3700164250e-1, 1.2021132975e-1)

# far tail, r > 5
_E = (6.6579051150, 3.0812263860, 4.2868294337e-1, 1.7337203997e-2)
_F = (1.0, 2.4197894225e-1, 1.2258202635e-2)


def _poly(coefs: tuple, x: float) -> float:
    """Evaluate ``coefs[0] + coefs[1] * x + ...`` by Horner's rule."""
    result = 0.0
    for c in reversed(coefs):
        result = result * x + c
    return result


def _check_sigma(sigma: float) -> None:
    if sigma <= 0:
        raise ValueError(f"Parameter 'sigma' must be positive, got {sigma}")


@elementwise
def dnorm(x: NumberOrSequence, mu: float = 0.0, sigma: float = 1.0) -> FloatOrList:
    """Probability density of N(mu, sigma) at `x`."""
    _check_sigma(sigma)
    scale = 1 / (math.sqrt(2 * math.pi) * sigma)
    frac = -0.5 / sigma**2
    d = x - mu
    return scale * math.exp(frac * d * d)


@elementwise
def pnorm(x: NumberOrSequence, mu: float = 0.0, sigma: float = 1.0) -> FloatOrList:
    """Cumulative probability ``0.5 * (1 + erf((x - mu) / (sigma * sqrt(2))))``."""
    _check_sigma(sigma)
    return 0.5 * (1 + erf((x - mu) / (math.sqrt(2) * sigma)))


def qnorm_standard(p: float) -> float:
    """Standard-normal quantile for a single probability (AS 241)."""
    if not 0 <= p <= 1:
        raise ValueError(f"Parameter 'p' must be between 0 and 1, got {p}")

    if p < P_TAIL:
        return -math.inf
    if p > 1 - P_TAIL:
        return math.inf

    q = p - 0.5

    if abs(q) <= _SPLIT1:
        r = _CONST1 - q * q
        return q * _poly(_A, r) / _poly(_B, r)

    r = p if q < 0 else 1 - p
    r = math.sqrt(-math.log(r))

    if r <= _SPLIT2:
        r = r - _CONST2
        res = _poly(_C, r) / _poly(_D, r)
    else:
        r = r - _SPLIT2
        res = _poly(_E, r) / _poly(_F, r)

    return -res if q < 0 else res


@elementwise
def qnorm(p: NumberOrSequence, mu: float = 0.0, sigma: float = 1.0) -> FloatOrList:
    """
    Quantile (inverse CDF) of N(mu, sigma).

    Args:
        p: Probability in ``[0, 1]``
        mu: Mean
        sigma: Standard deviation

    Returns:
        The value `x` with ``pnorm(x, mu, sigma) == p``; ``-inf`` for
        ``p < 1e-10`` and ``+inf`` for ``p > 1 - 1e-10``

    Raises:
        ValueError: If `p` is outside ``[0, 1]`` or ``sigma <= 0``

    Note:
        Non-standard parameters rescale the standard-normal quantile. The
        rational approximation is accurate to about 1e-7.
    """
    _check_sigma(sigma)
    if mu != 0 or sigma != 1:
        return qnorm_standard(p) * sigma + mu
    return qnorm_standard(p)
