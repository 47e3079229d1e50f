"""
quadstat.stats.distributions.student_t
======================================

Student's t-distribution with `dof` degrees of freedom.

- `dt`: closed-form density, normalized through the Beta function
- `pt`: CDF by adaptive integration of the left tail, mirrored for ``t > 0``
- `qt`: quantile; exact for 1 and 2 degrees of freedom, Hill's algorithm
  (G. W. Hill, 1970, ACM Algorithm 396) otherwise

Examples
--------
>>> pt(0.0, 5)
0.5
>>> round(qt(0.975, 4), 4)
2.7764
>>> round(qt(0.75, 1), 12)  # tan(pi / 4)
1.0
"""

from __future__ import annotations
import math
from typing import Callable

from quadstat.core.config import DEFAULT_QUADRATURE, QuadratureConfig
from quadstat.core.elementwise import elementwise
from quadstat.core.names import FloatOrList, NumberOrSequence
from quadstat.stats.common.integrate import integrate
from quadstat.stats.common.special import beta
from quadstat.stats.distributions.normal import P_TAIL, qnorm_standard


def _check_dof(dof: float) -> None:
    if dof is None or dof < 1:
        raise ValueError(
            f"Parameter 'dof' (degrees of freedom) must be a number >= 1, got {dof}"
        )


def t_density(dof: float) -> Callable[[float], float]:
    """
    Return the t density for a fixed `dof` as a function of one argument.

    The normalizing constant ``1 / (sqrt(dof) * B(1/2, dof/2))`` is computed
    once, which matters when the density is handed to the integrator.
    """
    scale = 1 / (math.sqrt(dof) * beta(0.5, dof / 2))
    power = -0.5 * (dof + 1)

    def density(t: float) -> float:
        return scale * math.pow(1 + t * t / dof, power)

    return density


@elementwise
def dt(t: NumberOrSequence, dof: float) -> FloatOrList:
    """Probability density of the t-distribution at `t`."""
    if dof is None or dof <= 0:
        raise ValueError(f"Parameter 'dof' must be a positive number, got {dof}")
    return t_density(dof)(t)


def _pt(t: float, dof: float, quadrature: QuadratureConfig) -> float:
    # symmetric distribution: only the left tail is ever integrated
    if t == 0:
        return 0.5
    if t == -math.inf:
        return 0.0
    if t == math.inf:
        return 1.0
    if t > 0:
        return 1 - _pt(-t, dof, quadrature)

    p = integrate(
        t_density(dof),
        -math.inf,
        t,
        acc=quadrature.acc,
        eps=quadrature.eps,
        max_depth=quadrature.max_depth,
    )
    return min(max(p, 0.0), 1.0)


@elementwise
def pt(
    t: NumberOrSequence,
    dof: float,
    quadrature: QuadratureConfig = DEFAULT_QUADRATURE,
) -> FloatOrList:
    """
    Cumulative probability ``P(T <= t)``.

    Args:
        t: t-value
        dof: Degrees of freedom, ``>= 1``
        quadrature: Integrator settings

    Returns:
        Probability in ``[0, 1]``

    Raises:
        ValueError: If ``dof < 1``
    """
    _check_dof(dof)
    return _pt(t, dof, quadrature)


@elementwise
def qt(p: NumberOrSequence, dof: float) -> FloatOrList:
    """
    Quantile (inverse CDF) of the t-distribution.

    Args:
        p: Probability in ``[0, 1]``
        dof: Degrees of freedom, ``>= 1``

    Returns:
        The value `t` with ``pt(t, dof) == p``; ``-inf`` / ``+inf`` for
        probabilities within 1e-10 of 0 / 1

    Raises:
        ValueError: If `p` is outside ``[0, 1]`` or ``dof < 1``
    """
    _check_dof(dof)

    if not 0 <= p <= 1:
        raise ValueError(f"Parameter 'p' must be between 0 and 1, got {p}")

    if p < P_TAIL:
        return -math.inf
    if p > 1 - P_TAIL:
        return math.inf

    # exact solutions
    if dof == 1:
        return math.tan(math.pi * (p - 0.5))

    if dof == 2:
        return 2 * (p - 0.5) * math.sqrt(2 / (4 * p * (1 - p)))

    # Hill's algorithm works with the two-sided tail probability
    if p >= 0.5:
        sign = 1.0
        p = 2 * (1 - p)
    else:
        sign = -1.0
        p = 2 * p

    a = 1.0 / (dof - 0.5)
    b = 48.0 / a**2
    c = ((20700 * a / b - 98) * a - 16) * a + 96.36
    d = ((94.5 / (b + c) - 3.0) / b + 1.0) * math.sqrt(a * math.pi / 2) * dof

    x = d * p
    y = x ** (2.0 / dof)

    if y > 0.05 + a:
        # asymptotic inverse expansion about the normal
        x = qnorm_standard(p * 0.5)
        y = x * x

        if dof < 5:
            c = c + 0.3 * (dof - 4.5) * (x + 0.6)

        c = (((0.05 * d * x - 5.0) * x - 7.0) * x - 2.0) * x + b + c
        y = (((((0.4 * y + 6.3) * y + 36.0) * y + 94.5) / c - y - 3.0) / b + 1.0) * x
        y = a * y**2
        y = math.exp(y) - 1.0 if y > 0.002 else 0.5 * y**2 + y
    else:
        y = (
            (
                1.0 / (((dof + 6.0) / (dof * y) - 0.089 * d - 0.822) * (dof + 2.0) * 3.0)
                + 0.5 / (dof + 4.0)
            )
            * y
            - 1.0
        ) * (dof + 1.0) / (dof + 2.0) + 1.0 / y

    return sign * math.sqrt(dof * y)
