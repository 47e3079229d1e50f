"""
quadstat.stats.hypothesis.ttest
===============================

One- and two-sample t-tests for means.

The two-sample test combines the unpooled (Welch) standard error
``sqrt(var(x)/nx + var(y)/ny)`` with the pooled degrees of freedom
``(nx - 1) + (ny - 1)``. Both choices are kept as they are so that p-values
and confidence intervals stay comparable with previously reported results.

Examples
--------
>>> r = t_test1([-2, -1, 0, 1, 2], mu=0)
>>> r.dof, r.effect_observed, round(r.p_value, 6)
(4, 0.0, 1.0)
>>> r = t_test2([-2, -1, 0, 1, 2], [-3, -2, -1, 0, 1])
>>> r.dof, round(r.se, 6), round(r.p_value, 4)
(8, 1.0, 0.3466)
"""

from __future__ import annotations
import logging
import math
import numbers
from typing import Sequence

from quadstat.core.config import DEFAULT_ALPHA, DEFAULT_TAIL
from quadstat.core.names import TailLike, as_tail
from quadstat.stats.common.descriptive import mean, sd, variance
from quadstat.stats.distributions.student_t import pt, qt
from quadstat.stats.hypothesis.model import TTestResult
from quadstat.stats.hypothesis.pvalue import get_p_value

logger = logging.getLogger(__name__)


def _check_sample(x: Sequence[float], name: str) -> int:
    n = len(x)
    if n < 2:
        raise ValueError(f"Parameter '{name}' must contain at least two values, got {n}")
    return n


def _check_alpha(alpha: float) -> None:
    if not 0 < alpha < 1:
        raise ValueError(f"Parameter 'alpha' must be in (0, 1), got {alpha}")


def _check_se(se: float, names: str) -> None:
    if se == 0:
        raise ValueError(f"Zero variance in {names}, the t-statistic is undefined")


def _summarize(result: TTestResult) -> TTestResult:
    logger.debug(
        "%s: t=%.6g, dof=%d, p=%.6g (%s), ci=[%.6g, %.6g]",
        result.test,
        result.t_value,
        result.dof,
        result.p_value,
        result.tail.value,
        result.ci[0],
        result.ci[1],
    )
    return result


def t_test1(
    x: Sequence[float],
    mu: float = 0.0,
    alpha: float = DEFAULT_ALPHA,
    tail: TailLike = DEFAULT_TAIL,
) -> TTestResult:
    """
    One-sample t-test for a mean.

    Args:
        x: Sample values
        mu: Population mean under the null hypothesis
        alpha: Significance level used for the ``1 - alpha`` confidence interval
        tail: "left", "right" or "both"

    Returns:
        TTestResult with ``dof = n - 1``, ``se = sd(x) / sqrt(n)`` and the
        interval ``mean(x) +/- qt(1 - alpha/2, dof) * se``

    Raises:
        ValueError: If `mu` is not a number, `x` has fewer than two values,
            `alpha` is outside ``(0, 1)``, `tail` is unknown, or `x` is constant
    """
    if not isinstance(mu, numbers.Real) or isinstance(mu, bool):
        raise ValueError(f"Parameter 'mu' should be a number, got {mu!r}")

    tail = as_tail(tail)
    _check_alpha(alpha)
    nx = _check_sample(x, "x")

    effect_observed = mean(x)
    se = sd(x, m=effect_observed) / math.sqrt(nx)
    _check_se(se, "'x'")

    t_value = (effect_observed - mu) / se
    dof = nx - 1
    err_margin = qt(1 - alpha / 2, dof) * se

    return _summarize(
        TTestResult(
            test="One sample t-test",
            effect_expected=float(mu),
            effect_observed=effect_observed,
            se=se,
            t_value=t_value,
            alpha=alpha,
            tail=tail,
            dof=dof,
            p_value=get_p_value(pt, t_value, tail, (dof,)),
            ci=(effect_observed - err_margin, effect_observed + err_margin),
        )
    )


def t_test2(
    x: Sequence[float],
    y: Sequence[float],
    alpha: float = DEFAULT_ALPHA,
    tail: TailLike = DEFAULT_TAIL,
) -> TTestResult:
    """
    Two-sample t-test for a difference of means.

    Args:
        x: Values of the first sample
        y: Values of the second sample
        alpha: Significance level used for the ``1 - alpha`` confidence interval
        tail: "left", "right" or "both"

    Returns:
        TTestResult for ``mean(x) - mean(y)`` with
        ``se = sqrt(var(x)/nx + var(y)/ny)`` and ``dof = (nx - 1) + (ny - 1)``

    Raises:
        ValueError: If a sample has fewer than two values, `alpha` is outside
            ``(0, 1)``, `tail` is unknown, or both samples are constant
    """
    tail = as_tail(tail)
    _check_alpha(alpha)
    nx = _check_sample(x, "x")
    ny = _check_sample(y, "y")

    mx = mean(x)
    my = mean(y)

    effect_expected = 0.0
    effect_observed = mx - my
    se = math.sqrt(variance(x, m=mx) / nx + variance(y, m=my) / ny)
    _check_se(se, "'x' and 'y'")

    t_value = (effect_observed - effect_expected) / se
    dof = (nx - 1) + (ny - 1)
    err_margin = qt(1 - alpha / 2, dof) * se

    return _summarize(
        TTestResult(
            test="Two sample t-test",
            effect_expected=effect_expected,
            effect_observed=effect_observed,
            se=se,
            t_value=t_value,
            alpha=alpha,
            tail=tail,
            dof=dof,
            p_value=get_p_value(pt, t_value, tail, (dof,)),
            ci=(effect_observed - err_margin, effect_observed + err_margin),
        )
    )
