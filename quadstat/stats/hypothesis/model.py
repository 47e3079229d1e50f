"""
quadstat.stats.hypothesis.model
===============================

Typed result record of the t-tests.

Examples
--------
>>> from quadstat.core.names import Tail
>>> r = TTestResult(test="One sample t-test", effect_expected=0.0,
...                 effect_observed=0.5, se=0.25, t_value=2.0, alpha=0.05,
...                 tail=Tail.BOTH, dof=9, p_value=0.076, ci=(-0.07, 1.07))
>>> r.is_significant
False
>>> r.as_dict()["ci_upper"]
1.07
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from quadstat.core.names import Tail


@dataclass(frozen=True)
class TTestResult:
    """
    Outcome of a t-test.

    Attributes:
        test: Human-readable name of the test
        effect_expected: Effect under the null hypothesis
        effect_observed: Effect estimated from the sample(s)
        se: Standard error of the observed effect
        t_value: Test statistic ``(observed - expected) / se``
        alpha: Significance level used for the confidence interval
        tail: Tail the p-value was taken from
        dof: Degrees of freedom
        p_value: p-value in ``[0, 1]``
        ci: ``(lower, upper)`` confidence interval of the observed effect
    """

    test: str
    effect_expected: float
    effect_observed: float
    se: float
    t_value: float
    alpha: float
    tail: Tail
    dof: int
    p_value: float
    ci: Tuple[float, float]

    @property
    def is_significant(self) -> bool:
        """True when the p-value is below `alpha`."""
        return self.p_value < self.alpha

    def as_dict(self) -> Dict[str, Any]:
        """Flatten into plain values, splitting `ci` into two columns."""
        out = asdict(self)
        lower, upper = out.pop("ci")
        out["tail"] = self.tail.value
        out["ci_lower"] = lower
        out["ci_upper"] = upper
        return out
