"""
quadstat.reporting.ttest
========================

Reporter for t-test results.

Collects any number of `TTestResult` records and renders them as a Polars
table (one row per test) or plots a single result against its null
distribution.

Examples
--------
>>> from quadstat.stats.hypothesis import t_test1, t_test2
>>> from quadstat.reporting.ttest import TTestReporter
>>> rep = TTestReporter([
...     t_test1([-2, -1, 0, 1, 2]),
...     t_test2([-2, -1, 0, 1, 2], [-3, -2, -1, 0, 1]),
... ])
>>> rep.table().height
2
>>> rep.table()["dof"].to_list()
[4, 8]
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

import polars as pl

from quadstat.core.names import Tail
from quadstat.stats.distributions.student_t import dt, qt
from quadstat.stats.hypothesis.model import TTestResult

_COLUMNS = [
    "test",
    "effect_expected",
    "effect_observed",
    "se",
    "t_value",
    "dof",
    "tail",
    "alpha",
    "p_value",
    "ci_lower",
    "ci_upper",
]


@dataclass
class TTestReporter:
    """Summary view over a list of t-test results."""

    results: List[TTestResult] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: Sequence[TTestResult]) -> "TTestReporter":
        return cls(list(results))

    def add(self, result: TTestResult) -> None:
        """Append one more result."""
        self.results.append(result)

    def table(self) -> pl.DataFrame:
        """
        Returns one row per result with columns:
        - test, effect_expected, effect_observed, se, t_value, dof, tail,
          alpha, p_value, ci_lower, ci_upper
        - significant ('yes'/'no'), p_value < alpha
        """
        if not self.results:
            return pl.DataFrame(
                schema={
                    "test": pl.Utf8,
                    "effect_expected": pl.Float64,
                    "effect_observed": pl.Float64,
                    "se": pl.Float64,
                    "t_value": pl.Float64,
                    "dof": pl.Int64,
                    "tail": pl.Utf8,
                    "alpha": pl.Float64,
                    "p_value": pl.Float64,
                    "ci_lower": pl.Float64,
                    "ci_upper": pl.Float64,
                    "significant": pl.Utf8,
                }
            )

        df = pl.from_dicts([r.as_dict() for r in self.results]).select(_COLUMNS)
        return df.with_columns(
            pl.when(pl.col("p_value") < pl.col("alpha"))
            .then(pl.lit("yes"))
            .otherwise(pl.lit("no"))
            .alias("significant")
        )

    def plot(self, index: int = 0, show: bool = True, points: int = 400) -> None:
        """
        Plot the null t-distribution of one result.

        - The density of t with the result's degrees of freedom.
        - Rejection region(s) at level alpha for the result's tail, shaded.
        - The observed t-statistic as a vertical line.
        """
        import matplotlib.pyplot as plt

        result = self.results[index]
        dof = result.dof
        alpha = result.alpha

        if result.tail is Tail.BOTH:
            crit = [qt(alpha / 2, dof), qt(1 - alpha / 2, dof)]
        elif result.tail is Tail.LEFT:
            crit = [qt(alpha, dof)]
        else:
            crit = [qt(1 - alpha, dof)]

        span = max(4.0, abs(result.t_value) * 1.2, *(abs(c) * 1.2 for c in crit))
        xs = [-span + 2 * span * i / (points - 1) for i in range(points)]
        ys = dt(xs, dof)

        plt.figure(figsize=(6.5, 4.2))
        plt.plot(xs, ys, label=f"t density (dof={dof})")

        for c in crit:
            if c < 0:
                region = [(x, y) for x, y in zip(xs, ys) if x <= c]
            else:
                region = [(x, y) for x, y in zip(xs, ys) if x >= c]
            if region:
                rx, ry = zip(*region)
                plt.fill_between(rx, ry, alpha=0.3, color="red")
            plt.axvline(c, linestyle="--", linewidth=1, color="red")

        plt.axvline(
            result.t_value,
            color="black",
            label=f"observed t = {result.t_value:.3f} (p = {result.p_value:.3g})",
        )
        plt.xlabel("t")
        plt.ylabel("density")
        plt.title(result.test)
        plt.legend()
        plt.tight_layout()
        if show:
            plt.show()
