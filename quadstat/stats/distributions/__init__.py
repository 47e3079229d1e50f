"""
Probability distributions.

Each distribution exposes a density (``d*``), a cumulative distribution
function (``p*``) and, where available, a quantile function (``q*``). All of
them accept a single number or a sequence as their first argument and return
the same shape.

Available distributions:
- `uniform`: dunif, punif
- `normal`: dnorm, pnorm, qnorm
- `student_t`: dt, pt, qt
- `fisher_f`: df, pf, qf
"""

from quadstat.stats.distributions.uniform import dunif, punif
from quadstat.stats.distributions.normal import dnorm, pnorm, qnorm
from quadstat.stats.distributions.student_t import dt, pt, qt
from quadstat.stats.distributions.fisher_f import df, pf, qf

__all__ = [
    "dunif",
    "punif",
    "dnorm",
    "pnorm",
    "qnorm",
    "dt",
    "pt",
    "qt",
    "df",
    "pf",
    "qf",
]
