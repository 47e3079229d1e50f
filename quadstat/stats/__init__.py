"""
Statistical building blocks of quadstat.

The namespace is layered so that data flows upward only:

1. **Common** (quadstat.stats.common):
   The numerical core (adaptive quadrature, special functions) and the
   descriptive reductions (mean, variance, ...) consumed by the tests.

2. **Distributions** (quadstat.stats.distributions):
   Density / cumulative / quantile triples for the Uniform, Normal,
   Student-t and F distributions, built on the common layer.

3. **Hypothesis** (quadstat.stats.hypothesis):
   Tail logic for p-values and the one- and two-sample t-tests.

Example:
--------
>>> from quadstat.stats.distributions import pnorm, qt
>>> round(pnorm(0.0), 6)
0.5
>>> round(qt(0.975, 8), 4)
2.306
"""
