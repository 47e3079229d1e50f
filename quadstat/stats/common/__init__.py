"""
quadstat.stats.common
=====================

Numerical core shared by every distribution: the adaptive integrator,
special-function approximations and descriptive statistics.

The functions here know nothing about specific distributions or tests.
"""

from quadstat.stats.common.integrate import IntegrationDepthError, integrate
from quadstat.stats.common.special import beta, erf, gamma, ibeta, lgamma
from quadstat.stats.common.descriptive import cor, cov, mean, sd, variance

__all__ = [
    "IntegrationDepthError",
    "integrate",
    "beta",
    "erf",
    "gamma",
    "ibeta",
    "lgamma",
    "cor",
    "cov",
    "mean",
    "sd",
    "variance",
]
