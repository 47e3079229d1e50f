"""
quadstat — a small numerical statistics engine.

The package computes theoretical probability distributions (density,
cumulative and quantile functions) for the Uniform, Normal, Student-t and F
distributions, and classical one- and two-sample t-tests over in-memory
numeric sequences.

Everything is built from a compact numerical core rather than delegated to
library routines: an adaptive quadrature integrator, a handful of
special-function approximations (`erf`, `gamma`, `beta`, incomplete `beta`)
and rational approximations for the Normal and Student-t quantiles. Every
function is pure; scalar input yields a scalar, sequence input yields a list
of the same length.

Example
-------
>>> import quadstat
>>> assert hasattr(quadstat, "core")
>>> assert hasattr(quadstat, "stats")
>>> from quadstat.stats.hypothesis.ttest import t_test1
>>> t_test1([-2, -1, 0, 1, 2], mu=0).dof
4
"""

from quadstat import core, stats  # noqa: F401
