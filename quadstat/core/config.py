"""
quadstat.core.config
====================

Documented defaults for the numerical core.

Optional tolerances and test settings are collected here instead of being
scattered as literal default arguments:

- `QuadratureConfig`: accuracy settings for the adaptive integrator
- `DEFAULT_QUADRATURE`: the settings used by every CDF that integrates
- `DEFAULT_ALPHA`, `DEFAULT_TAIL`: defaults of the t-tests

Examples
--------
>>> from quadstat.core.config import QuadratureConfig, DEFAULT_QUADRATURE
>>> DEFAULT_QUADRATURE.acc, DEFAULT_QUADRATURE.eps, DEFAULT_QUADRATURE.max_depth
(1e-06, 1e-05, None)
>>> QuadratureConfig(max_depth=40).with_depth(None).max_depth is None
True
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from quadstat.core.names import Tail


@dataclass(frozen=True)
class QuadratureConfig:
    """
    Accuracy settings for adaptive quadrature.

    Attributes:
        acc: Absolute tolerance of the top-level interval
        eps: Relative tolerance (scaled by the magnitude of the local estimate)
        max_depth: Maximum number of bisections along any branch. ``None``
            leaves the recursion unbounded.
    """

    acc: float = 1e-6
    eps: float = 1e-5
    max_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.acc < 0:
            raise ValueError(f"Parameter 'acc' must be non-negative, got {self.acc}")
        if self.eps < 0:
            raise ValueError(f"Parameter 'eps' must be non-negative, got {self.eps}")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(
                f"Parameter 'max_depth' must be non-negative, got {self.max_depth}"
            )

    def with_depth(self, max_depth: Optional[int]) -> "QuadratureConfig":
        """Return a copy with a different depth guard."""
        return replace(self, max_depth=max_depth)


DEFAULT_QUADRATURE = QuadratureConfig()

# Significance level used for confidence intervals of the t-tests
DEFAULT_ALPHA = 0.05
DEFAULT_TAIL = Tail.BOTH
