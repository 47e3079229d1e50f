"""
quadstat.core.elementwise
=========================

Lift a scalar kernel to the two call shapes of the public API.

Every distribution and special function is written once, as a kernel over a
single number. `elementwise` wraps such a kernel so that the first argument
may also be a sequence: the kernel is then mapped over it and a list of the
same length and order is returned. All remaining arguments are passed through
unchanged to each call.

Examples
--------
>>> @elementwise
... def square(x: float) -> float:
...     return float(x * x)
>>> square(3)
9.0
>>> square([1, 2, 3])
[1.0, 4.0, 9.0]
>>> square(())
[]
"""

from __future__ import annotations
import functools
from collections.abc import Iterable
from typing import Any, Callable, List, TypeVar, Union

T = TypeVar("T")


def is_sequence(x: Any) -> bool:
    """True when `x` should be treated as a sequence of values."""
    return isinstance(x, Iterable) and not isinstance(x, (str, bytes))


def elementwise(
    kernel: Callable[..., T],
) -> Callable[..., Union[T, List[T]]]:
    """Wrap a scalar kernel so its first argument may be a sequence."""

    @functools.wraps(kernel)
    def wrapper(x: Any, *args: Any, **kwargs: Any) -> Union[T, List[T]]:
        if is_sequence(x):
            return [kernel(v, *args, **kwargs) for v in x]
        return kernel(x, *args, **kwargs)

    wrapper.kernel = kernel  # type: ignore[attr-defined]
    return wrapper
