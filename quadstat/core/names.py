"""
quadstat.core.names
===================

Typed names shared across the package.

- `Tail`: an Enum for the recognized p-value tail modes.
- `Number`, `NumberOrSequence`, `FloatOrList`: argument and result shapes of the
  elementwise public functions (a scalar, or a sequence mapped to a list).
- `as_tail()`: coerce a user-supplied tail (enum member or plain string).

Examples
--------
>>> from quadstat.core.names import Tail, as_tail
>>> Tail.BOTH.value
'both'
>>> as_tail("left") is Tail.LEFT
True
>>> Tail.RIGHT == "right"
True
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Union


class Tail(str, Enum):
    """Which tail(s) of a distribution a p-value is taken from.

    - LEFT: P(X <= crit)
    - RIGHT: P(X > crit)
    - BOTH: twice the smaller of the two one-sided probabilities
    """

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


TailLike = Union[Tail, str]

Number = Union[int, float]
NumberOrSequence = Union[Number, Iterable[Number]]
FloatOrList = Union[float, List[float]]


def as_tail(tail: TailLike) -> Tail:
    """Return `tail` as a `Tail` member, rejecting unknown names."""
    if isinstance(tail, Tail):
        return tail
    try:
        return Tail(tail)
    except ValueError:
        allowed = ", ".join(repr(t.value) for t in Tail)
        raise ValueError(
            f"Parameter 'tail' must be one of {allowed}, got {tail!r}"
        ) from None
